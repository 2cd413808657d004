"""Block and transaction input models.

The core treats both as read-only; they are frozen so a render cannot mutate
the caller's block.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from starsets.exceptions import InvalidBlockData

# "0x" + 4-byte function selector
_SIGNATURE_LEN = 10


def parse_quantity(value: Any) -> int:
    """Parse an integer quantity in any shape a block JSON dump uses.

    Accepts ints, decimal or ``0x`` hex strings, and ethers.js BigNumber
    objects (``{"type": "BigNumber", "hex": "0x..."}`` or ``{"_hex": ...}``).
    """
    if isinstance(value, bool):
        raise ValueError("boolean is not a quantity")
    if isinstance(value, int):
        return value
    if isinstance(value, dict):
        for key in ("hex", "_hex"):
            if key in value:
                return parse_quantity(value[key])
        raise ValueError(f"BigNumber object without hex field: {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith(("0x", "-0x")):
            return int(text, 16)
        return int(text, 10)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"Cannot parse quantity: {value!r}")


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    value: int = 0
    data_prefix: str = Field(default="", alias="dataPrefix")
    to: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _quantity(cls, v: Any) -> int:
        return parse_quantity(v)

    @field_validator("data_prefix", mode="before")
    @classmethod
    def _signature(cls, v: Any) -> str:
        if not isinstance(v, str):
            return ""
        return v[:_SIGNATURE_LEN].lower()

    @field_validator("to", mode="before")
    @classmethod
    def _recipient(cls, v: Any) -> str:
        # Contract creations have no recipient; anything malformed reads as empty.
        if isinstance(v, str):
            return v.lower()
        return ""


class Block(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hash: str
    gas_limit: int = Field(alias="gasLimit")
    gas_used: int = Field(alias="gasUsed")
    transactions: tuple[Transaction, ...] = ()
    number: int | None = None

    @field_validator("gas_limit", "gas_used", "number", mode="before")
    @classmethod
    def _quantity(cls, v: Any) -> int | None:
        if v is None:
            return None
        return parse_quantity(v)

    @classmethod
    def from_ethers(cls, payload: dict[str, Any]) -> Block:
        """Build from an ethers.js ``getBlockWithTransactions`` JSON dump."""
        try:
            txns = []
            for raw in payload.get("transactions", []):
                if not isinstance(raw, dict):
                    # Hash-only transaction lists carry no value/recipient data.
                    continue
                txns.append(
                    Transaction(
                        value=raw.get("value", 0),
                        data_prefix=raw.get("data", raw.get("input", raw.get("dataPrefix", ""))),
                        to=raw.get("to"),
                    )
                )
            return cls(
                hash=payload["hash"],
                gas_limit=payload["gasLimit"],
                gas_used=payload["gasUsed"],
                transactions=tuple(txns),
                number=payload.get("number"),
            )
        except KeyError as e:
            raise InvalidBlockData(f"block is missing field {e.args[0]!r}") from e
        except ValidationError as e:
            raise InvalidBlockData(f"malformed block: {e}") from e


def load_block(path: str | Path) -> Block:
    """Read a block JSON dump from disk."""
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    return Block.from_ethers(payload)
