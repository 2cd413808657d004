"""Shared test fixtures."""

from __future__ import annotations

import pytest

from starsets.models.block import Block, Transaction

HASH_A = "0x4d3f2ed35ac6e1ae7b0cbbc5f3a6ef81e4c7d94e2a5f0b1c9d8e7f6a5b4c3d2e"
HASH_B = "0x9b1c0a7e55d24f3680c1e2d3f4a5b6c7d8e9f0a1b2c3d4e5f60718293a4b5c6d"

ONE_ETH = 10 ** 18

# ethers.js getBlockWithTransactions shape, as the style sketch receives it
SAMPLE_BLOCK = {
    "hash": HASH_A,
    "number": 12345678,
    "gasLimit": {"type": "BigNumber", "hex": "0xe4e1c0"},
    "gasUsed": {"type": "BigNumber", "hex": "0x9b2a6f"},
    "transactions": [
        {
            "value": {"type": "BigNumber", "hex": "0x2386f26fc10000"},
            "data": "0x",
            "to": "0x7A250D5630B4CF539739DF2C5DACB4C659F2488D",
        },
        {
            "value": {"type": "BigNumber", "hex": "0x00"},
            "data": "0xa9059cbb000000000000000000000000f39fd6e51aad88f6f4ce6ab8827279cfffb92266",
            "to": "0xdAC17F958D2ee523a2206206994597C13D831ec7",
        },
        {
            "value": {"type": "BigNumber", "hex": "0x0de0b6b3a7640000"},
            "data": "0xab834bab",
            "to": "0x7Be8076f4EA4A4AD08075C2508e481d6C946D12b",
        },
        {
            "value": {"type": "BigNumber", "hex": "0x016345785d8a0000"},
            "data": "0x40c10f19",
            "to": "0x495f947276749Ce646f68AC8c248420045cb7b5e",
        },
        {
            "value": {"type": "BigNumber", "hex": "0x00"},
            "data": "0x",
            "to": None,
        },
    ],
}


def make_block(
    values: list[int] | tuple[int, ...] = (),
    hash: str = HASH_A,
    gas_used: int = 5_000_000,
    gas_limit: int = 15_000_000,
    prefixes: list[str] | None = None,
    recipients: list[str | None] | None = None,
) -> Block:
    prefixes = prefixes or ["0x"] * len(values)
    recipients = recipients or ["0x00000000000000000000000000000000000000aa"] * len(values)
    txns = tuple(
        Transaction(value=v, data_prefix=p, to=r)
        for v, p, r in zip(values, prefixes, recipients)
    )
    return Block(hash=hash, gas_limit=gas_limit, gas_used=gas_used, transactions=txns)


@pytest.fixture
def sample_block() -> Block:
    return Block.from_ethers(SAMPLE_BLOCK)


@pytest.fixture
def busy_block() -> Block:
    return make_block([5 * ONE_ETH, 0, 20 * ONE_ETH, 3 * ONE_ETH, ONE_ETH // 10])
