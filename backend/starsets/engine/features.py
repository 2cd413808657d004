"""BlockFeatureExtractor — turns a block's transactions into scene inputs.

Rings come from positive-value transactions, in block order. The gas ratio
sizes the sun. Signature/recipient lookups classify a ring as NFT, ERC-20 or
a plain transfer; they only steer cosmetics and attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from starsets.exceptions import InvalidBlockData
from starsets.models.block import Block

ERC20_PREFIXES = frozenset({
    "0xa9059cbb",  # transfer(address,uint256)
    "0x23b872dd",  # transferFrom(address,address,uint256)
    "0x18160ddd",  # totalSupply()
    "0x70a08231",  # balanceOf(address)
    "0xdd62ed3e",  # allowance(address,address)
    "0x095ea7b3",  # approve(address,uint256)
})

NFT_PREFIXES = frozenset({
    "0x1249c58b",
    "0x672a9400",
    "0x40c10f19",
    "0x449a52f8",
    "0xa140ae23",
})

NFT_MARKET_ADDRESSES = frozenset({
    "0xaa84f7c9164db5c11b9fa65ad0118977c12a4729",
    "0xb80fbf6cdb49c33dc6ae4ca11af8ac47b0b4c0f3",
    "0x495f947276749ce646f68ac8c248420045cb7b5e",
    "0x60f80121c31a0d46b5279700f9df786054aa5ee5",
    "0x3b3ee1931dc30c1957379fac9aba94d1c48a5405",
    "0x2a46f2ffd99e19a89476e2f62270e0a35bbf0756",
    "0xfbeef911dc5821886e1dda71586d90ed28174b7d",
    "0xa7d8d9ef8d8ce8992df33d8b8cf4aebabd5bd270",
    "0xb932a70a57673d89f4acffbe830e8ed7f75fb9e0",
    "0xb47e3cd837ddf8e4c57f05d70ab865de6e193bbb",
    "0xbc4ca0eda7647a8ab7c2061c2e118a18a936f13d",
    "0x06012c8cf97bead5deae237070f9587f8e7a266d",
    "0xf5b0a3efb8e8e4c201e2a935f110eaaf3ffecb8d",
})


def is_erc20(prefix: str) -> bool:
    return prefix in ERC20_PREFIXES


def is_nft(prefix: str, to: str) -> bool:
    return prefix in NFT_PREFIXES or to in NFT_MARKET_ADDRESSES


def classify(prefix: str, to: str) -> str:
    """``"nft"``, ``"erc20"`` or ``"transfer"``. NFT wins when both match."""
    if is_nft(prefix, to):
        return "nft"
    if is_erc20(prefix):
        return "erc20"
    return "transfer"


@dataclass(frozen=True)
class RingDescriptor:
    value: int
    data_prefix: str
    to: str

    @property
    def kind(self) -> str:
        return classify(self.data_prefix, self.to)


@dataclass(frozen=True)
class BlockFeatures:
    rings: tuple[RingDescriptor, ...] = field(default_factory=tuple)
    max_value: int = 0
    gas_ratio: float = 0.0
    gas_used: int = 0
    gas_limit: int = 1

    @property
    def nft_count(self) -> int:
        return sum(1 for r in self.rings if r.kind == "nft")

    @property
    def erc20_count(self) -> int:
        return sum(1 for r in self.rings if r.kind == "erc20")


def extract_features(block: Block) -> BlockFeatures:
    """Aggregate ring descriptors, the largest value and the gas ratio."""
    if block.gas_limit <= 0:
        raise InvalidBlockData(f"gasLimit must be positive, got {block.gas_limit}")
    if block.gas_used < 0:
        raise InvalidBlockData(f"gasUsed must be non-negative, got {block.gas_used}")

    rings: list[RingDescriptor] = []
    max_value = 0
    for i, txn in enumerate(block.transactions):
        if txn.value < 0:
            raise InvalidBlockData(f"transaction {i} has negative value {txn.value}")
        if txn.value > 0:
            rings.append(RingDescriptor(txn.value, txn.data_prefix, txn.to or ""))
        if txn.value > max_value:
            max_value = txn.value

    gas_ratio = min(1.0, block.gas_used / block.gas_limit)
    return BlockFeatures(
        rings=tuple(rings),
        max_value=max_value,
        gas_ratio=gas_ratio,
        gas_used=block.gas_used,
        gas_limit=block.gas_limit,
    )
