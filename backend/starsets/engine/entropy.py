"""EntropySource — the only source of randomness for a render.

One instance per render, seeded from the block hash. Every draw advances a
cursor (``draws``) so the pipeline can verify that each layer consumed exactly
the number of values it is contracted to.
"""

from __future__ import annotations

import logging
from typing import MutableSequence, TypeVar

import numpy as np

from starsets.exceptions import InvalidBlockData

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Hex characters of the block hash that form the 64-bit seed.
SEED_HEX_CHARS = 16


def seed_from_hash(block_hash: str) -> int:
    """First 16 hex characters of the hash (after an optional 0x) as an unsigned int."""
    if not isinstance(block_hash, str):
        raise InvalidBlockData("block hash must be a hex string")
    digits = block_hash[2:] if block_hash.lower().startswith("0x") else block_hash
    head = digits[:SEED_HEX_CHARS]
    if len(head) < SEED_HEX_CHARS:
        raise InvalidBlockData(
            f"block hash needs at least {SEED_HEX_CHARS} hex characters, got {len(head)}"
        )
    try:
        return int(head, 16)
    except ValueError as e:
        raise InvalidBlockData(f"block hash is not hex: {block_hash!r}") from e


class EntropySource:
    """Seeded MT19937 stream with a draw cursor.

    The first output after seeding is discarded; consumers start at draw #2.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rng = np.random.Generator(np.random.MT19937(seed))
        self.draws = 0
        # Burn one
        self._rng.random()
        logger.debug("EntropySource seeded with %016x", seed)

    @classmethod
    def from_hash(cls, block_hash: str) -> EntropySource:
        return cls(seed_from_hash(block_hash))

    def next(self) -> float:
        """Uniform float in [0, 1)."""
        self.draws += 1
        return float(self._rng.random())

    def next_int(self, bound: int) -> int:
        """Uniform integer in [0, bound)."""
        if bound <= 0:
            raise ValueError("bound must be positive")
        return min(int(self.next() * bound), bound - 1)

    def uniform(self, low: float, high: float) -> float:
        """Uniform float between ``low`` and ``high`` (either order)."""
        return low + self.next() * (high - low)

    def next_gaussian(self, mean: float = 0.0, stdev: float = 1.0) -> float:
        self.draws += 1
        return float(self._rng.normal(mean, abs(stdev)))

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher–Yates in place: i from n-1 down to 1, swap with j in [0, i]."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(i + 1)
            items[i], items[j] = items[j], items[i]
        return items
