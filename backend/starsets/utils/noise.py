"""Coherent 1-D noise over OpenSimplex, shaped like a classic fractal Perlin ``noise(x)``."""

from __future__ import annotations

import opensimplex

# Largest value strictly below 1.0, keeps the output half-open.
_BELOW_ONE = 1.0 - 2.0 ** -53

_INT64_MASK = 0x7FFFFFFFFFFFFFFF


class CoherentNoise:
    """Deterministic fractal noise in [0, 1) for a single numeric argument.

    Octave ``k`` samples at frequency ``2**k`` with amplitude ``falloff**(k+1)``;
    the weighted sum is normalized by the total amplitude.
    """

    def __init__(self, seed: int, octaves: int = 4, falloff: float = 0.5) -> None:
        if octaves < 1:
            raise ValueError("octaves must be >= 1")
        self.seed = seed & _INT64_MASK
        self.octaves = octaves
        self.falloff = falloff
        self._simplex = opensimplex.OpenSimplex(seed=self.seed)

    def __call__(self, x: float) -> float:
        total = 0.0
        weight = 0.0
        amplitude = self.falloff
        frequency = 1.0
        for _ in range(self.octaves):
            sample = (self._simplex.noise2(x * frequency, 0.0) + 1.0) / 2.0
            total += sample * amplitude
            weight += amplitude
            amplitude *= self.falloff
            frequency *= 2.0
        value = total / weight
        return min(_BELOW_ONE, max(0.0, value))
