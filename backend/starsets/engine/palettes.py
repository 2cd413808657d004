"""PaletteCatalog — the fixed table of five-colour palettes.

Roles are assigned by position after a per-render shuffle:
sky, ground, sun, mountain, moon.
"""

from __future__ import annotations

from dataclasses import dataclass

from starsets.engine.entropy import EntropySource
from starsets.utils.color import Color
from starsets.utils.math_helpers import clamp_unit

ROLES = ("sky", "ground", "sun", "mountain", "moon")


@dataclass(frozen=True)
class Palette:
    name: str
    colors: tuple[Color, Color, Color, Color, Color]

    @classmethod
    def from_hex(cls, name: str, *hex_colors: str) -> Palette:
        if len(hex_colors) != len(ROLES):
            raise ValueError(f"Palette {name!r} needs {len(ROLES)} colours")
        return cls(name, tuple(Color.from_hex(h) for h in hex_colors))

    def shuffled(self, entropy: EntropySource) -> Palette:
        """Copy with the colours permuted by the entropy stream (4 draws)."""
        colors = list(self.colors)
        entropy.shuffle(colors)
        return Palette(self.name, tuple(colors))

    def role(self, name: str) -> Color:
        return self.colors[ROLES.index(name)]

    @property
    def sky(self) -> Color:
        return self.colors[0]

    @property
    def ground(self) -> Color:
        return self.colors[1]

    @property
    def sun(self) -> Color:
        return self.colors[2]

    @property
    def mountain(self) -> Color:
        return self.colors[3]

    @property
    def moon(self) -> Color:
        return self.colors[4]


PALETTES: tuple[Palette, ...] = (
    Palette.from_hex("Genesis", "#96bcc7", "#2a4e57", "#f1a287", "#763621", "#7a6174"),
    Palette.from_hex("Neon Quadratic", "#256dfa", "#8753fc", "#b333f2", "#cb16d9", "#d716b5"),
    Palette.from_hex(
        "Blue to Orange Segmented", "#06008a", "#6e1374", "#a2305b", "#cf4e3e", "#fa6d01"
    ),
    Palette.from_hex(
        "Dusty Dusk Quadratic", "#aa6173", "#827561", "#6f7973", "#627a86", "#866d99"
    ),
    Palette.from_hex(
        "Orange is the New Black", "#0f0907", "#6a574f", "#b6816a", "#e98658", "#f65a03"
    ),
    Palette.from_hex(
        "Greens of Blue and Yellow Polygon", "#025450", "#03250b", "#697049", "#c3e2bc", "#8ecfc5"
    ),
    Palette.from_hex("Pastel Segment", "#fcc2d1", "#efcfaa", "#b5debd", "#9adef0", "#d5cffa"),
)


def all_palettes() -> tuple[Palette, ...]:
    return PALETTES


def palette_index(mod2: float, count: int | None = None) -> int:
    """floor(mod2 * count), clamped to a valid index."""
    count = len(PALETTES) if count is None else count
    idx = int(clamp_unit(mod2) * count)
    return min(max(idx, 0), count - 1)


def select_palette(index: int) -> Palette:
    index = min(max(index, 0), len(PALETTES) - 1)
    return PALETTES[index]
