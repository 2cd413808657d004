"""Scene — one render's ordered composition of shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from starsets.shapes.primitives import Disc, GradientBand, RidgeTerrain, RingGroup, Shape
from starsets.utils.color import Color


@dataclass(frozen=True)
class Scene:
    width: int
    height: int
    # Modifier colour at the canvas root, then the palette sky across the canvas.
    background: Color
    backdrop: Color
    palette_name: str
    sky: GradientBand
    ground: GradientBand
    sun: Disc
    moons: tuple[Disc, ...]
    rings: RingGroup
    mountain: RidgeTerrain
    eclipsed_moons: int = 0
    seed: int = field(default=0, compare=False)

    def shapes(self) -> list[Shape]:
        """Compositing order: sky, sun, moons, rings, mountain, ground (ground on top)."""
        ordered: list[Shape] = [self.sky, self.sun]
        ordered.extend(self.moons)
        ordered.extend(self.rings.rings)
        ordered.append(self.mountain)
        ordered.append(self.ground)
        return ordered

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "seed": f"{self.seed:016x}",
            "background": self.background.to_dict(),
            "backdrop": self.backdrop.to_dict(),
            "palette": self.palette_name,
            "sky": self.sky.to_dict(),
            "sun": self.sun.to_dict(),
            "moons": [m.to_dict() for m in self.moons],
            "rings": self.rings.to_dict(),
            "mountain": self.mountain.to_dict(),
            "ground": self.ground.to_dict(),
            "eclipsed_moons": self.eclipsed_moons,
        }
