"""Scene shapes — immutable geometry + colour, independent of any backend.

The set is closed: GradientBand, Disc, RingLine and RidgeTerrain. RingGroup is
a container that flattens into RingLines. Backends dispatch on type.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Union

from shapely.geometry import Polygon

from starsets.utils.color import Color, lerp_color
from starsets.utils.math_helpers import circles_collide, map_range

Point = tuple[float, float]
BezierSegment = tuple[Point, Point, Point, Point]

# Alpha of the halo lines drawn either side of a ring.
RING_GLOW_ALPHA = 0.1


def _r(value: float) -> float:
    return round(float(value), 6)


@dataclass(frozen=True)
class GradientBand:
    """Full-width vertical gradient between ``top_y`` and ``bottom_y``.

    ``top_color_y``/``bottom_color_y`` are the gradient ends; beyond them the
    band is solid ``top_color`` or ``bottom_color``.
    """

    top_y: float
    bottom_y: float
    top_color: Color
    bottom_color: Color
    top_color_y: float
    bottom_color_y: float

    @property
    def is_solid(self) -> bool:
        return self.top_color_y == self.bottom_color_y

    def color_at(self, y: float) -> Color:
        if self.is_solid:
            return self.top_color
        t = map_range(y, self.top_color_y, self.bottom_color_y, 0.0, 1.0, clamp=True)
        return lerp_color(self.top_color, self.bottom_color, t)

    def rows(self) -> Iterator[tuple[float, Color]]:
        """One horizontal line per pixel row, top to bottom inclusive."""
        y = self.top_y
        while y <= self.bottom_y:
            yield y, self.color_at(y)
            y += 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "gradient_band",
            "top_y": _r(self.top_y),
            "bottom_y": _r(self.bottom_y),
            "top_color": self.top_color.to_dict(),
            "bottom_color": self.bottom_color.to_dict(),
            "top_color_y": _r(self.top_color_y),
            "bottom_color_y": _r(self.bottom_color_y),
        }


@dataclass(frozen=True)
class Disc:
    """Filled circle: a sun or a moon."""

    x: float
    y: float
    diameter: float
    color: Color

    @property
    def radius(self) -> float:
        return self.diameter / 2

    def overlaps(self, other: Disc) -> bool:
        return circles_collide(self.x, self.y, self.diameter, other.x, other.y, other.diameter)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "disc",
            "x": _r(self.x),
            "y": _r(self.y),
            "diameter": _r(self.diameter),
            "color": self.color.to_dict(),
        }


@dataclass(frozen=True)
class RingLine:
    """A ``width``-pixel band swept from (x1, y1) to (x2, y2), with a faint glow."""

    x1: float
    y1: float
    x2: float
    y2: float
    width: int
    color: Color
    kind: str = "transfer"

    @property
    def glow_color(self) -> Color:
        return self.color.with_alpha(RING_GLOW_ALPHA)

    def strokes(self) -> Iterator[tuple[float, float, float, float, Color]]:
        """Glow lines first, then one body line per pixel of width."""
        for off in (-2, -1, self.width, self.width + 1):
            yield (self.x1 + off, self.y1, self.x2 + off, self.y2, self.glow_color)
        for off in range(self.width):
            yield (self.x1 + off, self.y1, self.x2 + off, self.y2, self.color)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "ring_line",
            "x1": _r(self.x1),
            "y1": _r(self.y1),
            "x2": _r(self.x2),
            "y2": _r(self.y2),
            "width": self.width,
            "color": self.color.to_dict(),
            "kind": self.kind,
        }


@dataclass(frozen=True)
class RingGroup:
    """Rings sharing one axis, in transaction order."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: Color
    spread: float
    rings: tuple[RingLine, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "ring_group",
            "x1": _r(self.x1),
            "y1": _r(self.y1),
            "x2": _r(self.x2),
            "y2": _r(self.y2),
            "color": self.color.to_dict(),
            "spread": _r(self.spread),
            "rings": [r.to_dict() for r in self.rings],
        }


@dataclass(frozen=True)
class RidgeTerrain:
    """Mountain silhouette. ``vertices`` are relative to (x_pos, y_pos)."""

    x_pos: float
    y_pos: float
    vertices: tuple[Point, ...]
    tightness: float
    color: Color
    height: float
    slope: float = 0.0

    def points(self) -> list[Point]:
        return [(self.x_pos + x, self.y_pos + y) for x, y in self.vertices]

    def outline(self) -> list[Point]:
        """Ridge points closed straight down by ``height`` below the last vertex."""
        pts = self.points()
        if not pts:
            return []
        floor_y = pts[-1][1] + self.height
        return pts + [(pts[-1][0], floor_y), (pts[0][0], floor_y)]

    def polygon(self) -> Polygon:
        outline = self.outline()
        if len(outline) < 3:
            return Polygon()
        poly = Polygon(outline)
        if not poly.is_valid:
            poly = poly.buffer(0)
        return poly

    def bezier_segments(self) -> list[BezierSegment]:
        """Catmull–Rom through the ridge points as cubic Béziers.

        End points are repeated so the curve passes through every vertex.
        """
        pts = self.points()
        if len(pts) < 2:
            return []
        padded = [pts[0]] + pts + [pts[-1]]
        k = (1.0 - self.tightness) / 6.0
        segments: list[BezierSegment] = []
        for i in range(1, len(padded) - 2):
            p0, p1, p2, p3 = padded[i - 1], padded[i], padded[i + 1], padded[i + 2]
            c1 = (p1[0] + k * (p2[0] - p0[0]), p1[1] + k * (p2[1] - p0[1]))
            c2 = (p2[0] - k * (p3[0] - p1[0]), p2[1] - k * (p3[1] - p1[1]))
            segments.append((p1, c1, c2, p2))
        return segments

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "ridge_terrain",
            "x_pos": _r(self.x_pos),
            "y_pos": _r(self.y_pos),
            "vertices": [[_r(x), _r(y)] for x, y in self.vertices],
            "tightness": _r(self.tightness),
            "color": self.color.to_dict(),
            "height": _r(self.height),
            "slope": _r(self.slope),
        }


Shape = Union[GradientBand, Disc, RingLine, RidgeTerrain]
