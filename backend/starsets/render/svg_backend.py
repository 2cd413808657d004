"""SVG rendering backend — one dispatch function over the closed shape set."""

from __future__ import annotations

from typing import Any

from starsets.shapes.primitives import Disc, GradientBand, RidgeTerrain, RingLine, Shape
from starsets.shapes.scene import Scene
from starsets.svg.serializer import serialize_svg
from starsets.utils.color import Color

SceneElement = dict[str, Any]


def _n(value: float) -> str:
    return f"{value:.2f}"


def _paint(color: Color) -> tuple[str, str]:
    """Hex colour plus opacity, the form every SVG renderer accepts."""
    return color.to_hex(), f"{color.a:.4g}"


def _rect(x: float, y: float, w: float, h: float, color: Color) -> SceneElement:
    fill, opacity = _paint(color)
    return {
        "tag": "rect",
        "x": _n(x),
        "y": _n(y),
        "width": _n(w),
        "height": _n(h),
        "fill": fill,
        "fill-opacity": opacity,
    }


def _line(x1: float, y1: float, x2: float, y2: float, color: Color) -> SceneElement:
    stroke, opacity = _paint(color)
    return {
        "tag": "line",
        "x1": _n(x1),
        "y1": _n(y1),
        "x2": _n(x2),
        "y2": _n(y2),
        "stroke": stroke,
        "stroke-opacity": opacity,
        "stroke-width": "1",
    }


def _gradient(band: GradientBand, width: float) -> list[SceneElement]:
    if band.is_solid:
        return [_rect(0, band.top_y, width, band.bottom_y - band.top_y, band.top_color)]
    return [_line(0, y, width, y, color) for y, color in band.rows()]


def _disc(disc: Disc) -> list[SceneElement]:
    fill, opacity = _paint(disc.color)
    return [{
        "tag": "circle",
        "cx": _n(disc.x),
        "cy": _n(disc.y),
        "r": _n(disc.radius),
        "fill": fill,
        "fill-opacity": opacity,
    }]


def _ring(ring: RingLine) -> list[SceneElement]:
    return [_line(x1, y1, x2, y2, c) for x1, y1, x2, y2, c in ring.strokes()]


def _ridge(ridge: RidgeTerrain) -> list[SceneElement]:
    outline = ridge.outline()
    if not outline:
        return []
    start = outline[0]
    parts = [f"M {_n(start[0])} {_n(start[1])}"]
    for _, c1, c2, end in ridge.bezier_segments():
        parts.append(
            f"C {_n(c1[0])} {_n(c1[1])} {_n(c2[0])} {_n(c2[1])} {_n(end[0])} {_n(end[1])}"
        )
    for x, y in outline[-2:]:
        parts.append(f"L {_n(x)} {_n(y)}")
    parts.append("Z")
    fill, opacity = _paint(ridge.color)
    return [{"tag": "path", "d": " ".join(parts), "fill": fill, "fill-opacity": opacity}]


def shape_to_elements(shape: Shape, canvas_width: float) -> list[SceneElement]:
    """Translate one shape into SVG element dicts."""
    if isinstance(shape, GradientBand):
        return _gradient(shape, canvas_width)
    if isinstance(shape, Disc):
        return _disc(shape)
    if isinstance(shape, RingLine):
        return _ring(shape)
    if isinstance(shape, RidgeTerrain):
        return _ridge(shape)
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def scene_to_elements(scene: Scene) -> list[SceneElement]:
    """Canvas root colour, palette backdrop, then every shape in compositing order."""
    elements = [
        _rect(0, 0, scene.width, scene.height, scene.background),
        _rect(0, 0, scene.width, scene.height, scene.backdrop),
    ]
    for shape in scene.shapes():
        elements.extend(shape_to_elements(shape, scene.width))
    return elements


def scene_to_svg(scene: Scene, title: str = "", description: str = "") -> str:
    return serialize_svg(
        scene_to_elements(scene),
        canvas_w=scene.width,
        canvas_h=scene.height,
        title=title,
        description=description,
    )
