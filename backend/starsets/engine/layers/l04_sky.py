"""L04 — Sky. Palette sky at the top fading to a darker sun hue by the sun's height."""

from __future__ import annotations

from starsets.engine.context import SceneContext
from starsets.engine.registry import layer
from starsets.shapes.primitives import GradientBand
from starsets.utils.color import Color


@layer(
    id="L04",
    name="sky",
    order=4,
    dependencies=["L03"],
    draws=0,
    description="Sky gradient from the top of the canvas to just above the horizon",
)
def sky(ctx: SceneContext) -> None:
    cfg = ctx.config
    sun = ctx.sun
    bottom = Color.from_hsl(
        sun.color.h,
        cfg.sky_bottom_saturation,
        sun.color.l - cfg.sky_bottom_darken,
    )
    ctx.sky = GradientBand(
        top_y=0,
        bottom_y=ctx.ground_top_y - 1,
        top_color=ctx.require_palette().sky,
        bottom_color=bottom,
        top_color_y=0,
        bottom_color_y=sun.y,
    )
