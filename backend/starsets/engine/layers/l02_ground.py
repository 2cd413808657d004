"""L02 — Ground. Bottom band in the ground hue at the horizon saturation."""

from __future__ import annotations

from starsets.engine.context import SceneContext
from starsets.engine.registry import layer
from starsets.shapes.primitives import GradientBand
from starsets.utils.color import Color
from starsets.utils.math_helpers import map_range


@layer(
    id="L02",
    name="ground",
    order=2,
    dependencies=["L01"],
    draws=0,
    description="Ground gradient occupying the bottom of the canvas",
)
def ground(ctx: SceneContext) -> None:
    cfg = ctx.config
    base = ctx.require_palette().ground

    # Ground height percentage -> y, measured from the bottom of the canvas
    ctx.ground_top_y = map_range(cfg.ground_height_pct, 0, 1, ctx.height, 0)

    color = Color.from_hsl(base.h, cfg.horizon_saturation, base.l)
    ctx.ground = GradientBand(
        top_y=ctx.ground_top_y,
        bottom_y=ctx.height,
        top_color=color,
        bottom_color=color,
        top_color_y=ctx.ground_top_y + cfg.ground_gradient_top_offset,
        bottom_color_y=ctx.height - cfg.ground_gradient_bottom_inset,
    )
