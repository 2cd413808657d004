"""L07 — Mountain ridge.

Vertices every ``x_res`` pixels from one step left of the canvas to two steps
past the right edge. Height is noise scaled by a random amplitude plus an
accumulating slope, clamped so the ridge never dips below the horizon.
"""

from __future__ import annotations

from starsets.engine.context import SceneContext
from starsets.engine.registry import layer
from starsets.shapes.primitives import RidgeTerrain
from starsets.utils.color import Color


@layer(
    id="L07",
    name="mountain",
    order=7,
    dependencies=["L02", "L04", "L06"],
    draws=4,
    description="Noise-driven ridge above the horizon",
)
def mountain(ctx: SceneContext) -> None:
    cfg = ctx.config
    rng = ctx.entropy
    base = ctx.require_palette().mountain

    x_res = rng.uniform(*cfg.mountain_x_res)
    height_scale = rng.uniform(*cfg.mountain_height_scale)
    noise_scale = rng.uniform(*cfg.mountain_noise_scale)
    slope = rng.uniform(*cfg.mountain_slope)

    horizon = ctx.ground.top_y
    y_pos = ctx.sky.bottom_y - ctx.height * (cfg.mountain_slope_lift * slope ** 2 + cfg.mountain_base_pct)
    x_pos = -x_res
    x_max = ctx.width
    noise_base = cfg.mountain_noise_x_offset * ctx.width

    vertices: list[tuple[float, float]] = []
    y = 0.0
    i = 0
    x = x_pos
    while x < x_max + 2 * x_res:
        y = ctx.noise(noise_base + x * noise_scale) * height_scale + i * slope
        if y > horizon - y_pos:
            y = horizon - y_pos
        vertices.append((x - x_pos, y))
        i += 1
        x += x_res

    # Drawn left to right: an upward slope would otherwise start off the baseline
    if slope < 0:
        y_pos -= y

    ctx.mountain = RidgeTerrain(
        x_pos=x_pos,
        y_pos=y_pos,
        vertices=tuple(vertices),
        tightness=cfg.mountain_tightness,
        color=Color.from_hsl(base.h, cfg.horizon_saturation, base.l),
        height=ctx.height,
        slope=slope,
    )
