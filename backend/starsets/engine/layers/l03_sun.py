"""L03 — Sun. Diameter from gasUsed/gasLimit, placed just above the horizon."""

from __future__ import annotations

from starsets.engine.context import SceneContext
from starsets.engine.registry import layer
from starsets.shapes.primitives import Disc
from starsets.utils.color import Color
from starsets.utils.math_helpers import map_range


@layer(
    id="L03",
    name="sun",
    order=3,
    dependencies=["L02"],
    draws=2,
    description="Sun disc sized by block fullness",
)
def sun(ctx: SceneContext) -> None:
    cfg = ctx.config
    base = ctx.require_palette().sun

    diameter = map_range(
        ctx.features.gas_ratio,
        0,
        1,
        ctx.width * cfg.sun_min_pct,
        ctx.width * cfg.sun_max_pct,
        clamp=True,
    )
    y = ctx.entropy.uniform(ctx.ground_top_y - diameter * cfg.sun_band_pct, ctx.ground_top_y)
    x = ctx.entropy.uniform(0, ctx.width)
    color = Color.from_hsl(base.h, max(base.s, cfg.sun_min_saturation), cfg.sun_lightness)
    ctx.sun = Disc(x=x, y=y, diameter=diameter, color=color)
