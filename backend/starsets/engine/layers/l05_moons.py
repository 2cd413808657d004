"""L05 — Moons.

A fixed pool of quadruples (lightness, diameter, x, y) is drawn before any
moon is chosen, so the number of draws does not depend on mod3. Moons are
taken from the end of the pool. A moon overlapping the sun is dimmed.
"""

from __future__ import annotations

from starsets.engine.context import SceneContext
from starsets.engine.registry import layer
from starsets.shapes.primitives import Disc
from starsets.utils.color import Color
from starsets.utils.math_helpers import clamp_unit


def moon_count(mod3: float, moons_max: int) -> int:
    return min(max(int(clamp_unit(mod3) * moons_max), 0), moons_max)


@layer(
    id="L05",
    name="moons",
    order=5,
    dependencies=["L03", "L04"],
    draws=lambda ctx: ctx.config.moon_pool_size * 4,
    description="Zero to four moons, dimmed when in front of the sun",
)
def moons(ctx: SceneContext) -> None:
    cfg = ctx.config
    base = ctx.require_palette().moon
    sun = ctx.sun
    rng = ctx.entropy

    d_low, d_high = cfg.moon_diameter_pct
    pool: list[float] = []
    for _ in range(cfg.moon_pool_size):
        pool.append(rng.uniform(cfg.moon_min_lightness, base.l))
        pool.append(rng.uniform(ctx.width * d_low, ctx.width * d_high))
        pool.append(rng.uniform(0, ctx.width))
        pool.append(rng.uniform(0, ctx.ground_top_y))

    saturation = min(base.s, cfg.moon_max_saturation)
    for _ in range(moon_count(ctx.modifiers.mod3, cfg.moons_max)):
        y = pool.pop()
        x = pool.pop()
        diameter = pool.pop()
        lightness = pool.pop()
        moon = Disc(x=x, y=y, diameter=diameter, color=Color.from_hsl(base.h, saturation, lightness))
        if moon.overlaps(sun):
            moon = Disc(
                x=x,
                y=y,
                diameter=diameter,
                color=Color.from_hsl(base.h, saturation, cfg.moon_dim_lightness),
            )
            ctx.eclipsed_moons += 1
        ctx.moons.append(moon)
