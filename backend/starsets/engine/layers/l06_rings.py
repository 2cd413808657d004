"""L06 — Rings. One line per positive-value transaction, in block order."""

from __future__ import annotations

import math

from starsets.engine.context import SceneContext
from starsets.engine.features import RingDescriptor
from starsets.engine.registry import layer
from starsets.shapes.primitives import RingGroup, RingLine
from starsets.utils.color import Color
from starsets.utils.math_helpers import clamp_unit, map_range


def ring_width(value: int, max_value: int, canvas_width: float, max_width_pct: float) -> int:
    """Map a value into [1, max_width_pct * width] against the block maximum."""
    if max_value <= 0:
        return 1
    mapped = map_range(value, 1, max_value, 1, canvas_width * max_width_pct, clamp=True)
    return max(1, math.floor(mapped))


def _ring_draws(ctx: SceneContext) -> int:
    # x1, x2, horizontal adjustment, then lightness/alpha/jitter per ring
    return 3 + 3 * len(ctx.features.rings)


@layer(
    id="L06",
    name="rings",
    order=6,
    dependencies=["L04", "L05"],
    draws=_ring_draws,
    description="Planetary rings from transaction values",
)
def rings(ctx: SceneContext) -> None:
    cfg = ctx.config
    pal = ctx.require_palette()
    rng = ctx.entropy
    w, h = ctx.width, ctx.height

    base = Color.from_hsl(pal.sun.h, pal.sky.s, pal.sun.l)
    spread = w * clamp_unit(ctx.modifiers.mod1)

    # Bottom/left to top/right
    x1 = math.floor(rng.uniform(w * cfg.ring_x1_pct[0], w * cfg.ring_x1_pct[1]))
    y1 = math.floor(h * cfg.ring_y1_pct)
    x2 = math.floor(rng.uniform(w * cfg.ring_x2_pct[0], w * cfg.ring_x2_pct[1]))
    y2 = math.floor(h * cfg.ring_y2_pct)

    # Keep the axis crossing the visible width
    adjustment = rng.uniform(w * cfg.ring_adjust_pct[0], w * cfg.ring_adjust_pct[1])
    while x1 < 0 and x2 < 0:
        x2 += adjustment
    while x1 > w and x2 > w:
        x2 -= adjustment

    lines = [_ring_line(ctx, desc, base, spread, x1, y1, x2, y2) for desc in ctx.features.rings]
    ctx.rings = RingGroup(
        x1=x1, y1=y1, x2=x2, y2=y2, color=base, spread=spread, rings=tuple(lines)
    )


def _ring_line(
    ctx: SceneContext,
    desc: RingDescriptor,
    base: Color,
    spread: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
) -> RingLine:
    cfg = ctx.config
    rng = ctx.entropy
    width = ring_width(desc.value, ctx.features.max_value, ctx.width, cfg.ring_max_width_pct)
    lightness = rng.uniform(*cfg.ring_lightness)
    alpha = rng.uniform(*cfg.ring_alpha)
    x_off = math.floor(rng.next_gaussian(0, spread))
    return RingLine(
        x1=x1 + x_off,
        y1=y1,
        x2=x2 + x_off,
        y2=y2,
        width=width,
        color=Color.from_hsl(base.h, base.s, lightness, alpha),
        kind=desc.kind,
    )
