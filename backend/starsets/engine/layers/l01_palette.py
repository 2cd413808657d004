"""L01 — Palette. Pick by mod2, then shuffle roles (4 draws for 5 colours)."""

from __future__ import annotations

import logging

from starsets.engine.context import SceneContext
from starsets.engine.palettes import palette_index, select_palette
from starsets.engine.registry import layer

logger = logging.getLogger(__name__)


@layer(
    id="L01",
    name="palette",
    order=1,
    draws=4,
    description="Select a palette from mod2 and shuffle its role assignment",
)
def palette(ctx: SceneContext) -> None:
    ctx.palette_index = palette_index(ctx.modifiers.mod2)
    ctx.palette = select_palette(ctx.palette_index).shuffled(ctx.entropy)
    logger.debug("Palette %d: %s", ctx.palette_index, ctx.palette.name)
