"""Scene pipeline — runs the layers in their fixed order and assembles the Scene."""

from __future__ import annotations

import importlib
import logging
import math
import pkgutil
import time
from dataclasses import dataclass
from typing import Any

from starsets.engine.attributes import Attribute, derive_attributes
from starsets.engine.config import SceneConfig
from starsets.engine.context import SceneContext
from starsets.engine.entropy import EntropySource
from starsets.engine.features import BlockFeatures, extract_features
from starsets.engine.registry import LayerRegistry, LayerSpec, get_registry
from starsets.exceptions import InvalidModifier, SequencingError
from starsets.models.block import Block
from starsets.models.modifiers import PRESET, CanvasSize, Modifiers
from starsets.shapes.scene import Scene
from starsets.utils.color import Color, is_hex_color
from starsets.utils.noise import CoherentNoise

logger = logging.getLogger(__name__)

_LAYER_PACKAGE = "starsets.engine.layers"


class ScenePipeline:
    """Orchestrates the layer sequence for one context at a time."""

    def __init__(
        self,
        registry: LayerRegistry | None = None,
        config: SceneConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or SceneConfig()

    def run(self, ctx: SceneContext) -> SceneContext:
        """Run every registered layer. Any failure propagates; there is no partial scene."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()
        for spec in ordered:
            self._run_spec(ctx, spec)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d layers, %d draws in %.1fms",
            len(ctx.completed_layers),
            ctx.entropy.draws,
            total,
        )
        return ctx

    def run_layer(self, ctx: SceneContext, layer_id: str) -> SceneContext:
        """Run a single layer under the same sequencing checks as ``run``."""
        self._run_spec(ctx, self.registry.get(layer_id))
        return ctx

    def _run_spec(self, ctx: SceneContext, spec: LayerSpec) -> None:
        if spec.id in ctx.completed_layers:
            raise SequencingError(f"{spec.id} ({spec.name}) already ran")
        missing = [d for d in spec.dependencies if d not in ctx.completed_layers]
        if missing:
            raise SequencingError(f"{spec.id} ({spec.name}) ran before {', '.join(missing)}")

        t0 = time.perf_counter()
        before = ctx.entropy.draws
        spec.fn(ctx)
        after = ctx.entropy.draws

        expected = spec.expected_draws(ctx)
        if after - before != expected:
            raise SequencingError(
                f"{spec.id} ({spec.name}) consumed {after - before} draws, expected {expected}"
            )
        ctx.draw_log[spec.id] = (before, after)
        ctx.completed_layers.append(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s %s completed in %.2fms (draws %d..%d)", spec.id, spec.name, elapsed, before, after)


def register_layers() -> None:
    """Import all layer modules so @layer decorators fire."""
    package = importlib.import_module(_LAYER_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_LAYER_PACKAGE}.{module_name}")


def create_pipeline(config: SceneConfig | None = None) -> ScenePipeline:
    """Factory function for creating a pipeline with every layer registered."""
    register_layers()
    return ScenePipeline(config=config)


def validate_modifiers(modifiers: Modifiers) -> None:
    for name in ("mod1", "mod2", "mod3"):
        value = getattr(modifiers, name)
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise InvalidModifier(f"{name} must be a finite number, got {value!r}")
    for name in ("color1", "background"):
        value = getattr(modifiers, name)
        if not is_hex_color(value):
            raise InvalidModifier(f"{name} must be a #rrggbb colour, got {value!r}")


def build_context(
    block: Block,
    modifiers: Modifiers,
    canvas: CanvasSize,
    config: SceneConfig,
    features: BlockFeatures | None = None,
) -> SceneContext:
    """Fresh per-render state: features, seeded entropy stream and noise."""
    features = features or extract_features(block)
    entropy = EntropySource.from_hash(block.hash)
    noise = CoherentNoise(entropy.seed, octaves=config.noise_octaves, falloff=config.noise_falloff)
    return SceneContext(
        width=canvas.width,
        height=canvas.height,
        features=features,
        modifiers=modifiers,
        entropy=entropy,
        noise=noise,
        config=config,
    )


def context_to_scene(ctx: SceneContext) -> Scene:
    if ctx.palette is None or None in (ctx.sky, ctx.ground, ctx.sun, ctx.rings, ctx.mountain):
        raise SequencingError("scene is incomplete; run every layer first")
    return Scene(
        width=ctx.width,
        height=ctx.height,
        background=Color.from_hex(ctx.modifiers.background),
        backdrop=ctx.palette.sky,
        palette_name=ctx.palette.name,
        sky=ctx.sky,
        ground=ctx.ground,
        sun=ctx.sun,
        moons=tuple(ctx.moons),
        rings=ctx.rings,
        mountain=ctx.mountain,
        eclipsed_moons=ctx.eclipsed_moons,
        seed=ctx.entropy.seed,
    )


@dataclass(frozen=True)
class RenderResult:
    scene: Scene
    attributes: tuple[Attribute, ...]

    def metadata(self) -> dict[str, Any]:
        """OpenSea-style ``attributes`` block."""
        return {"attributes": [a.to_dict() for a in self.attributes]}


def render(
    block: Block,
    modifiers: Modifiers = PRESET,
    canvas: CanvasSize | None = None,
    config: SceneConfig | None = None,
) -> RenderResult:
    """Pure function of (block, modifiers, canvas): the Scene plus its attributes."""
    canvas = canvas or CanvasSize()
    validate_modifiers(modifiers)
    pipeline = create_pipeline(config)
    ctx = build_context(block, modifiers, canvas, pipeline.config)
    pipeline.run(ctx)
    scene = context_to_scene(ctx)
    return RenderResult(scene=scene, attributes=derive_attributes(scene, ctx.features))
