"""Layer registry — every scene layer is a standalone function registered via decorator.

Usage:
    @layer(id="L03", name="sun", order=3, dependencies=["L02"], draws=2)
    def sun(ctx: SceneContext) -> None:
        ctx.sun = Disc(...)

Layers run strictly by ``order``. Each one consumes entropy draws, so the order
and the draw counts are part of the output: ``draws`` is checked after every
layer by the pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Union

from starsets.exceptions import SequencingError

if TYPE_CHECKING:
    from starsets.engine.context import SceneContext

logger = logging.getLogger(__name__)

DrawCount = Union[int, Callable[["SceneContext"], int]]


@dataclass
class LayerSpec:
    id: str
    name: str
    order: int
    fn: Callable[["SceneContext"], None]
    dependencies: list[str] = field(default_factory=list)
    draws: DrawCount = 0
    description: str = ""

    def expected_draws(self, ctx: SceneContext) -> int:
        if callable(self.draws):
            return int(self.draws(ctx))
        return int(self.draws)


class LayerRegistry:
    """Registry of scene layers, keyed by id."""

    def __init__(self) -> None:
        self._layers: dict[str, LayerSpec] = {}

    def register(self, spec: LayerSpec) -> None:
        if spec.id in self._layers:
            raise ValueError(f"Duplicate layer ID: {spec.id}")
        if any(s.order == spec.order for s in self._layers.values()):
            raise ValueError(f"Duplicate layer order {spec.order} for {spec.id}")
        self._layers[spec.id] = spec
        logger.debug("Registered layer %s (%s)", spec.id, spec.name)

    def get(self, layer_id: str) -> LayerSpec:
        return self._layers[layer_id]

    def all(self) -> list[LayerSpec]:
        return sorted(self._layers.values(), key=lambda s: s.order)

    def resolve_order(self) -> list[LayerSpec]:
        """Layers by ``order``, verifying every dependency is registered and runs earlier."""
        ordered = self.all()
        position = {s.id: i for i, s in enumerate(ordered)}
        for spec in ordered:
            for dep in spec.dependencies:
                if dep not in position:
                    raise SequencingError(f"{spec.id} depends on unregistered layer {dep}")
                if position[dep] >= position[spec.id]:
                    raise SequencingError(f"{spec.id} is ordered before its dependency {dep}")
        return ordered

    @property
    def count(self) -> int:
        return len(self._layers)


# Module-level singleton
_registry = LayerRegistry()


def get_registry() -> LayerRegistry:
    return _registry


def layer(
    *,
    id: str,
    name: str,
    order: int,
    dependencies: list[str] | None = None,
    draws: DrawCount = 0,
    description: str = "",
):
    """Decorator to register a layer function."""

    def decorator(fn: Callable[["SceneContext"], None]):
        spec = LayerSpec(
            id=id,
            name=name,
            order=order,
            fn=fn,
            dependencies=dependencies or [],
            draws=draws,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
