"""Starsets scene engine — deterministic layer pipeline over a block."""

from starsets.engine.pipeline import RenderResult, ScenePipeline, create_pipeline, render
from starsets.engine.registry import get_registry, layer
from starsets.engine.context import SceneContext
from starsets.engine.entropy import EntropySource

__all__ = [
    "layer",
    "get_registry",
    "SceneContext",
    "ScenePipeline",
    "create_pipeline",
    "render",
    "RenderResult",
    "EntropySource",
]
