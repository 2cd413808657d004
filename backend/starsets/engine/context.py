"""SceneContext — the single mutable state object flowing through all layers.

Built fresh for every render; nothing here outlives the call.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from starsets.engine.config import SceneConfig
from starsets.engine.entropy import EntropySource
from starsets.engine.features import BlockFeatures
from starsets.engine.palettes import Palette
from starsets.exceptions import SequencingError
from starsets.models.modifiers import Modifiers
from starsets.shapes.primitives import Disc, GradientBand, RidgeTerrain, RingGroup
from starsets.utils.noise import CoherentNoise


@dataclass
class SceneContext:
    width: int
    height: int
    features: BlockFeatures
    modifiers: Modifiers
    entropy: EntropySource
    noise: CoherentNoise
    config: SceneConfig = field(default_factory=SceneConfig)

    # --- Populated by layers, in order ---
    palette_index: int = 0
    palette: Palette | None = None
    ground_top_y: float = 0.0
    ground: GradientBand | None = None
    sun: Disc | None = None
    sky: GradientBand | None = None
    moons: list[Disc] = field(default_factory=list)
    eclipsed_moons: int = 0
    rings: RingGroup | None = None
    mountain: RidgeTerrain | None = None

    # --- Pipeline metadata ---
    completed_layers: list[str] = field(default_factory=list)
    # layer id -> (cursor before, cursor after)
    draw_log: dict[str, tuple[int, int]] = field(default_factory=dict)

    def require_palette(self) -> Palette:
        if self.palette is None:
            raise SequencingError("palette has not been selected")
        return self.palette
