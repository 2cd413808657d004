"""AttributeDeriver — NFT traits computed from the finished scene."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shapely.geometry import box

from starsets.engine.features import BlockFeatures
from starsets.shapes.scene import Scene

# |slope| below this reads as flat terrain
_LEVEL_SLOPE = 0.5


@dataclass(frozen=True)
class Attribute:
    trait_type: str
    value: Any
    display_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.display_type is not None:
            out["display_type"] = self.display_type
        out["trait_type"] = self.trait_type
        out["value"] = self.value
        return out


def terrain_label(slope: float) -> str:
    if abs(slope) < _LEVEL_SLOPE:
        return "Level"
    # Screen y grows downward: a negative slope lifts the ridge to the right
    return "Rising" if slope < 0 else "Falling"


def ridge_coverage(scene: Scene) -> float:
    """Percent of the canvas covered by the ridge silhouette."""
    canvas = box(0, 0, scene.width, scene.height)
    covered = scene.mountain.polygon().intersection(canvas).area
    return round(100.0 * covered / canvas.area, 1)


def derive_attributes(scene: Scene, features: BlockFeatures) -> tuple[Attribute, ...]:
    return (
        Attribute("Palette", scene.palette_name),
        Attribute("Moons", len(scene.moons), "number"),
        Attribute("Rings", len(scene.rings.rings), "number"),
        Attribute("NFT Rings", features.nft_count, "number"),
        Attribute("ERC-20 Rings", features.erc20_count, "number"),
        Attribute("Sun Size", int(round(100 * scene.sun.diameter / scene.width)), "number"),
        Attribute("Eclipse", "Yes" if scene.eclipsed_moons else "No"),
        Attribute("Terrain", terrain_label(scene.mountain.slope)),
        Attribute("Ridge Coverage", ridge_coverage(scene), "number"),
    )
