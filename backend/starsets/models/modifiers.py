"""Modifiers, canvas size and the published preset."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Modifiers(BaseModel):
    """User tuning knobs. Defaults are the published preset and must not change."""

    model_config = ConfigDict(frozen=True)

    mod1: float = Field(default=0.025, description="Ring spread as a fraction of canvas width")
    mod2: float = Field(default=0.1, description="Palette index as a fraction of the catalog")
    mod3: float = Field(default=0.8, description="Moon count as a fraction of the maximum")
    color1: str = "#503752"
    background: str = "#000000"


class CanvasSize(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = Field(default=500, gt=0)
    height: int = Field(default=500, gt=0)


PRESET = Modifiers()

STYLE_METADATA: dict = {
    "name": "Other Worlds' Starsets",
    "description": (
        "The mountains, moons, rings, and atmospheres of distant and undiscovered "
        "planets at the setting of their closest stars... are brought into view here "
        "on the Ethereum blockchain."
    ),
    "image": "",
    "creator_name": "Oneironaut",
    "options": PRESET.model_dump(),
}
