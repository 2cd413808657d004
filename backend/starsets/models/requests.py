"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from starsets.models.modifiers import Modifiers


class RenderRequest(BaseModel):
    block: dict[str, Any] = Field(..., description="Block JSON (ethers.js shape or plain fields)")
    modifiers: Modifiers = Field(default_factory=Modifiers, description="Defaults to the preset")
    width: int | None = Field(default=None, gt=0, description="Canvas width")
    height: int | None = Field(default=None, gt=0, description="Canvas height")
    include_svg: bool = Field(default=True, description="Return the rendered SVG markup")
