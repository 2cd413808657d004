"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    layers_registered: int = 0


class RenderResponse(BaseModel):
    scene: dict[str, Any]
    attributes: list[dict[str, Any]] = Field(default_factory=list)
    svg: str | None = None
    processing_time_ms: float = 0.0


class ErrorResponse(BaseModel):
    error: str
    message: str
