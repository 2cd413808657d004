"""Health check + preset endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from starsets import __version__
from starsets.engine.registry import get_registry
from starsets.models.modifiers import STYLE_METADATA
from starsets.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        layers_registered=get_registry().count,
    )


@router.get("/preset")
async def preset() -> dict:
    return STYLE_METADATA
