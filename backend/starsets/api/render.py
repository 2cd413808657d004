"""POST /api/render — block + modifiers → scene description, attributes and SVG."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from starsets.config import Settings
from starsets.dependencies import get_settings
from starsets.engine.pipeline import render as render_scene
from starsets.exceptions import StarsetsError
from starsets.models.block import Block
from starsets.models.modifiers import CanvasSize
from starsets.models.requests import RenderRequest
from starsets.models.responses import ErrorResponse, RenderResponse
from starsets.render.svg_backend import scene_to_svg

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(name: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(error=name, message=message).model_dump(),
    )


@router.post("/render", response_model=RenderResponse)
def render(req: RenderRequest, settings: Settings = Depends(get_settings)):
    start = time.perf_counter()

    try:
        block = Block.from_ethers(req.block)
    except (KeyError, ValueError, ValidationError) as e:
        return _error("InvalidBlockData", str(e))

    canvas = CanvasSize(
        width=req.width or settings.default_width,
        height=req.height or settings.default_height,
    )

    try:
        result = render_scene(block, req.modifiers, canvas)
    except StarsetsError as e:
        logger.info("Render rejected: %s: %s", type(e).__name__, e)
        return _error(type(e).__name__, str(e))

    elapsed = (time.perf_counter() - start) * 1000
    return RenderResponse(
        scene=result.scene.to_dict(),
        attributes=result.metadata()["attributes"],
        svg=scene_to_svg(result.scene) if req.include_svg else None,
        processing_time_ms=round(elapsed, 1),
    )
