"""Rasterization — Scene → SVG → PNG via cairosvg, and PNG → RGBA array via Pillow."""

from __future__ import annotations

import io
import logging

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from starsets.render.svg_backend import scene_to_svg
from starsets.shapes.scene import Scene

logger = logging.getLogger(__name__)


def render_png(scene: Scene, scale: float = 1.0) -> bytes:
    """Render the scene to PNG bytes at ``scale`` x the canvas size."""
    import cairosvg

    svg = scene_to_svg(scene)
    png_bytes = cairosvg.svg2png(
        bytestring=svg.encode("utf-8"),
        output_width=int(round(scene.width * scale)),
        output_height=int(round(scene.height * scale)),
    )
    logger.debug("Rasterized %dx%d scene to %d bytes", scene.width, scene.height, len(png_bytes))
    return png_bytes


def png_to_array(png_bytes: bytes) -> NDArray[np.uint8]:
    return np.array(Image.open(io.BytesIO(png_bytes)).convert("RGBA"))


def render_array(scene: Scene, scale: float = 1.0) -> NDArray[np.uint8]:
    """HxWx4 RGBA pixels."""
    return png_to_array(render_png(scene, scale=scale))
