"""Write SVG markup from element dictionaries."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float,
    canvas_h: float,
    title: str = "",
    description: str = "",
) -> str:
    """Generate SVG markup. Each element is ``{"tag": ..., <attr>: <value>, ...}``."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{canvas_w}" height="{canvas_h}" viewBox="0 0 {canvas_w} {canvas_h}"'
        ' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
