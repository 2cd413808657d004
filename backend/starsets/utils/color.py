"""Immutable HSLA colour values. No engine imports.

Channels follow the HSL colour mode the scene is composed in: hue in degrees
[0, 360), saturation and lightness in percent [0, 100], alpha in [0, 1].
"""

from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass, replace

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Color:
    h: float
    s: float
    l: float  # noqa: E741
    a: float = 1.0

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> Color:  # noqa: E741
        """Build a colour, wrapping hue and clamping the remaining channels."""
        return cls(
            h=float(h) % 360.0,
            s=min(100.0, max(0.0, float(s))),
            l=min(100.0, max(0.0, float(l))),
            a=min(1.0, max(0.0, float(a))),
        )

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        """Build from 0-255 channel levels."""
        h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)  # noqa: E741
        return cls.from_hsl(h * 360.0, s * 100.0, l * 100.0, a)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        match = _HEX_RE.match(value)
        if not match:
            raise ValueError(f"Not a #rrggbb colour: {value!r}")
        digits = match.group(1)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        return cls.from_rgb(r, g, b)

    def to_rgb(self) -> tuple[float, float, float]:
        r, g, b = colorsys.hls_to_rgb(self.h / 360.0, self.l / 100.0, self.s / 100.0)
        return (r * 255.0, g * 255.0, b * 255.0)

    def to_hex(self) -> str:
        r, g, b = (int(round(c)) for c in self.to_rgb())
        return f"#{r:02x}{g:02x}{b:02x}"

    def css(self) -> str:
        """``rgb()``/``rgba()`` form suitable for SVG attributes."""
        r, g, b = (int(round(c)) for c in self.to_rgb())
        if self.a >= 1.0:
            return f"rgb({r},{g},{b})"
        return f"rgba({r},{g},{b},{round(self.a, 4)})"

    def with_alpha(self, alpha: float) -> Color:
        """Derived copy with a different alpha; the original is untouched."""
        return replace(self, a=min(1.0, max(0.0, float(alpha))))

    def to_dict(self) -> dict[str, float]:
        return {
            "h": round(self.h, 6),
            "s": round(self.s, 6),
            "l": round(self.l, 6),
            "a": round(self.a, 6),
        }


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and _HEX_RE.match(value) is not None


def lerp_color(start: Color, stop: Color, t: float) -> Color:
    """Interpolate in RGB space. The endpoints are returned unchanged at t<=0 and t>=1."""
    if t <= 0.0:
        return start
    if t >= 1.0:
        return stop
    r0, g0, b0 = start.to_rgb()
    r1, g1, b1 = stop.to_rgb()
    return Color.from_rgb(
        r0 + (r1 - r0) * t,
        g0 + (g1 - g0) * t,
        b0 + (b1 - b0) * t,
        start.a + (stop.a - start.a) * t,
    )
