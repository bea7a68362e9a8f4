"""Color conversion helpers for the heat grid.

Provides small, dependency-free helpers for:
- Parsing hex colors (#rgb, #rgba, #rrggbb, #rrggbbaa) into RGBA tuples
- Converting RGBA tuples back to normalized hex (#rrggbb / #rrggbbaa)
- Converting CSS-style HSL (degrees / percent) to hex

Accepted component range: 0-255 for channels, percentages 0-100.
"""

from __future__ import annotations

import colorsys
from typing import Tuple

__all__ = [
    "parse_hex",
    "to_hex",
    "hsl_to_hex",
]

RGBA = Tuple[int, int, int, int]


def parse_hex(color: str) -> RGBA:
    """Parse a hex color string into (r,g,b,a) tuple.

    Supports #rgb, #rgba, #rrggbb, #rrggbbaa (case-insensitive).
    Raises ValueError for invalid format.
    """
    if not isinstance(color, str):
        raise ValueError("color must be a string")
    c = color.strip()
    if not c.startswith("#"):
        raise ValueError("hex color must start with '#'")
    c = c[1:]
    if len(c) in (3, 4):
        channels = [int(ch * 2, 16) for ch in c]
    elif len(c) in (6, 8):
        channels = [int(c[i : i + 2], 16) for i in range(0, len(c), 2)]
    else:
        raise ValueError("invalid hex color length")
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return r, g, b, a


def _clamp_byte(v: int) -> int:
    return 0 if v < 0 else 255 if v > 255 else v


def to_hex(r: int, g: int, b: int, a: int = 255, *, include_alpha: bool = False) -> str:
    """Convert RGBA components to hex string.

    If include_alpha is False, alpha is ignored in output even if not 255.
    Values outside 0-255 are clamped.
    """
    r = _clamp_byte(r)
    g = _clamp_byte(g)
    b = _clamp_byte(b)
    a = _clamp_byte(a)
    if include_alpha:
        return f"#{r:02x}{g:02x}{b:02x}{a:02x}"
    return f"#{r:02x}{g:02x}{b:02x}"


def _pct(v: float) -> float:
    return min(max(v, 0.0), 100.0) / 100.0


def _hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """HSL as written in CSS (hue in degrees, s/l in percent) to 0-255 RGB."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, _pct(lightness), _pct(saturation))
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    return to_hex(*_hsl_to_rgb(hue, saturation, lightness))
