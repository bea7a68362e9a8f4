"""Single-hue rating color scale for the 30-day heat grid.

Each cell is colored from one hue family (teal by default). Higher ratings
are darker and slightly more saturated:

    lightness  = 95 - (v - 1) * 6.5     (95% at 1, 36.5% at 10)
    saturation = base + (v - 1) * 2

``v`` is the rating clamped to 1..10 and rounded half-up to an integer. The
coefficients are presentation constants shared by the grid cells and the
legend swatches; changing them changes both.

Missing days get a neutral fill with a thin border so that "no data" never
reads as a low rating.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from config import settings
from utils.numeric import clamp, is_present, round_half_up

from .color_mixing import hsl_to_hex

__all__ = [
    "ACCENT_HUE",
    "ACCENT_SATURATION",
    "LEGEND_STEPS",
    "ColorDescriptor",
    "cell_style",
    "cell_lightness",
    "cell_saturation",
    "legend_styles",
]

ACCENT_HUE = 168
ACCENT_SATURATION = 76
LEGEND_STEPS = (2, 4, 6, 8, 10)

MISSING_FILL = "#F8F9FA"
MISSING_BORDER = "#E9ECEF"
LIGHTNESS_TOP = 95.0
LIGHTNESS_STEP = 6.5
SATURATION_STEP = 2


def _num(v: float) -> str:
    return f"{v:g}"


@dataclass(frozen=True)
class ColorDescriptor:
    fill: str
    border_color: str
    border_width: int
    missing: bool = False
    hue: Optional[float] = None
    saturation: Optional[float] = None
    lightness: Optional[float] = None

    def css(self) -> str:
        if self.missing:
            return self.fill
        return f"hsl({_num(self.hue)}, {_num(self.saturation)}%, {_num(self.lightness)}%)"

    def to_hex(self) -> str:
        if self.missing:
            return self.fill.lower()
        return hsl_to_hex(self.hue, self.saturation, self.lightness)  # type: ignore[arg-type]


MISSING_STYLE = ColorDescriptor(fill=MISSING_FILL, border_color=MISSING_BORDER, border_width=1, missing=True)


def _level(value: float) -> int:
    return int(round_half_up(clamp(value, settings.RATING_MIN, settings.RATING_MAX)))


def cell_lightness(value: float) -> float:
    return LIGHTNESS_TOP - (_level(value) - 1) * LIGHTNESS_STEP


def cell_saturation(value: float, base_saturation: float = ACCENT_SATURATION) -> float:
    return base_saturation + (_level(value) - 1) * SATURATION_STEP


def cell_style(
    value: Optional[float],
    hue: float = ACCENT_HUE,
    base_saturation: float = ACCENT_SATURATION,
) -> ColorDescriptor:
    if not is_present(value):
        return MISSING_STYLE
    lightness = cell_lightness(value)
    saturation = cell_saturation(value, base_saturation)
    return ColorDescriptor(
        fill=f"hsl({_num(hue)}, {_num(saturation)}%, {_num(lightness)}%)",
        border_color="transparent",
        border_width=0,
        hue=hue,
        saturation=saturation,
        lightness=lightness,
    )


def legend_styles(
    hue: float = ACCENT_HUE,
    base_saturation: float = ACCENT_SATURATION,
    steps: Sequence[float] = LEGEND_STEPS,
) -> List[ColorDescriptor]:
    """Low-to-high legend swatches using the same mapping as the cells."""
    return [cell_style(v, hue, base_saturation) for v in steps]
