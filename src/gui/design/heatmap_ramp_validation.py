"""Heat grid color ramp validation.

Objective: confirm that an ordered low→high ramp of colors changes
perceptual lightness in one direction only, so a higher rating never looks
lighter than a lower one.

Approach
--------
1. Parse each hex color (invalid entries are reported, not raised).
2. Convert sRGB -> CIE L* (D65).
3. Compute successive L* deltas; reversals against the predominant direction
   count only when larger than a small jitter tolerance.

A ramp is ``uniform`` when every color resolved, it has at least three
entries, and there are no reversals.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .color_mixing import parse_hex
from .color_scale import ACCENT_HUE, ACCENT_SATURATION, legend_styles

__all__ = ["HeatmapRampReport", "validate_heatmap_ramp", "validate_color_scale"]


@dataclass(frozen=True)
class HeatmapRampReport:
    colors: Tuple[str, ...]
    lightness_values: Tuple[float, ...]
    deltas: Tuple[float, ...]
    reversals: int
    invalid: Tuple[str, ...]
    average_delta: float
    delta_stddev: float
    min_L: float
    max_L: float
    uniform: bool
    message: str

    def summary(self) -> str:  # pragma: no cover simple convenience
        return (
            f"HeatmapRampReport: len={len(self.colors)} uniform={self.uniform} "
            f"reversals={self.reversals} avgΔ={self.average_delta:.2f} sdΔ={self.delta_stddev:.2f}"
        )


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _rgb_to_lab_L(r: int, g: int, b: int) -> float:
    # Only Y is needed for L*; reference white Yn = 1.0
    y = (
        _srgb_to_linear(r / 255.0) * 0.2126390
        + _srgb_to_linear(g / 255.0) * 0.7151687
        + _srgb_to_linear(b / 255.0) * 0.0721923
    )
    f = y ** (1 / 3) if y > 0.008856 else (7.787 * y) + (16 / 116)
    return 116 * f - 16


def validate_heatmap_ramp(colors: Sequence[str], *, jitter_threshold: float = 0.75) -> HeatmapRampReport:
    invalid: List[str] = []
    lightness: List[float] = []
    for color in colors:
        try:
            r, g, b, _ = parse_hex(color)
        except ValueError:
            invalid.append(str(color))
            continue
        lightness.append(_rgb_to_lab_L(r, g, b))

    deltas = [lightness[i] - lightness[i - 1] for i in range(1, len(lightness))]
    significant = [d for d in deltas if abs(d) >= jitter_threshold]
    direction = 0
    if significant:
        direction = 1 if significant[0] > 0 else -1
    reversals = sum(1 for d in significant if (d > 0) != (direction > 0))

    avg_delta = sum(abs(d) for d in deltas) / len(deltas) if deltas else 0.0
    if deltas:
        mean = sum(deltas) / len(deltas)
        stddev = math.sqrt(sum((d - mean) ** 2 for d in deltas) / len(deltas))
    else:
        stddev = 0.0

    if invalid:
        uniform = False
        msg = f"Invalid {len(invalid)} colors; cannot validate fully"
    elif len(lightness) < 3:
        uniform = False
        msg = "Ramp too short for validation (<3 colors)"
    else:
        uniform = reversals == 0
        msg = "Monotonic lightness progression" if uniform else "Lightness reversals detected"

    return HeatmapRampReport(
        colors=tuple(colors),
        lightness_values=tuple(lightness),
        deltas=tuple(deltas),
        reversals=reversals,
        invalid=tuple(invalid),
        average_delta=avg_delta,
        delta_stddev=stddev,
        min_L=min(lightness) if lightness else 0.0,
        max_L=max(lightness) if lightness else 0.0,
        uniform=uniform,
        message=msg,
    )


def validate_color_scale(
    hue: float = ACCENT_HUE, base_saturation: float = ACCENT_SATURATION, **kwargs
) -> HeatmapRampReport:
    """Validate the legend swatches of one hue family."""
    return validate_heatmap_ramp([s.to_hex() for s in legend_styles(hue, base_saturation)], **kwargs)
