"""Small numeric helpers shared by the geometry and color mappers."""

from __future__ import annotations

import math
from typing import Any


def is_present(value: Any) -> bool:
    """True for a usable reading; None, NaN and +/-inf all count as missing."""
    return value is not None and math.isfinite(value)


def clamp(value: float, lo: float, hi: float) -> float:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties going up (2.5 -> 3) rather than to the even neighbour."""
    if not math.isfinite(value):
        raise ValueError(f"cannot round non-finite value {value!r}")
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
