"""Text sparkline rendering for terminal summaries.

Renders a tiny inline sparkline string for one metric's daily ratings,
e.g. for the ``summary`` CLI command.

Design goals:
 - Pure function style for easy unit testing.
 - Output length always equals input length (one character per day).
 - Missing days (None or non-finite) render as a blank so gaps stay
   visible, mirroring the vector charts which never bridge a gap.
 - Fixed rating scale (1..10) rather than min/max normalization, so rows for
   different metrics are comparable.

Ramp chosen: "▁▂▃▄▅▆▇█" (8 levels).
"""

from __future__ import annotations
from typing import Iterable, List, Optional

from config import settings
from utils.numeric import clamp, is_present

__all__ = ["SparklineBuilder"]


class SparklineBuilder:
    """Build unicode sparkline strings from sparse rating sequences.

    Usage:
        builder = SparklineBuilder()
        text = builder.build([1, None, 5, 10])
    """

    _RAMP = "▁▂▃▄▅▆▇█"
    GAP = " "

    def build(self, values: Iterable[Optional[float]]) -> str:
        lo = settings.RATING_MIN
        span = settings.RATING_MAX - settings.RATING_MIN
        last_idx = len(self._RAMP) - 1
        out_chars: List[str] = []
        for v in values:
            if not is_present(v):
                out_chars.append(self.GAP)
                continue
            norm = (clamp(float(v), lo, settings.RATING_MAX) - lo) / span
            out_chars.append(self._RAMP[int(round(norm * last_idx))])
        return "".join(out_chars)
