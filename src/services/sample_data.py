"""Deterministic demo dataset for the 30-day overview.

Thirty days ending on the reference date with five fully missing days
(including today, not tracked yet) and two partial days where one metric was
skipped. Energy and satisfaction loosely track nutrition.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Tuple

from domain.models import RawSample

# (nutrition, energy, satisfaction), oldest day first; None = not recorded
DEMO_PATTERN: Tuple[Tuple[Optional[int], Optional[int], Optional[int]], ...] = (
    (7, 6, 7),
    (8, 7, 8),
    (6, 5, 6),
    (7, 7, 8),
    (5, 4, 5),
    (8, 8, 9),
    (7, 6, 7),
    (None, None, None),
    (6, 6, 7),
    (8, 7, 8),
    (9, 8, 9),
    (7, 6, 7),
    (6, 5, 6),
    (8, 7, 8),
    (None, None, None),
    (7, 7, 8),
    (5, 4, 5),
    (4, 3, 4),
    (6, 5, 6),
    (7, 7, 7),
    (None, None, None),
    (8, None, 8),
    (9, 8, 9),
    (7, 7, None),
    (6, 6, 7),
    (None, None, None),
    (8, 7, 8),
    (9, 9, 9),
    (8, 8, 8),
    (None, None, None),
)


def demo_samples(today: date) -> List[RawSample]:
    """Samples for the demo window; fully missing days produce no sample at all."""
    out: List[RawSample] = []
    last = len(DEMO_PATTERN) - 1
    for idx, (n, e, s) in enumerate(DEMO_PATTERN):
        metrics = {k: v for k, v in (("nutrition", n), ("energy", e), ("satisfaction", s)) if v is not None}
        sample = RawSample(date=today - timedelta(days=last - idx), metrics=metrics)
        if sample.has_any():
            out.append(sample)
    return out
