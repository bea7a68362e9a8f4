"""Domain models for daily tracking records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional, Tuple

from utils.numeric import is_present

METRICS: Tuple[str, ...] = ("nutrition", "energy", "satisfaction")


@dataclass(slots=True)
class RawSample:
    """One day of tracking input.

    ``metrics`` only holds the readings that were recorded; a metric that is
    absent (or explicitly ``None``) counts as missing for that day. Ratings are
    kept exactly as entered, including out-of-range values.
    """

    date: date
    metrics: Dict[str, float] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return self.date.isoformat()

    def get(self, metric: str) -> Optional[float]:
        return self.metrics.get(metric)

    def has_any(self) -> bool:
        return any(is_present(v) for v in self.metrics.values())
