"""High-level overview pipeline: tracking records to chart-ready summaries."""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Union

from config import settings
from domain import mapping as domain_mapping
from domain.models import METRICS, RawSample
from gui.charting.sequences import MetricSequence, build_sequences, count_coverage, metric_average

log = logging.getLogger(__name__)

SampleInput = Union[Iterable[RawSample], Mapping[Any, RawSample]]


@dataclass(frozen=True)
class OverviewSnapshot:
    """Everything the 30-day cards need for one render pass."""

    end_date: date
    window: int
    sequences: "OrderedDict[str, MetricSequence]"
    coverage: int
    averages: Dict[str, Optional[float]]

    @property
    def caption(self) -> str:
        return f"Tracked on {self.coverage} of {self.window} days"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "end_date": self.end_date.isoformat(),
            "window": self.window,
            "coverage": self.coverage,
            "caption": self.caption,
            "averages": dict(self.averages),
            "sequences": {m: list(s.values) for m, s in self.sequences.items()},
        }


def parse_today(raw: Any) -> date:
    """Accept a date, an ISO string, or None (meaning the current day)."""
    if raw is None:
        return date.today()
    if isinstance(raw, date):
        return raw
    try:
        return date.fromisoformat(str(raw))
    except ValueError as e:
        raise ValueError(f"invalid reference date {raw!r}; expected YYYY-MM-DD") from e


def _as_map(samples: SampleInput) -> Mapping[Any, RawSample]:
    if isinstance(samples, Mapping):
        return samples
    return domain_mapping.index_samples(samples)


def build_overview(
    samples: SampleInput,
    today: date,
    window: int = settings.WINDOW_DAYS,
    metrics: Sequence[str] = METRICS,
) -> OverviewSnapshot:
    sequences = build_sequences(_as_map(samples), today, window, metrics)
    coverage = count_coverage(sequences)
    averages = {m: metric_average(s) for m, s in sequences.items()}
    log.debug("overview ending %s: %s/%s days tracked", today, coverage, window)
    return OverviewSnapshot(
        end_date=today, window=window, sequences=sequences, coverage=coverage, averages=averages
    )


def overview_from_records(
    records: Iterable[Mapping[str, Any]],
    today: date,
    window: int = settings.WINDOW_DAYS,
    metrics: Sequence[str] = METRICS,
) -> OverviewSnapshot:
    return build_overview(domain_mapping.samples_from_records(records), today, window, metrics)


def load_overview(
    path: str,
    today: date,
    window: int = settings.WINDOW_DAYS,
    metrics: Sequence[str] = METRICS,
) -> OverviewSnapshot:
    return build_overview(domain_mapping.load_samples(path), today, window, metrics)
