"""Per-metric daily sequences over a trailing window.

A ``MetricSequence`` always has exactly ``window`` elements, oldest day first
and the reference day ("today") last. Days without a record, or records
without the metric, are ``None``; so are NaN or infinite readings handed in
by code that skipped record validation. Nothing is interpolated, carried
forward or clamped here; consumers apply their own policy at the point of use.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from domain.models import METRICS, RawSample
from utils.numeric import clamp, is_present, round_half_up

__all__ = [
    "MetricSequence",
    "build_sequence",
    "build_sequences",
    "count_coverage",
    "metric_average",
    "index_from_x",
    "display_value",
]

Value = Optional[float]
DateKey = Union[str, date]


@dataclass(frozen=True)
class MetricSequence:
    metric: str
    end_date: date
    values: Tuple[Value, ...]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Value:
        return self.values[index]

    def __iter__(self) -> Iterator[Value]:
        return iter(self.values)

    def is_missing(self, index: int) -> bool:
        return not is_present(self.values[index])

    def present_indices(self) -> List[int]:
        return [i for i, v in enumerate(self.values) if is_present(v)]

    def date_at(self, index: int) -> date:
        if not 0 <= index < len(self.values):
            raise IndexError(index)
        return self.end_date - timedelta(days=len(self.values) - 1 - index)


def _normalize_keys(samples: Mapping[DateKey, RawSample]) -> Dict[str, RawSample]:
    out: Dict[str, RawSample] = {}
    for key, sample in samples.items():
        out[key.isoformat() if isinstance(key, date) else str(key)] = sample
    return out


def build_sequence(
    samples: Mapping[DateKey, RawSample], today: date, window: int, metric: str
) -> MetricSequence:
    """Project the sparse sample map onto a fixed window for one metric."""
    if window < 0:
        raise ValueError(f"window must be >= 0, got {window}")
    by_key = _normalize_keys(samples)
    values: List[Value] = []
    for offset in range(window - 1, -1, -1):
        sample = by_key.get((today - timedelta(days=offset)).isoformat())
        value = sample.get(metric) if sample is not None else None
        values.append(value if is_present(value) else None)
    return MetricSequence(metric=metric, end_date=today, values=tuple(values))


def build_sequences(
    samples: Mapping[DateKey, RawSample],
    today: date,
    window: int,
    metrics: Sequence[str] = METRICS,
) -> "OrderedDict[str, MetricSequence]":
    out: "OrderedDict[str, MetricSequence]" = OrderedDict()
    for metric in metrics:
        out[metric] = build_sequence(samples, today, window, metric)
    return out


def count_coverage(
    sequences: Union[Mapping[str, Sequence[Value]], Iterable[Sequence[Value]]]
) -> int:
    """Number of days on which at least one metric has a value."""
    seqs = list(sequences.values()) if isinstance(sequences, Mapping) else list(sequences)
    if not seqs:
        return 0
    length = len(seqs[0])
    if any(len(s) != length for s in seqs):
        raise ValueError("sequences must share the same window length")
    return sum(1 for i in range(length) if any(is_present(s[i]) for s in seqs))


def metric_average(values: Iterable[Value]) -> Optional[float]:
    """Mean of the recorded values to one decimal; None when nothing was recorded."""
    present = [v for v in values if is_present(v)]
    if not present:
        return None
    return round_half_up(sum(present) / len(present), 1)


def index_from_x(x: float, width: float, window: int) -> int:
    """Map a horizontal position on the chart to the nearest day index."""
    if window <= 1 or width <= 0:
        return 0
    ratio = clamp(x, 0.0, width) / width
    index = int(round_half_up(ratio * (window - 1)))
    return int(clamp(index, 0, window - 1))


def display_value(values: Sequence[Value], active_index: Optional[int]) -> Optional[float]:
    """Value shown in a chart header: the scrubbed day's reading, else the average."""
    if active_index is None:
        return metric_average(values)
    value = values[active_index]
    return value if is_present(value) else None
