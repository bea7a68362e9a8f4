"""Mapping between JSON tracking records and ``RawSample`` objects."""

from __future__ import annotations

import logging
import math
from datetime import date
from numbers import Real
from typing import Any, Dict, Iterable, List, Mapping

from core import filesystem
from domain.models import RawSample

log = logging.getLogger(__name__)

__all__ = [
    "RecordFormatError",
    "sample_from_record",
    "sample_to_record",
    "index_samples",
    "load_samples",
    "save_samples",
]


class RecordFormatError(ValueError):
    """Raised when a tracking record cannot be turned into a RawSample."""


def _parse_date(raw: Any, where: str) -> date:
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        raise RecordFormatError(f"{where}: 'date' must be an ISO date string")
    try:
        return date.fromisoformat(raw.strip()[:10])
    except ValueError as e:
        raise RecordFormatError(f"{where}: invalid date {raw!r}") from e


def sample_from_record(record: Mapping[str, Any], *, index: int | None = None) -> RawSample:
    """Build a RawSample from one ``{"date": ..., metric: rating}`` dict.

    ``null`` ratings are dropped (missing). Booleans, non-numeric and
    non-finite (NaN, Infinity) ratings are rejected; finite ratings are kept
    unclamped.
    """
    where = f"record {index}" if index is not None else "record"
    if not isinstance(record, Mapping):
        raise RecordFormatError(f"{where}: expected an object, got {type(record).__name__}")
    if "date" not in record:
        raise RecordFormatError(f"{where}: missing 'date'")
    day = _parse_date(record["date"], where)
    metrics: Dict[str, float] = {}
    for name, value in record.items():
        if name == "date" or value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, Real):
            raise RecordFormatError(f"{where}: rating {name!r} must be numeric, got {value!r}")
        if not math.isfinite(value):
            raise RecordFormatError(f"{where}: rating {name!r} must be finite, got {value!r}")
        metrics[name] = value
    return RawSample(date=day, metrics=metrics)


def sample_to_record(sample: RawSample) -> Dict[str, Any]:
    record: Dict[str, Any] = {"date": sample.key}
    for name in sorted(sample.metrics):
        record[name] = sample.metrics[name]
    return record


def index_samples(samples: Iterable[RawSample]) -> Dict[str, RawSample]:
    """Key samples by ISO date. A later sample for the same date replaces the earlier one."""
    indexed: Dict[str, RawSample] = {}
    for sample in samples:
        if sample.key in indexed:
            log.debug("duplicate record for %s; keeping the later one", sample.key)
        indexed[sample.key] = sample
    return indexed


def samples_from_records(records: Iterable[Mapping[str, Any]]) -> List[RawSample]:
    return [sample_from_record(r, index=i) for i, r in enumerate(records)]


def load_samples(path: str) -> List[RawSample]:
    payload = filesystem.read_json(path)
    if not isinstance(payload, list):
        raise RecordFormatError(f"{path}: expected a JSON list of records")
    samples = samples_from_records(payload)
    log.info("loaded %s tracking records from %s", len(samples), path)
    return samples


def save_samples(path: str, samples: Iterable[RawSample]) -> int:
    records = [sample_to_record(s) for s in sorted(samples, key=lambda s: s.date)]
    filesystem.write_json(path, records)
    return len(records)
