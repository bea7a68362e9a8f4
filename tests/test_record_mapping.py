import json
import logging
from datetime import date

import pytest

from domain.mapping import (
    RecordFormatError,
    index_samples,
    load_samples,
    sample_from_record,
    sample_to_record,
    save_samples,
)
from domain.models import RawSample


def test_record_to_sample_drops_nulls():
    sample = sample_from_record({"date": "2026-10-01", "nutrition": 7, "energy": None})
    assert sample.date == date(2026, 10, 1)
    assert sample.metrics == {"nutrition": 7}
    assert sample.get("energy") is None


def test_record_accepts_timestamp_and_extra_metrics():
    sample = sample_from_record({"date": "2026-10-01T21:30:00", "sleep": 6.5})
    assert sample.date == date(2026, 10, 1)
    assert sample.get("sleep") == 6.5


def test_out_of_range_rating_kept():
    assert sample_from_record({"date": "2026-10-01", "energy": 12}).get("energy") == 12


@pytest.mark.parametrize(
    "record",
    [
        {"nutrition": 5},
        {"date": "yesterday", "nutrition": 5},
        {"date": 20261001},
        {"date": "2026-10-01", "nutrition": "high"},
        {"date": "2026-10-01", "energy": True},
    ],
)
def test_malformed_records_rejected(record):
    with pytest.raises(RecordFormatError):
        sample_from_record(record)


def test_error_names_record_index():
    with pytest.raises(RecordFormatError, match="record 3"):
        sample_from_record({"nutrition": 5}, index=3)


def test_duplicate_dates_last_write_wins(caplog):
    d = date(2026, 10, 1)
    with caplog.at_level(logging.DEBUG, logger="domain.mapping"):
        indexed = index_samples([RawSample(d, {"nutrition": 3}), RawSample(d, {"nutrition": 9})])
    assert indexed["2026-10-01"].get("nutrition") == 9
    assert len(indexed) == 1
    assert "duplicate" in caplog.text


def test_save_and_load_records(tmp_path, samples):
    path = tmp_path / "nested" / "records.json"
    count = save_samples(str(path), reversed(samples))
    assert count == len(samples) == 25
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload[0]["date"] < payload[-1]["date"]
    loaded = load_samples(str(path))
    assert [s.key for s in loaded] == [s.key for s in samples]
    assert loaded[21].metrics == samples[21].metrics


def test_load_rejects_non_list(tmp_path):
    path = tmp_path / "records.json"
    path.write_text('{"date": "2026-10-01"}', encoding="utf-8")
    with pytest.raises(RecordFormatError):
        load_samples(str(path))


def test_sample_to_record_sorted_keys():
    rec = sample_to_record(RawSample(date(2026, 10, 2), {"satisfaction": 8, "energy": 5}))
    assert list(rec) == ["date", "energy", "satisfaction"]


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_ratings_rejected(value):
    with pytest.raises(RecordFormatError, match="finite"):
        sample_from_record({"date": "2026-10-01", "energy": value}, index=4)


def test_load_rejects_json_infinity(tmp_path):
    path = tmp_path / "records.json"
    path.write_text('[{"date": "2026-10-01", "energy": Infinity}, {"date": "2026-10-02", "mood": NaN}]')
    with pytest.raises(RecordFormatError, match="record 0"):
        load_samples(str(path))
