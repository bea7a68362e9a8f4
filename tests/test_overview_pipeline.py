import json

import pytest

from services import pipeline


def test_demo_overview_snapshot(samples, today):
    snap = pipeline.build_overview(samples, today)
    assert snap.window == 30
    assert snap.coverage == 25
    assert snap.caption == "Tracked on 25 of 30 days"
    nutrition = snap.sequences["nutrition"]
    assert nutrition[7] is None
    assert nutrition[21] == 8
    assert snap.sequences["energy"][21] is None
    assert snap.sequences["satisfaction"][23] is None
    assert snap.sequences["satisfaction"][29] is None
    assert snap.averages["nutrition"] == 7.0


def test_empty_input_is_well_formed(today):
    snap = pipeline.build_overview([], today)
    assert snap.coverage == 0
    assert all(len(s) == 30 for s in snap.sequences.values())
    assert snap.averages == {"nutrition": None, "energy": None, "satisfaction": None}


def test_snapshot_to_dict_is_json_ready(samples, today):
    payload = pipeline.build_overview(samples, today, window=7).to_dict()
    text = json.dumps(payload)
    assert '"window": 7' in text
    assert payload["end_date"] == "2026-10-19"
    assert len(payload["sequences"]["energy"]) == 7


def test_overview_from_records_matches_samples(records, samples, today):
    assert pipeline.overview_from_records(records, today) == pipeline.build_overview(samples, today)


def test_parse_today(today):
    assert pipeline.parse_today("2026-10-19") == today
    assert pipeline.parse_today(today) is today
    with pytest.raises(ValueError):
        pipeline.parse_today("19/10/2026")


def test_unvalidated_non_finite_samples_count_as_missing(today):
    from datetime import timedelta

    from domain.models import RawSample

    samples = [
        RawSample(today, {"energy": float("inf")}),
        RawSample(today - timedelta(days=1), {"energy": 6, "nutrition": float("nan")}),
    ]
    snap = pipeline.build_overview(samples, today)
    assert snap.sequences["energy"][29] is None
    assert snap.sequences["nutrition"][28] is None
    assert snap.coverage == 1
    assert snap.averages["energy"] == 6.0
    assert not samples[0].has_any()


def test_demo_skips_fully_untracked_days(samples, today):
    assert len(samples) == 25
    assert all(s.has_any() for s in samples)
    assert today not in {s.date for s in samples}
