import json

import pytest

from main import main


@pytest.fixture
def demo_file(tmp_path, capsys):
    path = tmp_path / "daily_tracking.json"
    assert main(["demo-data", "--out", str(path), "--today", "2026-10-19"]) == 0
    capsys.readouterr()
    return path


def test_demo_data_writes_records(tmp_path, capsys):
    path = tmp_path / "out" / "records.json"
    assert main(["demo-data", "--out", str(path), "--today", "2026-10-19"]) == 0
    assert json.loads(capsys.readouterr().out)["records"] == 25
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload[-1]["date"] == "2026-10-18"


def test_summary_json(demo_file, capsys):
    assert main(["summary", "--records", str(demo_file), "--today", "2026-10-19", "--json"]) == 0
    snapshot = json.loads(capsys.readouterr().out)
    assert snapshot["coverage"] == 25
    assert snapshot["sequences"]["nutrition"][7] is None


def test_summary_text(demo_file, capsys):
    assert main(["summary", "--records", str(demo_file), "--today", "2026-10-19"]) == 0
    out = capsys.readouterr().out
    assert "Tracked on 25 of 30 days" in out
    assert "Nutrition" in out


def test_render_heatmap_png(demo_file, tmp_path, capsys):
    out = tmp_path / "heat.png"
    argv = ["render", "--records", str(demo_file), "--today", "2026-10-19"]
    argv += ["--kind", "heatmap", "--format", "png", "--out", str(out)]
    assert main(argv) == 0
    assert json.loads(capsys.readouterr().out)["coverage"] == 25
    assert out.stat().st_size > 0


def test_missing_records_file(tmp_path, capsys):
    assert main(["summary", "--records", str(tmp_path / "nope.json"), "--today", "2026-10-19"]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_malformed_records_file(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text('[{"date": "2026-10-01", "energy": "tired"}]', encoding="utf-8")
    assert main(["summary", "--records", str(path), "--today", "2026-10-19"]) == 2
    assert "record 0" in capsys.readouterr().err


def test_non_finite_rating_in_records_file(tmp_path, capsys):
    path = tmp_path / "inf.json"
    path.write_text('[{"date": "2026-10-18", "energy": Infinity}]', encoding="utf-8")
    assert main(["summary", "--records", str(path), "--today", "2026-10-19"]) == 2
    assert "finite" in capsys.readouterr().err


def test_render_linked_with_active_day(demo_file, tmp_path, capsys):
    out = tmp_path / "linked.svg"
    argv = ["render", "--records", str(demo_file), "--today", "2026-10-19"]
    argv += ["--kind", "linked", "--active-day", "2026-10-11", "--out", str(out)]
    assert main(argv) == 0
    assert json.loads(capsys.readouterr().out)["active_date"] == "2026-10-11"
    assert "<svg" in out.read_text(encoding="utf-8")
