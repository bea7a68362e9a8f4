"""Exporting overview figures to PNG / SVG."""
from __future__ import annotations

import pytest

from gui.charting import ChartRequest, chart_registry
from gui.charting.export import export_chart


@pytest.fixture
def sparkline_figure(records):
    req = ChartRequest(chart_type="overview.sparklines", data={"records": records, "today": "2026-10-19"})
    return chart_registry.build(req).widget


def test_export_png(tmp_path, sparkline_figure):
    out = tmp_path / "charts" / "overview.png"
    export_chart(sparkline_figure, str(out), format="png", dpi=72)
    assert out.exists() and out.stat().st_size > 0


def test_export_svg(tmp_path, sparkline_figure):
    out = tmp_path / "overview.svg"
    export_chart(sparkline_figure, str(out), format="svg")
    assert "<svg" in out.read_text(encoding="utf-8")


def test_export_rejects_unknown_format(tmp_path, sparkline_figure):
    with pytest.raises(ValueError):
        export_chart(sparkline_figure, str(tmp_path / "overview.gif"), format="gif")
