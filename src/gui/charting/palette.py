"""Metric color roles for the overview charts.

Each tracked metric has a main stroke color and a display label. Metrics
outside the configured set fall back to an ordinal series palette so extra
metrics still get stable, distinct colors.

Roles:
 - main: line stroke, label dot, area gradient
 - axis.text / grid.line / background.plot: shared chart chrome
 - cursor.line / dot.ring / selected.date: scrub cursor of the linked chart
"""

from __future__ import annotations

import zlib
from dataclasses import dataclass
from typing import Dict, Sequence

from config import settings

__all__ = ["MetricStyle", "metric_style", "chrome_colors", "SERIES_FALLBACK"]

SERIES_FALLBACK = [
    "#4E79A7",
    "#F28E2B",
    "#E15759",
    "#76B7B2",
    "#59A14F",
    "#EDC948",
    "#B07AA1",
    "#FF9DA7",
]

_CHROME = {
    "axis.text": "#9CA3AF",
    "time.label": "#C9CDD3",
    "grid.line": "#D1D5DB",
    "title": "#1F2937",
    "selected.date": "#6B7280",
    "cursor.line": "#000000",
    "dot.ring": "#FFFFFF",
    "background.plot": "#FFFFFF",
}


@dataclass(frozen=True)
class MetricStyle:
    metric: str
    label: str
    color: str
    area_opacity: float = 0.10


def metric_style(metric: str, order: Sequence[str] = ()) -> MetricStyle:
    color = settings.METRIC_COLORS.get(metric)
    if color is None:
        index = list(order).index(metric) if metric in order else zlib.crc32(metric.encode("utf-8"))
        color = SERIES_FALLBACK[index % len(SERIES_FALLBACK)]
    label = settings.METRIC_LABELS.get(metric, metric.replace("_", " ").title())
    return MetricStyle(metric=metric, label=label, color=color)


def chrome_colors() -> Dict[str, str]:
    return dict(_CHROME)
