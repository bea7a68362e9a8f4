"""30-day overview chart builders (sparklines, linked scrub chart, heat grid).

All chart types take the same request payload::

    data    = {"records": [{"date": "2026-10-01", "nutrition": 7, ...}, ...],
               "today": "2026-10-19", "window": 30, "metrics": [...optional...]}
    options = {"width": ..., "height": ..., "smooth": bool, "hue": ..., ...}

``overview.linked`` additionally reads ``options["active_index"]`` (day
index, 0 = oldest) or ``options["active_x"]`` (horizontal position on the
plot, mapped to the nearest day) to place the scrub cursor.

``today`` is required so that identical requests always describe the same
window (the registry snapshot cache keys on the payload).

Results carry a matplotlib Figure in ``widget`` and the backend-independent
descriptors in ``meta`` (SVG path data per metric, CSS cell colors, coverage
caption), so other renderers can reuse them without matplotlib.
"""

from __future__ import annotations

import logging
import math
from datetime import timedelta
from typing import Any, Dict, List, Optional, Tuple

from config import settings
from domain.models import METRICS
from gui.design.color_scale import ACCENT_HUE, ACCENT_SATURATION, cell_style, legend_styles
from services import pipeline

from .grid_layout import split_into_weeks, week_labels
from .palette import metric_style
from .paths import (
    build_area_path,
    build_line_path,
    build_reference_lines,
    build_smooth_area_path,
    build_smooth_path,
    point_at,
    x_step,
)
from .registry import register_chart_type
from .segments import scan_segments
from .sequences import display_value, index_from_x
from .types import ChartRequest, ChartResult, PlotFrame

log = logging.getLogger(__name__)

DEFAULT_TITLE = "30-Day Overview"
LINKED_AREA_OPACITY = 0.15
LINKED_ACTIVE_AREA_OPACITY = 0.22


def _snapshot_from_request(req: ChartRequest) -> "pipeline.OverviewSnapshot":
    data = req.data
    if not isinstance(data, dict):
        raise TypeError("Overview charts expect dict data with 'records' and 'today'")
    records = data.get("records", [])
    if not isinstance(records, list):
        raise TypeError("'records' must be a list of record objects")
    if data.get("today") is None:
        raise ValueError("'today' (YYYY-MM-DD) is required")
    today = pipeline.parse_today(data["today"])
    window = data.get("window", settings.WINDOW_DAYS)
    if isinstance(window, bool) or not isinstance(window, int) or window < 0:
        raise ValueError(f"'window' must be a non-negative int, got {window!r}")
    metrics = data.get("metrics") or METRICS
    if not isinstance(metrics, (list, tuple)) or not all(isinstance(m, str) for m in metrics):
        raise TypeError("'metrics' must be a list of metric names")
    metrics = tuple(metrics)
    return pipeline.overview_from_records(records, today, window, metrics)


def _frame_from_options(
    options: Dict[str, Any],
    width: float = settings.SPARKLINE_WIDTH,
    height: float = settings.SPARKLINE_HEIGHT,
    padding: Tuple[float, float] = settings.SPARKLINE_PADDING,
) -> PlotFrame:
    top, bottom = options.get("padding", padding)
    return PlotFrame(
        width=float(options.get("width", width)),
        height=float(options.get("height", height)),
        top=float(top),
        bottom=float(bottom),
    )


def _sparklines_builder(req: ChartRequest, backend) -> ChartResult:
    snapshot = _snapshot_from_request(req)
    options = req.options or {}
    frame = _frame_from_options(options)
    smooth = bool(options.get("smooth", False))
    line_fn = build_smooth_path if smooth else build_line_path
    area_fn = build_smooth_area_path if smooth else build_area_path
    references = build_reference_lines(frame) if options.get("reference_lines") else []

    rows: List[Dict[str, Any]] = []
    paths: Dict[str, Dict[str, Any]] = {}
    order = tuple(snapshot.sequences)
    for metric, seq in snapshot.sequences.items():
        style = metric_style(metric, order)
        line = line_fn(seq, frame)
        area = area_fn(seq, frame)
        rows.append(
            {
                "label": style.label,
                "color": style.color,
                "area_opacity": style.area_opacity,
                "line": line,
                "area": area,
                "reference": references,
            }
        )
        paths[metric] = {
            "line": line.to_svg(),
            "area": area.to_svg(),
            "segments": [[s.start, s.end] for s in scan_segments(seq)],
            "average": snapshot.averages[metric],
        }
    widget = backend.create_sparkline_rows(
        rows, frame, title=options.get("title", DEFAULT_TITLE), caption=snapshot.caption
    )
    return ChartResult(
        widget=widget,
        meta={
            "status": "ok" if snapshot.coverage else "empty",
            "window": snapshot.window,
            "end_date": snapshot.end_date.isoformat(),
            "coverage": snapshot.coverage,
            "caption": snapshot.caption,
            "smooth": smooth,
            "paths": paths,
        },
    )


def _active_index(options: Dict[str, Any], window: int, width: float) -> Optional[int]:
    raw = options.get("active_index")
    if raw is not None:
        if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw < window:
            raise ValueError(f"'active_index' must be a day index in 0..{window - 1}, got {raw!r}")
        return raw
    raw_x = options.get("active_x")
    if raw_x is None:
        return None
    if isinstance(raw_x, bool) or not isinstance(raw_x, (int, float)) or not math.isfinite(raw_x):
        raise ValueError(f"'active_x' must be a finite number, got {raw_x!r}")
    if window == 0:
        raise ValueError("'active_x' needs at least one day in the window")
    return index_from_x(raw_x, width, window)


def _value_text(value: Optional[float]) -> str:
    return "-" if value is None else f"{value:.1f}"


def _linked_builder(req: ChartRequest, backend) -> ChartResult:
    snapshot = _snapshot_from_request(req)
    options = req.options or {}
    frame = _frame_from_options(
        options,
        settings.LINKED_CHART_WIDTH,
        settings.LINKED_CHART_HEIGHT,
        settings.LINKED_CHART_PADDING,
    )
    smooth = bool(options.get("smooth", True))
    line_fn = build_smooth_path if smooth else build_line_path
    area_fn = build_smooth_area_path if smooth else build_area_path
    references = build_reference_lines(frame) if options.get("reference_lines", True) else []
    active = _active_index(options, snapshot.window, frame.width)

    active_date = None
    cursor_x = None
    if active is not None:
        active_date = snapshot.end_date - timedelta(days=snapshot.window - 1 - active)
        cursor_x = round(active * x_step(snapshot.window, frame.width), settings.PATH_DECIMALS)
        log.debug("linked chart scrubbed to %s (index %s)", active_date, active)

    rows: List[Dict[str, Any]] = []
    paths: Dict[str, Dict[str, Any]] = {}
    order = tuple(snapshot.sequences)
    for metric, seq in snapshot.sequences.items():
        style = metric_style(metric, order)
        line = line_fn(seq, frame)
        area = area_fn(seq, frame)
        dot = point_at(seq, active, frame) if active is not None else None
        shown = display_value(seq, active)
        rows.append(
            {
                "label": style.label,
                "color": style.color,
                "area_opacity": LINKED_AREA_OPACITY if active is None else LINKED_ACTIVE_AREA_OPACITY,
                "line": line,
                "area": area,
                "reference": references,
                "dot": dot,
                "value_text": _value_text(shown),
            }
        )
        paths[metric] = {
            "line": line.to_svg(),
            "area": area.to_svg(),
            "segments": [[s.start, s.end] for s in scan_segments(seq)],
            "average": snapshot.averages[metric],
            "display_value": shown,
            "dot": list(dot) if dot is not None else None,
            "active_missing": active is not None and seq.is_missing(active),
        }
    header_note = f"{active_date:%b} {active_date.day}" if active_date is not None else None
    time_labels = [f"{snapshot.window}d ago", "Today"]
    widget = backend.create_sparkline_rows(
        rows,
        frame,
        title=options.get("title", DEFAULT_TITLE),
        caption=snapshot.caption,
        header_note=header_note,
        cursor_x=cursor_x,
        time_labels=time_labels,
    )
    return ChartResult(
        widget=widget,
        meta={
            "status": "ok" if snapshot.coverage else "empty",
            "window": snapshot.window,
            "end_date": snapshot.end_date.isoformat(),
            "coverage": snapshot.coverage,
            "caption": snapshot.caption,
            "smooth": smooth,
            "active_index": active,
            "active_date": active_date.isoformat() if active_date is not None else None,
            "cursor_x": cursor_x,
            "time_labels": time_labels,
            "paths": paths,
        },
    )


def _heat_rows(snapshot, hue: float, saturation: float) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    cells: Dict[str, Any] = {}
    order = tuple(snapshot.sequences)
    for metric, seq in snapshot.sequences.items():
        weeks = split_into_weeks([cell_style(v, hue, saturation) for v in seq])
        rows.append({"label": metric_style(metric, order).label, "weeks": weeks})
        cells[metric] = [[s.css() for s in week] for week in weeks]
    return rows, cells


def _heatmap_builder(req: ChartRequest, backend) -> ChartResult:
    snapshot = _snapshot_from_request(req)
    options = req.options or {}
    hue = float(options.get("hue", ACCENT_HUE))
    saturation = float(options.get("saturation", ACCENT_SATURATION))
    rows, cells = _heat_rows(snapshot, hue, saturation)
    legend = legend_styles(hue, saturation)
    labels = week_labels(len(rows[0]["weeks"]) if rows else 0)
    widget = backend.create_heat_grid(
        rows,
        legend=legend,
        week_labels=labels,
        title=options.get("title", DEFAULT_TITLE),
        caption=snapshot.caption,
    )
    return ChartResult(
        widget=widget,
        meta={
            "status": "ok" if snapshot.coverage else "empty",
            "window": snapshot.window,
            "end_date": snapshot.end_date.isoformat(),
            "coverage": snapshot.coverage,
            "caption": snapshot.caption,
            "cells": cells,
            "legend": [s.css() for s in legend],
            "week_labels": labels,
        },
    )


register_chart_type(
    "overview.sparklines",
    _sparklines_builder,
    "Stacked per-metric sparklines with gaps for untracked days",
)
register_chart_type(
    "overview.heatmap",
    _heatmap_builder,
    "Per-metric calendar heat grid split into week blocks",
)
register_chart_type(
    "overview.linked",
    _linked_builder,
    "Scrubbable linked sparklines with reference lines and an active-day cursor",
)
