"""Chart export utilities.

Thin helper wrapping backend export so callers stay decoupled from the
concrete backend API.
"""
from __future__ import annotations

from core import filesystem

from .registry import chart_registry


def export_chart(chart_widget, path: str, *, format: str = "png", dpi: int = 120) -> None:
    """Export a chart figure to disk via the backend.

    Args:
        chart_widget: The figure returned in ChartResult.widget.
        path: Destination file path (parent directories are created).
        format: 'png' or 'svg'.
        dpi: Raster resolution for PNG.
    """
    filesystem.ensure_parent(path)
    chart_registry.backend.export_figure(chart_widget, path, format=format, dpi=dpi)
