"""Chart backend implementations.

Currently only a Matplotlib backend is provided. It draws the
backend-independent descriptors (PathGeometry, ColorDescriptor) onto a
``matplotlib.figure.Figure`` without going through pyplot, so it works
headless and never touches global figure state.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from matplotlib.figure import Figure
from matplotlib.patches import Circle, PathPatch, Rectangle
from matplotlib.path import Path as MplPath

from .palette import chrome_colors
from .types import ChartBackendProtocol, Close, CurveTo, LineTo, MoveTo, PathGeometry, PlotFrame

_DPI = 100
_LABEL_WIDTH_PX = 84


def geometry_to_mpl_path(geometry: PathGeometry) -> Optional[MplPath]:
    """Translate draw commands to a matplotlib Path (None when empty)."""
    verts: List[tuple] = []
    codes: List[int] = []
    start = (0.0, 0.0)
    for cmd in geometry:
        if isinstance(cmd, MoveTo):
            start = (cmd.x, cmd.y)
            verts.append(start)
            codes.append(MplPath.MOVETO)
        elif isinstance(cmd, LineTo):
            verts.append((cmd.x, cmd.y))
            codes.append(MplPath.LINETO)
        elif isinstance(cmd, CurveTo):
            verts.extend([(cmd.c1x, cmd.c1y), (cmd.c2x, cmd.c2y), (cmd.x, cmd.y)])
            codes.extend([MplPath.CURVE4] * 3)
        elif isinstance(cmd, Close):
            verts.append(start)
            codes.append(MplPath.CLOSEPOLY)
        else:  # pragma: no cover - exhaustive over PathCommand
            raise TypeError(f"unsupported path command: {cmd!r}")
    if not verts:
        return None
    return MplPath(verts, codes)


class MatplotlibChartBackend(ChartBackendProtocol):
    # --- sparkline rows ------------------------------------------------
    def create_sparkline_rows(
        self,
        rows: Sequence[Dict[str, Any]],
        frame: PlotFrame,
        *,
        title: str | None = None,
        caption: str | None = None,
        header_note: str | None = None,
        cursor_x: float | None = None,
        time_labels: Sequence[str] = (),
    ) -> Figure:
        """One row per metric: label, under-curve fill, gap-aware line.

        Each row dict carries ``label``, ``color``, ``line`` and ``area``
        (PathGeometry) and optionally ``reference`` (list of PathGeometry),
        ``dot`` ((x, y) of the active day) and ``value_text`` (shown right of
        the label). ``cursor_x`` draws the scrub cursor through every row;
        ``header_note`` goes top right (e.g. the scrubbed date) and
        ``time_labels`` (oldest, newest) under the last row.
        """
        chrome = chrome_colors()
        row_gap = 10
        total_w = frame.width + _LABEL_WIDTH_PX
        total_h = max(1, len(rows)) * (frame.height + row_gap) + 60
        fig = Figure(figsize=(total_w / _DPI, total_h / _DPI), dpi=_DPI)
        fig.patch.set_facecolor(chrome["background.plot"])
        left = _LABEL_WIDTH_PX / total_w
        for idx, row in enumerate(rows):
            bottom = 1 - (30 + (idx + 1) * (frame.height + row_gap)) / total_h
            ax = fig.add_axes((left, bottom, 1 - left, frame.height / total_h))
            ax.set_xlim(0, frame.width)
            ax.set_ylim(frame.height, 0)  # y grows downward in path space
            ax.set_axis_off()
            for ref in row.get("reference") or ():
                ref_path = geometry_to_mpl_path(ref)
                if ref_path is not None:
                    ax.add_patch(
                        PathPatch(ref_path, fill=False, edgecolor=chrome["grid.line"],
                                  linewidth=1, linestyle=(0, (2, 6)), alpha=0.5)
                    )
            area = geometry_to_mpl_path(row["area"])
            if area is not None:
                ax.add_patch(PathPatch(area, facecolor=row["color"], edgecolor="none",
                                       alpha=row.get("area_opacity", 0.10)))
            line = geometry_to_mpl_path(row["line"])
            if line is not None:
                ax.add_patch(PathPatch(line, fill=False, edgecolor=row["color"], linewidth=2,
                                       capstyle="round", joinstyle="round"))
            if cursor_x is not None:
                ax.axvline(cursor_x, color=chrome["cursor.line"], alpha=0.12, linewidth=1.5)
            dot = row.get("dot")
            if dot is not None:
                ax.add_patch(Circle(dot, 5, facecolor=row["color"], edgecolor=chrome["dot.ring"],
                                    linewidth=2, zorder=3))
            if row.get("value_text"):
                fig.text(left - 0.01, bottom + frame.height / total_h / 2, row["value_text"],
                         ha="right", va="center", fontsize=8, weight="bold", color=row["color"])
            fig.text(0.01, bottom + frame.height / total_h / 2, row["label"],
                     va="center", fontsize=8, color=chrome["axis.text"])
        if title:
            fig.text(0.01, 1 - 14 / total_h, title, fontsize=10, weight="bold", color=chrome["title"])
        if header_note:
            fig.text(0.99, 1 - 14 / total_h, header_note, ha="right", fontsize=9, weight="bold",
                     color=chrome["selected.date"])
        if len(time_labels) == 2:
            y = 1 - (30 + len(rows) * (frame.height + row_gap) + 8) / total_h
            fig.text(left, y, time_labels[0], fontsize=7, color=chrome["time.label"])
            fig.text(0.99, y, time_labels[1], ha="right", fontsize=7, color=chrome["time.label"])
        if caption:
            fig.text(0.01, 8 / total_h, caption, fontsize=8, color=chrome["axis.text"])
        return fig

    # --- heat grid -----------------------------------------------------
    def create_heat_grid(
        self,
        rows: Sequence[Dict[str, Any]],
        *,
        legend: Sequence[Any] = (),
        week_labels: Sequence[str] = (),
        title: str | None = None,
        caption: str | None = None,
        cell: float = 9.0,
        cell_gap: float = 2.0,
        week_gap: float = 8.0,
    ) -> Figure:
        """Calendar-style grid: one row per metric, cells grouped by week.

        Each row dict carries ``label`` and ``weeks`` (list of lists of
        ColorDescriptor).
        """
        chrome = chrome_colors()
        max_cells = max((sum(len(w) for w in r["weeks"]) for r in rows), default=0)
        max_weeks = max((len(r["weeks"]) for r in rows), default=0)
        grid_w = max_cells * (cell + cell_gap) + max(0, max_weeks - 1) * week_gap
        label_w = 70.0
        width = label_w + grid_w + 10
        height = 40 + len(rows) * (cell + 8) + 30
        fig = Figure(figsize=(width * 3 / _DPI, height * 3 / _DPI), dpi=_DPI)
        fig.patch.set_facecolor(chrome["background.plot"])
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_axis_off()

        if title:
            ax.text(0, 12, title, fontsize=10, weight="bold", color=chrome["title"], va="center")
        x = width - 10 - len(legend) * (cell + 2)
        for swatch in legend:
            ax.add_patch(Rectangle((x, 7), cell, cell, facecolor=swatch.to_hex(), edgecolor="none"))
            x += cell + 2

        top = 40.0
        if rows and week_labels:
            x = label_w
            for week, label in zip(rows[0]["weeks"], week_labels):
                ax.text(x, top - 8, label, fontsize=6, color=chrome["time.label"], va="center")
                x += len(week) * (cell + cell_gap) + week_gap
        for r_idx, row in enumerate(rows):
            y = top + r_idx * (cell + 8)
            ax.text(0, y + cell / 2, row["label"], fontsize=7, color=chrome["axis.text"], va="center")
            x = label_w
            for week in row["weeks"]:
                for style in week:
                    ax.add_patch(
                        Rectangle(
                            (x, y), cell, cell,
                            facecolor=style.to_hex(),
                            edgecolor=style.border_color if style.border_width else "none",
                            linewidth=style.border_width,
                        )
                    )
                    x += cell + cell_gap
                x += week_gap
        if caption:
            ax.text(0, height - 10, caption, fontsize=7, color=chrome["axis.text"], va="center")
        return fig

    def export_figure(self, figure: Figure, path: str, *, format: str = "png", dpi: int = 120) -> None:
        fmt = format.lower()
        if fmt not in {"png", "svg"}:
            raise ValueError("format must be 'png' or 'svg'")
        if not hasattr(figure, "savefig"):
            raise ValueError("Unsupported figure type for export")
        figure.savefig(path, format=fmt, dpi=dpi if fmt == "png" else None,
                       facecolor=figure.get_facecolor())
