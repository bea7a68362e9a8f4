"""Gap-aware path geometry for the 30-day trend charts.

Coordinate mapping (shared by every builder here):
 - x: index ``i`` of an N-point window sits at ``i * width / (N - 1)``, so the
   oldest day is at x=0 and today at x=width. A one-point window sits at 0.
 - y: a rating ``v`` (clamped to 1..10) sits at
   ``top + plot_height * (1 - (v - 1) / 9)``; 10 is nearest the top because the
   target surface grows downward.

Every builder works segment by segment (see ``segments.scan_segments``) and
never emits a command that spans a missing day. Coordinates are rounded to
``settings.PATH_DECIMALS`` only after segment membership is fixed, to keep the
serialized path data short.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from config import settings
from utils.numeric import clamp, is_present

from .segments import scan_segments
from .types import Close, CurveTo, LineTo, MoveTo, PathCommand, PathGeometry, PlotFrame, Segment

__all__ = [
    "x_step",
    "scale_y",
    "build_line_path",
    "build_area_path",
    "build_smooth_path",
    "build_smooth_area_path",
    "build_reference_lines",
    "point_at",
]

Point = Tuple[float, float]


def x_step(count: int, width: float) -> float:
    if count <= 1:
        return 0.0
    return width / (count - 1)


def scale_y(value: float, frame: PlotFrame) -> float:
    if not is_present(value):
        raise ValueError(f"cannot place non-finite rating {value!r}")
    v = clamp(value, settings.RATING_MIN, settings.RATING_MAX)
    normalized = (v - settings.RATING_MIN) / (settings.RATING_MAX - settings.RATING_MIN)
    return frame.top + frame.plot_height * (1 - normalized)


def _r(v: float) -> float:
    return round(v, settings.PATH_DECIMALS)


def _segment_points(values: Sequence[Optional[float]], seg: Segment, frame: PlotFrame) -> List[Point]:
    step = x_step(len(values), frame.width)
    return [(i * step, scale_y(values[i], frame)) for i in seg.indices()]  # type: ignore[arg-type]


def _trace_straight(points: List[Point]) -> List[PathCommand]:
    (x0, y0), rest = points[0], points[1:]
    cmds: List[PathCommand] = [MoveTo(_r(x0), _r(y0))]
    cmds.extend(LineTo(_r(x), _r(y)) for x, y in rest)
    return cmds


def _trace_smooth(points: List[Point]) -> List[PathCommand]:
    # Catmull-Rom through the segment's own points; neighbours are clamped to
    # the segment ends so no curve reaches across a gap.
    x0, y0 = points[0]
    cmds: List[PathCommand] = [MoveTo(_r(x0), _r(y0))]
    last = len(points) - 1
    for i in range(last):
        p0 = points[max(0, i - 1)]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[min(last, i + 2)]
        c1x = p1[0] + (p2[0] - p0[0]) / 6
        c1y = p1[1] + (p2[1] - p0[1]) / 6
        c2x = p2[0] - (p3[0] - p1[0]) / 6
        c2y = p2[1] - (p3[1] - p1[1]) / 6
        cmds.append(CurveTo(_r(c1x), _r(c1y), _r(c2x), _r(c2y), _r(p2[0]), _r(p2[1])))
    return cmds


def _close_to_baseline(points: List[Point], frame: PlotFrame) -> List[PathCommand]:
    base = _r(frame.baseline_y)
    return [LineTo(_r(points[-1][0]), base), LineTo(_r(points[0][0]), base), Close()]


def build_line_path(values: Sequence[Optional[float]], frame: PlotFrame) -> PathGeometry:
    """Polyline with one independent stroke per segment."""
    cmds: List[PathCommand] = []
    for seg in scan_segments(values):
        cmds.extend(_trace_straight(_segment_points(values, seg, frame)))
    return PathGeometry(tuple(cmds))


def build_area_path(values: Sequence[Optional[float]], frame: PlotFrame) -> PathGeometry:
    """One closed under-curve polygon per segment, dropped to the baseline."""
    cmds: List[PathCommand] = []
    for seg in scan_segments(values):
        points = _segment_points(values, seg, frame)
        cmds.extend(_trace_straight(points))
        cmds.extend(_close_to_baseline(points, frame))
    return PathGeometry(tuple(cmds))


def build_smooth_path(values: Sequence[Optional[float]], frame: PlotFrame) -> PathGeometry:
    cmds: List[PathCommand] = []
    for seg in scan_segments(values):
        cmds.extend(_trace_smooth(_segment_points(values, seg, frame)))
    return PathGeometry(tuple(cmds))


def build_smooth_area_path(values: Sequence[Optional[float]], frame: PlotFrame) -> PathGeometry:
    cmds: List[PathCommand] = []
    for seg in scan_segments(values):
        points = _segment_points(values, seg, frame)
        cmds.extend(_trace_smooth(points))
        cmds.extend(_close_to_baseline(points, frame))
    return PathGeometry(tuple(cmds))


def build_reference_lines(
    frame: PlotFrame, ratings: Sequence[float] = settings.REFERENCE_RATINGS
) -> List[PathGeometry]:
    """Horizontal guide lines across the full width, one per rating."""
    out: List[PathGeometry] = []
    for rating in ratings:
        y = _r(scale_y(rating, frame))
        out.append(PathGeometry((MoveTo(0.0, y), LineTo(_r(frame.width), y))))
    return out


def point_at(values: Sequence[Optional[float]], index: int, frame: PlotFrame) -> Optional[Point]:
    """Position of the active-day dot, or None when that day is missing."""
    if not 0 <= index < len(values):
        raise IndexError(f"index {index} outside window of {len(values)}")
    value = values[index]
    if not is_present(value):
        return None
    return _r(index * x_step(len(values), frame.width)), _r(scale_y(value, frame))
