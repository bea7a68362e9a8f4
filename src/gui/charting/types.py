"""Core charting types: requests/results plus the geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Protocol, Sequence, Tuple, Union


@dataclass(frozen=True)
class ChartRequest:
    """Represents a logical chart request.

    Attributes:
        chart_type: Identifier registered in the chart registry (e.g. 'overview.heatmap').
        data: Payload understood by the chart builder (JSON-like dict).
        options: Optional rendering hints (size, smoothing, title).
    """

    chart_type: str
    data: Any
    options: Optional[Dict[str, Any]] = None


@dataclass
class ChartResult:
    """Outcome of building a chart.

    ``widget`` holds the rendered matplotlib Figure; ``meta`` carries the
    backend-independent descriptors (path data, colors, coverage).
    """

    widget: Any
    meta: Dict[str, Any]


@dataclass(frozen=True)
class Segment:
    """Inclusive index range of consecutive present values."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def indices(self) -> range:
        return range(self.start, self.end + 1)


@dataclass(frozen=True)
class PlotFrame:
    """Target drawing area in pixels; y grows downward."""

    width: float
    height: float
    top: float = 0.0
    bottom: float = 0.0

    @property
    def plot_height(self) -> float:
        return self.height - self.top - self.bottom

    @property
    def baseline_y(self) -> float:
        return self.top + self.plot_height


def _fmt(v: float) -> str:
    return f"{v:.2f}"


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    def svg(self) -> str:
        return f"M {_fmt(self.x)} {_fmt(self.y)}"


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    def svg(self) -> str:
        return f"L {_fmt(self.x)} {_fmt(self.y)}"


@dataclass(frozen=True)
class CurveTo:
    """Cubic Bezier to (x, y) with control points c1 and c2."""

    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float

    def svg(self) -> str:
        return (
            f"C {_fmt(self.c1x)} {_fmt(self.c1y)}, "
            f"{_fmt(self.c2x)} {_fmt(self.c2y)}, {_fmt(self.x)} {_fmt(self.y)}"
        )


@dataclass(frozen=True)
class Close:
    def svg(self) -> str:
        return "Z"


PathCommand = Union[MoveTo, LineTo, CurveTo, Close]


@dataclass(frozen=True)
class PathGeometry:
    """Ordered draw commands for one stroke or fill."""

    commands: Tuple[PathCommand, ...] = ()

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def count(self, kind: type) -> int:
        return sum(1 for c in self.commands if isinstance(c, kind))

    def to_svg(self) -> str:
        """SVG path data (``d`` attribute), e.g. ``M 0.00 5.00 L 10.00 2.50``."""
        return " ".join(c.svg() for c in self.commands)


class ChartBackendProtocol(Protocol):  # pragma: no cover - structural only
    """Protocol all chart backends must implement."""

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
    ) -> Any:
        ...

    def create_heat_grid(
        self,
        rows: Sequence[Dict[str, Any]],
        *,
        legend: Sequence[Any] = (),
        week_labels: Sequence[str] = (),
        title: str | None = None,
        caption: str | None = None,
    ) -> Any:
        ...
