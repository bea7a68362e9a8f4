"""Charting layer for the 30-day overview cards.

The pure encoding engine (sequences, segments, paths, grid layout) produces
backend-independent descriptors; the registry builds named chart types from
them and hands drawing to a backend (matplotlib), memoizing identical
requests.
"""

from .backends import MatplotlibChartBackend  # noqa: F401
from .registry import chart_registry, register_chart_type  # noqa: F401
from .types import ChartRequest, ChartResult, PathGeometry, PlotFrame, Segment  # noqa: F401
from . import overview_charts  # noqa: F401  # registers overview.sparklines / overview.heatmap
