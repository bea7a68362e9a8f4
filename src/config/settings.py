"""Global configuration and constants for the 30-day overview charts."""

from __future__ import annotations

import os
from typing import Final

WINDOW_DAYS: Final = 30
WEEK_SIZE: Final = 7

# Ratings are entered on a 1-10 slider
RATING_MIN: Final = 1
RATING_MAX: Final = 10

PATH_DECIMALS: Final = 2

METRIC_COLORS: Final = {
    "nutrition": "#10B981",
    "energy": "#F59E0B",
    "satisfaction": "#3B82F6",
}
METRIC_LABELS: Final = {
    "nutrition": "Nutrition",
    "energy": "Energy",
    "satisfaction": "Satisfaction",
}

# Stacked sparkline rows
SPARKLINE_WIDTH: Final = 280
SPARKLINE_HEIGHT: Final = 26
SPARKLINE_PADDING: Final = (3, 3)  # top, bottom

# Linked (scrubbable) charts
LINKED_CHART_WIDTH: Final = 328
LINKED_CHART_HEIGHT: Final = 52
LINKED_CHART_PADDING: Final = (4, 4)

REFERENCE_RATINGS: Final = (1, 5, 10)

DATA_DIR: Final = os.environ.get("CLARITY_STATS_DATA_DIR", "data")
RECORDS_FILENAME: Final = "daily_tracking.json"
