"""Centralized filename and path naming utilities."""

from __future__ import annotations

import os
import re
from datetime import date
from config import settings

_SANITIZE_PATTERN = re.compile(r"[^\w\s-]")
_WS_PATTERN = re.compile(r"[-\s]+")


def sanitize(value: str) -> str:
    value = _SANITIZE_PATTERN.sub("", value).strip()
    return _WS_PATTERN.sub("_", value)


def data_dir() -> str:
    return settings.DATA_DIR


def records_path(base: str | None = None) -> str:
    return os.path.join(base or data_dir(), settings.RECORDS_FILENAME)


def chart_filename(kind: str, end_date: date, fmt: str = "svg") -> str:
    return f"overview_{sanitize(kind)}_{end_date.isoformat()}.{fmt.lower()}"
