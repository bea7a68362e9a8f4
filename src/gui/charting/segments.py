"""Segment scanning: maximal runs of present values in a sparse sequence."""

from __future__ import annotations

from typing import List, Optional, Sequence

from utils.numeric import is_present

from .types import Segment

__all__ = ["scan_segments"]


def scan_segments(values: Sequence[Optional[float]]) -> List[Segment]:
    """Return segments ordered by start index.

    A segment opens on a present value that is first or follows a gap and
    closes on a present value that is last or precedes a gap. ``None`` and
    non-finite values are gaps. All-missing input yields ``[]``.
    """
    segments: List[Segment] = []
    start: int | None = None
    for i, v in enumerate(values):
        if not is_present(v):
            if start is not None:
                segments.append(Segment(start, i - 1))
                start = None
        elif start is None:
            start = i
    if start is not None:
        segments.append(Segment(start, len(values) - 1))
    return segments
