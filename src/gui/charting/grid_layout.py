"""Week chunking for the calendar-style heat grid."""

from __future__ import annotations

from typing import List, Sequence, Tuple, TypeVar

from config import settings

__all__ = ["split_into_weeks", "week_labels"]

T = TypeVar("T")


def split_into_weeks(values: Sequence[T], size: int = settings.WEEK_SIZE) -> List[Tuple[T, ...]]:
    """Slice ``values`` into consecutive chunks of ``size``, oldest first.

    The last chunk is shorter when the length is not a multiple of ``size``
    (30 days -> 7, 7, 7, 7, 2).
    """
    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size}")
    items = tuple(values)
    return [items[i : i + size] for i in range(0, len(items), size)]


def week_labels(count: int) -> List[str]:
    return [f"W{i + 1}" for i in range(count)]
