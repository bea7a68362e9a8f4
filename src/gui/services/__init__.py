"""GUI-side helper services."""

from .sparkline import SparklineBuilder  # noqa: F401

__all__ = ["SparklineBuilder"]
