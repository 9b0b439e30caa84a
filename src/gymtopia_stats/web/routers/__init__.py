"""API routers."""

from . import statistics, validation

__all__ = ["statistics", "validation"]
