"""CLI commands for gymtopia-stats."""

from .insights import insights
from .serve import serve
from .stats import stats
from .validate import validate

__all__ = [
    "insights",
    "serve",
    "stats",
    "validate",
]
