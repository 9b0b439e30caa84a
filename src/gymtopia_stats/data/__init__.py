"""Data loading utilities."""

from .history_loader import WorkoutHistory, load_history, parse_history

__all__ = ["WorkoutHistory", "load_history", "parse_history"]
