"""Data models for gymtopia-stats."""

from .limits import (
    DEFAULT_LIMIT_TABLE,
    ExerciseLimitProfile,
    ExperienceLevel,
    LimitTable,
    MuscleCategory,
    Range,
    ValidationResult,
)
from .sessions import ExerciseEntry, SessionRecord, SetRecord
from .statistics import Period, StatisticsSnapshot, Weekday

__all__ = [
    "DEFAULT_LIMIT_TABLE",
    "ExerciseEntry",
    "ExerciseLimitProfile",
    "ExperienceLevel",
    "LimitTable",
    "MuscleCategory",
    "Period",
    "Range",
    "SessionRecord",
    "SetRecord",
    "StatisticsSnapshot",
    "ValidationResult",
    "Weekday",
]
