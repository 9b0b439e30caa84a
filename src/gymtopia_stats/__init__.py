"""gymtopia-stats: workout statistics and exercise validation."""

from .models import (
    ExerciseEntry,
    SessionRecord,
    SetRecord,
    StatisticsSnapshot,
    ValidationResult,
)
from .services import compute_statistics, validate_cardio, validate_exercise

__version__ = "0.1.0"

__all__ = [
    "compute_statistics",
    "ExerciseEntry",
    "SessionRecord",
    "SetRecord",
    "StatisticsSnapshot",
    "validate_cardio",
    "validate_exercise",
    "ValidationResult",
]
