"""Statistics, streak, insight and validation services."""

from .insights import (
    achievement_progress,
    gym_visit_rankings,
    period_summary,
    personal_bests,
    recent_visits,
    time_distribution,
    weekly_pattern,
)
from .statistics import compute_statistics
from .streaks import StreakSummary, compute_streaks
from .validation import validate_cardio, validate_exercise

__all__ = [
    "achievement_progress",
    "compute_statistics",
    "compute_streaks",
    "gym_visit_rankings",
    "period_summary",
    "personal_bests",
    "recent_visits",
    "StreakSummary",
    "time_distribution",
    "validate_cardio",
    "validate_exercise",
    "weekly_pattern",
]
