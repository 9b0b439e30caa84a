"""Computed statistics models.

None of these are persisted; they are rebuilt from the raw history on
every request.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum


class Period(str, Enum):
    """Calendar windows used for visit counts and summaries."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class Weekday(int, Enum):
    """Days of the week, numbered like ``datetime.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: "str | int | Weekday") -> "Weekday":
        """Accept a Weekday, its number, or a (possibly abbreviated) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        name = str(value).strip().upper()
        for day in cls:
            if day.name == name or day.name[:3] == name:
                return day
        raise ValueError(f"Unknown weekday: {value}")


@dataclass(frozen=True)
class StatisticsSnapshot:
    """Aggregate workout statistics for one user."""

    total_visits: int = 0
    weekly_visits: int = 0
    monthly_visits: int = 0
    yearly_visits: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    total_weight: int = 0  # kg
    total_duration_hours: int = 0
    avg_duration_minutes: int = 0

    def to_dict(self) -> dict:
        """Serialize with the field names the app front end expects."""
        return {
            "totalVisits": self.total_visits,
            "weeklyVisits": self.weekly_visits,
            "monthlyVisits": self.monthly_visits,
            "yearlyVisits": self.yearly_visits,
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
            "totalWeight": self.total_weight,
            "totalDurationHours": self.total_duration_hours,
            "avgDurationMinutes": self.avg_duration_minutes,
        }


@dataclass(frozen=True)
class GymVisitRanking:
    """Visit count for one gym."""

    gym_id: str
    name: str
    visits: int
    percentage: float
    last_visit: datetime
    last_visit_label: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["last_visit"] = self.last_visit.isoformat()
        return data


@dataclass(frozen=True)
class RecentVisit:
    """Summary of one past session."""

    session_id: str
    gym_name: str
    started_at: datetime
    duration_minutes: int
    exercises: list[str]
    total_weight: int

    @property
    def duration_display(self) -> str:
        """Human-readable duration, e.g. ``1h 25m``."""
        hours, minutes = divmod(self.duration_minutes, 60)
        if hours > 0:
            return f"{hours}h {minutes}m"
        return f"{minutes}m"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["started_at"] = self.started_at.isoformat()
        data["duration_display"] = self.duration_display
        return data


@dataclass(frozen=True)
class WeekdayCount:
    """Visits falling on one weekday."""

    day: str
    visits: int
    avg: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TimeSlotShare:
    """Visits starting within one time-of-day slot."""

    label: str
    start_hour: int
    end_hour: int
    visits: int
    percentage: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AchievementProgress:
    """Progress toward a milestone."""

    name: str
    current: float
    target: float
    percentage: float

    @property
    def is_complete(self) -> bool:
        return self.current >= self.target

    def to_dict(self) -> dict:
        data = asdict(self)
        data["is_complete"] = self.is_complete
        return data


@dataclass(frozen=True)
class PeriodSummary:
    """Totals for the current week, month or year."""

    period: Period
    start: datetime
    visits: int
    duration_hours: int
    total_weight: int
    unique_gyms: int
    unique_exercises: int

    def to_dict(self) -> dict:
        return {
            "period": self.period.value,
            "start": self.start.isoformat(),
            "visits": self.visits,
            "duration_hours": self.duration_hours,
            "total_weight": self.total_weight,
            "unique_gyms": self.unique_gyms,
            "unique_exercises": self.unique_exercises,
        }


@dataclass(frozen=True)
class PersonalBests:
    """Best single-day and single-session marks."""

    max_daily_weight: int = 0
    max_session_duration: int = 0  # minutes
    most_exercises_per_session: int = 0

    def to_dict(self) -> dict:
        return asdict(self)
