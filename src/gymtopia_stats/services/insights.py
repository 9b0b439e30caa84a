"""Read-only views over a user's history for the statistics page."""

import logging
import math
from collections import Counter, defaultdict
from collections.abc import Mapping, Sequence
from datetime import datetime

from ..models.sessions import SessionRecord
from ..models.statistics import (
    AchievementProgress,
    GymVisitRanking,
    PeriodSummary,
    PersonalBests,
    Period,
    RecentVisit,
    StatisticsSnapshot,
    TimeSlotShare,
    Weekday,
    WeekdayCount,
)
from ..utils.dates import (
    DEFAULT_WEEK_START,
    days_between,
    round_half_up,
    start_of_period,
    to_utc,
    utc_day,
)
from ..utils.exercise_utils import unique_exercise_names
from .statistics import (
    ExercisesBySession,
    count_visits_since,
    exercise_volume,
    session_volume,
    total_duration_minutes,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5
UNKNOWN_GYM_NAME = "Unknown gym"

# Sunday first, matching the calendar widget
WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# (label, start hour, end hour); the last slot wraps past midnight
TIME_SLOTS = [
    ("Early morning (5-8)", 5, 8),
    ("Morning (8-12)", 8, 12),
    ("Afternoon (12-17)", 12, 17),
    ("Evening (17-22)", 17, 22),
    ("Late night (22-5)", 22, 5),
]

STREAK_GOAL_DAYS = 100
MONTHLY_VISIT_GOAL = 20
TOTAL_WEIGHT_GOAL_TONNES = 200


def relative_day_label(days_ago: int) -> str:
    """Describe how long ago something happened."""
    if days_ago <= 0:
        return "today"
    if days_ago == 1:
        return "yesterday"
    if days_ago < 7:
        return f"{days_ago} days ago"
    if days_ago < 30:
        weeks = days_ago // 7
        return "1 week ago" if weeks == 1 else f"{weeks} weeks ago"
    months = days_ago // 30
    return "1 month ago" if months == 1 else f"{months} months ago"


def _gym_name(gym_id: str | None, gym_names: Mapping[str, str] | None) -> str:
    if gym_id is None:
        return UNKNOWN_GYM_NAME
    return (gym_names or {}).get(gym_id) or UNKNOWN_GYM_NAME


def gym_visit_rankings(
    sessions: Sequence[SessionRecord],
    now: datetime,
    gym_names: Mapping[str, str] | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[GymVisitRanking]:
    """Rank gyms by how often the user visited them.

    Sessions without a gym are ignored, including in the percentage base.
    """
    visits: Counter[str] = Counter()
    last_visit: dict[str, datetime] = {}
    for session in sessions:
        if session.gym_id is None:
            continue
        started = to_utc(session.started_at)
        visits[session.gym_id] += 1
        if session.gym_id not in last_visit or started > last_visit[session.gym_id]:
            last_visit[session.gym_id] = started

    total = sum(visits.values())
    if total == 0:
        return []

    today = utc_day(now)
    rankings = [
        GymVisitRanking(
            gym_id=gym_id,
            name=_gym_name(gym_id, gym_names),
            visits=count,
            percentage=round_half_up(count / total * 1000) / 10,
            last_visit=last_visit[gym_id],
            last_visit_label=relative_day_label(
                days_between(last_visit[gym_id].date(), today)
            ),
        )
        for gym_id, count in visits.items()
    ]
    rankings.sort(key=lambda r: (-r.visits, -r.last_visit.timestamp()))
    return rankings[:limit]


def recent_visits(
    sessions: Sequence[SessionRecord],
    exercises_by_session: ExercisesBySession | None,
    gym_names: Mapping[str, str] | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[RecentVisit]:
    """Most recent sessions, newest first."""
    ordered = sorted(sessions, key=lambda s: to_utc(s.started_at), reverse=True)
    result = []
    for session in ordered[:limit]:
        entries = (exercises_by_session or {}).get(session.id) or []
        entries = sorted(entries, key=lambda e: e.order_index or 0)
        result.append(
            RecentVisit(
                session_id=session.id,
                gym_name=_gym_name(session.gym_id, gym_names),
                started_at=to_utc(session.started_at),
                duration_minutes=round_half_up(total_duration_minutes([session])),
                exercises=[e.exercise_name for e in entries if e.exercise_name],
                total_weight=round_half_up(exercise_volume(entries)),
            )
        )
    return result


def weekly_pattern(sessions: Sequence[SessionRecord]) -> list[WeekdayCount]:
    """Visits per weekday, Sunday first.

    The average divides by an estimated number of weeks,
    ``ceil(visits / 7)``, rather than the calendar span of the history.
    """
    counts = Counter((utc_day(s.started_at).weekday() + 1) % 7 for s in sessions)
    weeks_of_data = max(1, math.ceil(len(sessions) / 7))
    return [
        WeekdayCount(
            day=label,
            visits=counts[index],
            avg=round_half_up(counts[index] / weeks_of_data * 10) / 10,
        )
        for index, label in enumerate(WEEKDAY_LABELS)
    ]


def _slot_for_hour(hour: int) -> int:
    for index, (_, start, end) in enumerate(TIME_SLOTS):
        if end > start:
            if start <= hour < end:
                return index
        elif hour >= start or hour < end:
            return index
    # unreachable for hours 0-23
    return len(TIME_SLOTS) - 1


def time_distribution(sessions: Sequence[SessionRecord]) -> list[TimeSlotShare]:
    """Share of visits starting in each time-of-day slot (UTC hours)."""
    counts = Counter(_slot_for_hour(to_utc(s.started_at).hour) for s in sessions)
    total = len(sessions)
    return [
        TimeSlotShare(
            label=label,
            start_hour=start,
            end_hour=end,
            visits=counts[index],
            percentage=round_half_up(counts[index] / total * 100) if total else 0,
        )
        for index, (label, start, end) in enumerate(TIME_SLOTS)
    ]


def _progress(name: str, current: float, target: float) -> AchievementProgress:
    return AchievementProgress(
        name=name,
        current=current,
        target=target,
        percentage=min(100.0, current / target * 100),
    )


def achievement_progress(snapshot: StatisticsSnapshot) -> list[AchievementProgress]:
    """Progress toward the fixed milestone badges."""
    return [
        _progress(f"{STREAK_GOAL_DAYS}-day streak", snapshot.current_streak, STREAK_GOAL_DAYS),
        _progress(
            f"{MONTHLY_VISIT_GOAL} visits this month",
            snapshot.monthly_visits,
            MONTHLY_VISIT_GOAL,
        ),
        _progress(
            f"{TOTAL_WEIGHT_GOAL_TONNES}t total volume",
            snapshot.total_weight / 1000,
            TOTAL_WEIGHT_GOAL_TONNES,
        ),
    ]


def period_summary(
    sessions: Sequence[SessionRecord],
    exercises_by_session: ExercisesBySession | None,
    now: datetime,
    period: Period,
    week_start: Weekday = DEFAULT_WEEK_START,
) -> PeriodSummary:
    """Totals for the current week, month or year."""
    period = Period(period)
    start = start_of_period(now, period, week_start)
    in_period = [s for s in sessions if to_utc(s.started_at) >= start]

    exercise_names = []
    for session in in_period:
        for entry in (exercises_by_session or {}).get(session.id) or []:
            exercise_names.append(entry.exercise_name)

    summary = PeriodSummary(
        period=period,
        start=start,
        visits=count_visits_since(in_period, start),
        duration_hours=round_half_up(total_duration_minutes(in_period) / 60),
        total_weight=round_half_up(
            sum(session_volume(s.id, exercises_by_session) for s in in_period)
        ),
        unique_gyms=len({s.gym_id for s in in_period if s.gym_id is not None}),
        unique_exercises=len(unique_exercise_names(exercise_names)),
    )
    logger.debug("Summarized %s starting %s: %d visits", period.value, start, summary.visits)
    return summary


def personal_bests(
    sessions: Sequence[SessionRecord],
    exercises_by_session: ExercisesBySession | None,
) -> PersonalBests:
    """Best day by volume, longest session and busiest session."""
    if not sessions:
        return PersonalBests()

    daily_weight: defaultdict = defaultdict(float)
    longest = 0.0
    most_exercises = 0
    for session in sessions:
        daily_weight[utc_day(session.started_at)] += session_volume(
            session.id, exercises_by_session
        )
        longest = max(longest, total_duration_minutes([session]))
        entries = (exercises_by_session or {}).get(session.id) or []
        most_exercises = max(most_exercises, len(entries))

    return PersonalBests(
        max_daily_weight=round_half_up(max(daily_weight.values())),
        max_session_duration=round_half_up(longest),
        most_exercises_per_session=most_exercises,
    )
