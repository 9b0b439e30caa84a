"""Workout statistics aggregation.

Turns a user's raw session and exercise history into a
:class:`StatisticsSnapshot`. Everything here is a pure function of its
arguments: the reference clock is passed in, inputs are never mutated and
malformed records degrade to zero contributions instead of raising.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime

from ..models.sessions import ExerciseEntry, SessionRecord
from ..models.statistics import Period, StatisticsSnapshot, Weekday
from ..utils.dates import (
    DEFAULT_WEEK_START,
    round_half_up,
    start_of_period,
    to_utc,
)
from .streaks import compute_streaks

logger = logging.getLogger(__name__)

ExercisesBySession = Mapping[str, Sequence[ExerciseEntry]]


def count_visits_since(sessions: Iterable[SessionRecord], boundary: datetime) -> int:
    """Number of sessions that started at or after ``boundary``."""
    boundary = to_utc(boundary)
    return sum(1 for s in sessions if to_utc(s.started_at) >= boundary)


def total_duration_minutes(sessions: Iterable[SessionRecord]) -> float:
    """Summed length of all timed sessions.

    Sessions without an end, or whose end precedes their start, add nothing.
    """
    total = 0.0
    for session in sessions:
        if session.ended_at is not None and not session.is_timed:
            logger.debug("Session %s ends before it starts; ignoring duration", session.id)
        total += session.duration_minutes
    return total


def exercise_volume(entries: Iterable[ExerciseEntry] | None) -> float:
    """Total volume across a list of exercise entries.

    Per-set rules live on :attr:`SetRecord.volume`; anything that is not an
    entry adds nothing.
    """
    return sum(entry.volume for entry in entries or () if isinstance(entry, ExerciseEntry))


def session_volume(session_id: str, exercises_by_session: ExercisesBySession | None) -> float:
    """Total volume logged in one session."""
    if not exercises_by_session:
        return 0.0
    return exercise_volume(exercises_by_session.get(session_id))


def total_volume(
    sessions: Sequence[SessionRecord], exercises_by_session: ExercisesBySession | None
) -> float:
    """Volume across every session in ``sessions``."""
    return sum(session_volume(s.id, exercises_by_session) for s in sessions)


def compute_statistics(
    sessions: Sequence[SessionRecord],
    exercises_by_session: ExercisesBySession | None,
    now: datetime,
    week_start: Weekday = DEFAULT_WEEK_START,
) -> StatisticsSnapshot:
    """Compute aggregate statistics for a user's workout history.

    Args:
        sessions: Every session the user has logged
        exercises_by_session: Exercise entries keyed by session id
        now: Reference clock for the week/month/year windows and streaks
        week_start: First day of the week for the weekly window

    Returns:
        A fresh StatisticsSnapshot. Empty input gives all zeros.
    """
    sessions = list(sessions or ())
    total_visits = len(sessions)
    if total_visits == 0:
        return StatisticsSnapshot()

    streaks = compute_streaks(sessions, now)
    duration_minutes = total_duration_minutes(sessions)
    volume = total_volume(sessions, exercises_by_session)

    snapshot = StatisticsSnapshot(
        total_visits=total_visits,
        weekly_visits=count_visits_since(
            sessions, start_of_period(now, Period.WEEK, week_start)
        ),
        monthly_visits=count_visits_since(sessions, start_of_period(now, Period.MONTH)),
        yearly_visits=count_visits_since(sessions, start_of_period(now, Period.YEAR)),
        current_streak=streaks.current,
        longest_streak=streaks.longest,
        total_weight=round_half_up(volume),
        total_duration_hours=round_half_up(duration_minutes / 60),
        avg_duration_minutes=round_half_up(duration_minutes / total_visits),
    )
    logger.debug("Computed statistics for %d sessions: %s", total_visits, snapshot)
    return snapshot
