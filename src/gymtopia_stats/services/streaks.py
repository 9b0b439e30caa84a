"""Consecutive-day activity streaks."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..models.sessions import SessionRecord
from ..utils.dates import utc_day

logger = logging.getLogger(__name__)

# A streak survives a day with no visit yet; it lapses after that.
STREAK_GRACE_DAYS = 1

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class StreakSummary:
    """Current and longest runs of consecutive active days."""

    current: int = 0
    longest: int = 0
    last_active_day: date | None = None


def active_days(sessions: Iterable[SessionRecord]) -> list[date]:
    """Distinct UTC days on which a session started, oldest first."""
    days = {utc_day(s.started_at) for s in sessions if s.started_at is not None}
    return sorted(days)


def longest_run(days: list[date]) -> int:
    """Length of the longest run of consecutive days in a sorted list."""
    if not days:
        return 0

    longest = current = 1
    for previous, day in zip(days, days[1:]):
        if day - previous == _ONE_DAY:
            current += 1
            longest = max(longest, current)
        else:
            current = 1
    return longest


def current_run(days: list[date], today: date) -> int:
    """Length of the run ending at the latest active day.

    Zero if the latest active day is more than the grace period before
    ``today``.
    """
    if not days:
        return 0

    last = days[-1]
    if (today - last).days > STREAK_GRACE_DAYS:
        return 0

    count = 1
    for index in range(len(days) - 1, 0, -1):
        if days[index] - days[index - 1] != _ONE_DAY:
            break
        count += 1
    return count


def compute_streaks(sessions: Iterable[SessionRecord], now: datetime) -> StreakSummary:
    """Compute current and longest streaks as of ``now``."""
    days = active_days(sessions)
    if not days:
        return StreakSummary()

    summary = StreakSummary(
        current=current_run(days, utc_day(now)),
        longest=longest_run(days),
        last_active_day=days[-1],
    )
    logger.debug(
        "Streaks over %d active days: current=%d longest=%d",
        len(days),
        summary.current,
        summary.longest,
    )
    return summary
