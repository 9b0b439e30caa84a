"""Calendar helpers.

Everything here works in UTC so that day, week, month and year boundaries
do not depend on the machine the code runs on.
"""

import math
from datetime import date, datetime, time, timedelta, timezone

from ..models.statistics import Period, Weekday

DEFAULT_WEEK_START = Weekday.SUNDAY


def to_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime. Naive values are assumed to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_day(value: datetime) -> date:
    """Calendar day of a timestamp in UTC."""
    return to_utc(value).date()


def _midnight(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def start_of_week(now: datetime, week_start: Weekday = DEFAULT_WEEK_START) -> datetime:
    """Midnight of the most recent ``week_start`` day, today included."""
    today = utc_day(now)
    offset = (today.weekday() - Weekday.parse(week_start)) % 7
    return _midnight(today - timedelta(days=offset))


def start_of_month(now: datetime) -> datetime:
    return _midnight(utc_day(now).replace(day=1))


def start_of_year(now: datetime) -> datetime:
    return _midnight(utc_day(now).replace(month=1, day=1))


def start_of_period(
    now: datetime, period: Period, week_start: Weekday = DEFAULT_WEEK_START
) -> datetime:
    """Start of the current calendar window containing ``now``."""
    period = Period(period)
    if period is Period.WEEK:
        return start_of_week(now, week_start)
    if period is Period.MONTH:
        return start_of_month(now)
    return start_of_year(now)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    ``round()`` rounds halves to even, which would turn a 2.5 hour total
    into 2.
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def days_between(earlier: date, later: date) -> int:
    return (later - earlier).days
