"""Statistics and insights routes."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from ...data import WorkoutHistory, parse_history
from ...models.sessions import parse_timestamp
from ...models.statistics import Period, Weekday
from ...services.insights import (
    DEFAULT_LIMIT,
    achievement_progress,
    gym_visit_rankings,
    period_summary,
    personal_bests,
    recent_visits,
    time_distribution,
    weekly_pattern,
)
from ...services.statistics import compute_statistics

logger = logging.getLogger(__name__)

router = APIRouter(tags=["statistics"])


class HistoryRequest(BaseModel):
    """A user's raw workout history plus the reference clock."""

    sessions: list[dict] = Field(description="workout_sessions rows")
    exercises: list[dict] = Field(default_factory=list, description="workout_exercises rows")
    gyms: dict[str, str] = Field(default_factory=dict, description="Gym id to display name")
    now: str | None = Field(None, description="Reference time (ISO 8601); defaults to server time")
    week_start: str = Field("sunday", description="First day of the week")


class InsightsRequest(HistoryRequest):
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=100, description="Rows per ranking list")


def _load(body: HistoryRequest) -> tuple[WorkoutHistory, datetime, Weekday]:
    try:
        history = parse_history(
            {"sessions": body.sessions, "exercises": body.exercises, "gyms": body.gyms}
        )
        now = parse_timestamp(body.now) if body.now else datetime.now(timezone.utc)
        week_start = Weekday.parse(body.week_start)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return history, now, week_start


@router.post("/statistics")
async def statistics(body: HistoryRequest):
    """Aggregate visit, streak, volume and duration statistics."""
    history, now, week_start = _load(body)
    snapshot = compute_statistics(
        history.sessions, history.exercises_by_session, now, week_start=week_start
    )
    return {**snapshot.to_dict(), "skipped": history.skipped}


@router.post("/insights")
async def insights(body: InsightsRequest):
    """Gym rankings, recent visits, patterns, period summaries and achievements."""
    history, now, week_start = _load(body)
    sessions, exercises = history.sessions, history.exercises_by_session
    snapshot = compute_statistics(sessions, exercises, now, week_start=week_start)

    return {
        "statistics": snapshot.to_dict(),
        "gym_rankings": [
            r.to_dict()
            for r in gym_visit_rankings(sessions, now, history.gym_names, limit=body.limit)
        ],
        "recent_visits": [
            v.to_dict()
            for v in recent_visits(sessions, exercises, history.gym_names, limit=body.limit)
        ],
        "weekly_pattern": [d.to_dict() for d in weekly_pattern(sessions)],
        "time_distribution": [s.to_dict() for s in time_distribution(sessions)],
        "achievements": [a.to_dict() for a in achievement_progress(snapshot)],
        "period_summaries": [
            period_summary(sessions, exercises, now, period, week_start=week_start).to_dict()
            for period in Period
        ],
        "personal_bests": personal_bests(sessions, exercises).to_dict(),
        "skipped": history.skipped,
    }
