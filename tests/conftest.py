"""Pytest configuration and fixtures."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from gymtopia_stats.models.sessions import ExerciseEntry, SessionRecord, SetRecord

# Friday 2024-03-15, noon UTC
NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed reference clock."""
    return NOW


@pytest.fixture
def make_session():
    """Factory for sessions that start ``days_ago`` days before NOW."""
    counter = {"n": 0}

    def _make(
        days_ago: float = 0,
        minutes: float | None = 60,
        gym_id: str | None = "gym-1",
        hour: int = 9,
        session_id: str | None = None,
    ) -> SessionRecord:
        counter["n"] += 1
        day = (NOW - timedelta(days=days_ago)).date()
        started = datetime(day.year, day.month, day.day, hour, 0, tzinfo=timezone.utc)
        ended = started + timedelta(minutes=minutes) if minutes is not None else None
        return SessionRecord(
            id=session_id or f"s{counter['n']}",
            user_id="user-1",
            gym_id=gym_id,
            started_at=started,
            ended_at=ended,
        )

    return _make


@pytest.fixture
def make_entry():
    """Factory for exercise entries from (weight, reps) pairs."""

    def _make(session_id: str, name: str = "Bench Press", sets=((60, 10),)) -> ExerciseEntry:
        return ExerciseEntry(
            session_id=session_id,
            exercise_name=name,
            muscle_group="chest",
            sets=[SetRecord(weight=w, reps=r) for w, r in sets],
        )

    return _make


@pytest.fixture
def history_document():
    """A small exported history in the workout_sessions / workout_exercises shape."""
    return {
        "sessions": [
            {
                "id": "a",
                "user_id": "user-1",
                "gym_id": "g1",
                "started_at": "2024-03-15T09:00:00Z",
                "ended_at": "2024-03-15T10:30:00Z",
                "mood": "great",
            },
            {
                "id": "b",
                "user_id": "user-1",
                "gym_id": "g1",
                "started_at": "2024-03-14T18:00:00Z",
                "ended_at": "2024-03-14T19:00:00Z",
            },
            {
                "id": "c",
                "user_id": "user-1",
                "gym_id": "g2",
                "started_at": "2024-03-13T07:00:00Z",
                "ended_at": None,
            },
        ],
        "exercises": [
            {
                "session_id": "a",
                "exercise_name": "Bench Press",
                "muscle_group": "chest",
                "sets": [{"weight": 80, "reps": 8}, {"weight": 80, "reps": 6}],
                "order_index": 0,
            },
            {
                "session_id": "b",
                "exercise_name": "Squat",
                "muscle_group": "legs",
                "sets": [{"weight": 100, "reps": 5}, {"weight": None, "reps": 5}],
                "order_index": 0,
            },
        ],
        "gyms": {"g1": "Shinjuku Fitness", "g2": "Yotsuya Gym"},
    }


@pytest.fixture
def history_file(tmp_path, history_document):
    """The sample history written to disk."""
    path = tmp_path / "history.json"
    path.write_text(json.dumps(history_document), encoding="utf-8")
    return path
