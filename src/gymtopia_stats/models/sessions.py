"""Workout session and exercise log models."""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..utils.dates import to_utc

logger = logging.getLogger(__name__)


def parse_timestamp(value) -> datetime:
    """Parse a timestamp into an aware UTC datetime.

    Accepts datetimes, ISO 8601 strings (a trailing ``Z`` is allowed) and
    unix epoch seconds. Naive values are taken to be UTC.

    Raises:
        ValueError: If the value cannot be interpreted as a timestamp.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            parsed = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise ValueError(f"Cannot parse timestamp: {value!r}") from None
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f"Cannot parse timestamp: {value}") from None
    else:
        raise ValueError(f"Cannot parse timestamp: {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def coerce_number(value) -> float | None:
    """Best-effort conversion of a logged set value to a number.

    Returns None for anything that is not a finite number or a numeric string.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


@dataclass
class SetRecord:
    """One logged set. Any field may be missing."""

    weight: float | None = None  # in kg
    reps: float | None = None
    rest: float | None = None  # in seconds

    @property
    def volume(self) -> float:
        """Weight x reps, or 0 unless both are finite positive numbers."""
        for value in (self.weight, self.reps):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return 0.0
            if not math.isfinite(value) or value <= 0:
                return 0.0
        return self.weight * self.reps

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {"weight": self.weight, "reps": self.reps, "rest": self.rest}

    @classmethod
    def from_dict(cls, data) -> "SetRecord":
        """Create from dictionary. Garbage in any field becomes None."""
        if not isinstance(data, dict):
            return cls()
        return cls(
            weight=coerce_number(data.get("weight")),
            reps=coerce_number(data.get("reps")),
            rest=coerce_number(data.get("rest")),
        )


@dataclass
class SessionRecord:
    """A single gym visit."""

    id: str
    started_at: datetime
    user_id: str | None = None
    gym_id: str | None = None
    ended_at: datetime | None = None
    mood: str | None = None
    notes: str | None = None

    @property
    def duration_minutes(self) -> float:
        """Recorded length of the visit.

        Zero when the session has no end or the end precedes the start.
        """
        if not self.is_timed:
            return 0.0
        return (to_utc(self.ended_at) - to_utc(self.started_at)).total_seconds() / 60

    @property
    def is_timed(self) -> bool:
        """True if the visit has a usable start/end pair."""
        return self.ended_at is not None and to_utc(self.ended_at) >= to_utc(self.started_at)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "gym_id": self.gym_id,
            "started_at": self.started_at.isoformat(),
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "mood": self.mood,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SessionRecord":
        """Create from a workout_sessions row.

        Raises:
            ValueError: If the row has no id or no parseable started_at.
        """
        if data.get("id") is None:
            raise ValueError("Session row has no id")
        if not data.get("started_at"):
            raise ValueError(f"Session {data['id']} has no started_at")

        ended_at = None
        if data.get("ended_at"):
            try:
                ended_at = parse_timestamp(data["ended_at"])
            except ValueError:
                logger.warning(
                    "Ignoring unparseable ended_at on session %s: %r",
                    data["id"],
                    data["ended_at"],
                )

        return cls(
            id=str(data["id"]),
            user_id=data.get("user_id"),
            gym_id=str(data["gym_id"]) if data.get("gym_id") is not None else None,
            started_at=parse_timestamp(data["started_at"]),
            ended_at=ended_at,
            mood=data.get("mood"),
            notes=data.get("notes"),
        )


@dataclass
class ExerciseEntry:
    """One exercise logged within a session."""

    session_id: str
    exercise_name: str
    muscle_group: str | None = None
    equipment_type: str | None = None
    sets: list[SetRecord] = field(default_factory=list)
    order_index: int = 0

    @property
    def volume(self) -> float:
        """Total weight x reps across all valid sets."""
        return sum(s.volume for s in self.sets if isinstance(s, SetRecord))

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "session_id": self.session_id,
            "exercise_name": self.exercise_name,
            "muscle_group": self.muscle_group,
            "equipment_type": self.equipment_type,
            "sets": [s.to_dict() for s in self.sets],
            "order_index": self.order_index,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseEntry":
        """Create from a workout_exercises row.

        Raises:
            ValueError: If the row is not linked to a session.
        """
        if data.get("session_id") is None:
            raise ValueError("Exercise row has no session_id")

        raw_sets = data.get("sets")
        sets = [SetRecord.from_dict(s) for s in raw_sets] if isinstance(raw_sets, list) else []

        return cls(
            session_id=str(data["session_id"]),
            exercise_name=str(data.get("exercise_name") or ""),
            muscle_group=data.get("muscle_group"),
            equipment_type=data.get("equipment_type"),
            sets=sets,
            order_index=int(coerce_number(data.get("order_index")) or 0),
        )
