"""Workout history loader from JSON exports."""

import json
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path

from ..models.sessions import ExerciseEntry, SessionRecord

logger = logging.getLogger(__name__)


@dataclass
class WorkoutHistory:
    """Everything the engines need for one user."""

    sessions: list[SessionRecord] = field(default_factory=list)
    exercises_by_session: dict[str, list[ExerciseEntry]] = field(default_factory=dict)
    gym_names: dict[str, str] = field(default_factory=dict)
    skipped: int = 0  # rows dropped as malformed

    @property
    def exercise_count(self) -> int:
        return sum(len(entries) for entries in self.exercises_by_session.values())


def parse_history(data: dict) -> WorkoutHistory:
    """Build a WorkoutHistory from a decoded history document.

    The document holds ``sessions`` and optionally ``exercises`` and
    ``gyms`` (gym id to name). Exercises may also be nested under each
    session as ``exercises``. Rows that cannot be parsed are skipped with a
    warning.

    Raises:
        ValueError: If the document is not a history object, or its
            ``exercises`` or ``gyms`` have the wrong shape.
    """
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object with a 'sessions' list")
    raw_sessions = data.get("sessions")
    if not isinstance(raw_sessions, list):
        raise ValueError("Expected a JSON object with a 'sessions' list")
    raw_exercises = data.get("exercises") or []
    if not isinstance(raw_exercises, list):
        raise ValueError("'exercises' must be a list")
    gyms = data.get("gyms") or {}
    if not isinstance(gyms, (dict, list)):
        raise ValueError("'gyms' must be an object or a list")

    history = WorkoutHistory()
    exercises: defaultdict[str, list[ExerciseEntry]] = defaultdict(list)
    raw_exercises = list(raw_exercises)

    for row in raw_sessions:
        if not isinstance(row, dict):
            logger.warning("Skipping session row that is not an object: %r", row)
            history.skipped += 1
            continue
        try:
            session = SessionRecord.from_dict(row)
        except ValueError as e:
            logger.warning("Skipping invalid session %s: %s", row.get("id", "unknown"), e)
            history.skipped += 1
            continue
        history.sessions.append(session)

        nested_rows = row.get("exercises")
        if not isinstance(nested_rows, list):
            continue
        for nested in nested_rows:
            if isinstance(nested, dict):
                raw_exercises.append({"session_id": session.id, **nested})

    for row in raw_exercises:
        if not isinstance(row, dict):
            logger.warning("Skipping exercise row that is not an object: %r", row)
            history.skipped += 1
            continue
        try:
            entry = ExerciseEntry.from_dict(row)
        except ValueError as e:
            logger.warning(
                "Skipping invalid exercise %s: %s", row.get("exercise_name", "unknown"), e
            )
            history.skipped += 1
            continue
        exercises[entry.session_id].append(entry)

    history.exercises_by_session = dict(exercises)

    if isinstance(gyms, list):
        gyms = {g.get("id"): g.get("name") for g in gyms if isinstance(g, dict)}
    history.gym_names = {
        str(gym_id): str(name) for gym_id, name in gyms.items() if gym_id is not None and name
    }

    logger.debug(
        "Loaded %d sessions, %d exercises, %d gyms (%d rows skipped)",
        len(history.sessions),
        history.exercise_count,
        len(history.gym_names),
        history.skipped,
    )
    return history


def load_history(path: Path | str) -> WorkoutHistory:
    """Load a workout history JSON file.

    Args:
        path: Path to the JSON export

    Returns:
        Parsed WorkoutHistory

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or not a history document
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    return parse_history(data)
