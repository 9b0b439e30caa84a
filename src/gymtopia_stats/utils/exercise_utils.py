"""Utilities for exercise name normalization and classification."""

import re
from enum import Enum


class CardioKind(str, Enum):
    """Cardio activities with their own plausibility rules."""

    RUNNING = "running"
    CYCLING = "cycling"
    OTHER = "other"


_RUNNING_WORDS = re.compile(r"\b(run|runs|running|jog|jogs|jogging)\b")
_CYCLING_WORDS = re.compile(r"\b(cycle|cycling|bike|biking|bicycle|spin|spinning)\b")

# Japanese names carry no word boundaries, so these are plain substrings
_RUNNING_TERMS = ("ランニング", "ジョギング")
_CYCLING_TERMS = ("サイクリング",)


def normalize_exercise_name(name: str) -> str:
    """Normalize an exercise name for comparison.

    Converts to lowercase, turns separators into spaces and collapses whitespace.
    """
    normalized = name.lower().strip()
    normalized = re.sub(r"[_\-/,]+", " ", normalized)
    normalized = re.sub(r"\s+", " ", normalized)
    return normalized


def classify_cardio(exercise_name: str | None) -> CardioKind:
    """Work out which cardio rule set applies to an exercise name."""
    if not exercise_name:
        return CardioKind.OTHER

    if any(term in exercise_name for term in _RUNNING_TERMS):
        return CardioKind.RUNNING
    if any(term in exercise_name for term in _CYCLING_TERMS):
        return CardioKind.CYCLING

    normalized = normalize_exercise_name(exercise_name)
    if _RUNNING_WORDS.search(normalized):
        return CardioKind.RUNNING
    if _CYCLING_WORDS.search(normalized):
        return CardioKind.CYCLING
    return CardioKind.OTHER


def unique_exercise_names(names) -> list[str]:
    """Distinct non-empty exercise names, first occurrence order, case-insensitive."""
    seen: set[str] = set()
    result = []
    for name in names:
        if not name:
            continue
        key = normalize_exercise_name(name)
        if key in seen:
            continue
        seen.add(key)
        result.append(name)
    return result
