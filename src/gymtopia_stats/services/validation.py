"""Plausibility checks for a logged exercise before it is saved.

Nothing here raises for bad numbers; every finding lands in the returned
:class:`ValidationResult`. Errors mean the entry should be rejected,
warnings mean the user should confirm it.
"""

import logging
import math

from ..models.limits import DEFAULT_LIMIT_TABLE, LimitTable, ValidationResult
from ..utils.exercise_utils import CardioKind, classify_cardio

logger = logging.getLogger(__name__)

# Flat thresholds applied regardless of the resolved profile
HIGH_SET_COUNT = 10
HIGH_SESSION_VOLUME = 10_000  # kg

VERY_LONG_CARDIO_MINUTES = 300
LONG_CARDIO_MINUTES = 180

MARATHON_KM = 42.195
MAX_RUNNING_SPEED_KMH = 25
LONG_RIDE_KM = 200
FAST_RIDE_KMH = 60


def _fmt(value) -> str:
    """Render 100.0 as 100 and keep real decimals."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _number(value, label: str, result: ValidationResult) -> float | None:
    """Usable numeric value of a field, or None. NaN and infinity get a warning."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        result.warn(f"{label} is not a finite number. Please verify the input.")
        return None
    return value


def validate_exercise(
    exercise_name: str,
    category: str | None,
    weight: float,
    reps: float,
    sets: float,
    limits: LimitTable = DEFAULT_LIMIT_TABLE,
) -> ValidationResult:
    """Check a strength entry against the limit table.

    Every rule is evaluated; a hard error on one field does not hide
    warnings on the others.

    Args:
        exercise_name: Name as stored by the exercise picker
        category: Muscle-group category, used when the name has no profile
        weight: Weight per rep in kg
        reps: Reps per set
        sets: Number of sets
        limits: Limit table to check against

    Returns:
        ValidationResult with any warnings and errors
    """
    result = ValidationResult()
    profile, tier = limits.resolve_with_tier(exercise_name, category)
    logger.debug("Validating %r against %s limits", exercise_name, tier.value)

    weight = _number(weight, "Weight", result)
    reps = _number(reps, "Reps", result)
    sets = _number(sets, "Sets", result)

    if weight is not None:
        if weight > profile.max_weight:
            result.fail(
                f"{exercise_name}: {_fmt(weight)}kg exceeds world-record-level values "
                f"(maximum {_fmt(profile.max_weight)}kg)."
            )
        elif weight > profile.advanced_weight_ceiling:
            result.warn(
                f"{exercise_name}: {_fmt(weight)}kg is unusually high. Please verify the input."
            )

    if reps is not None:
        if reps > profile.max_reps:
            result.fail(
                f"{_fmt(reps)} reps is implausibly high (maximum {profile.max_reps})."
            )
        elif reps > profile.typical_reps.max:
            result.warn(
                f"{_fmt(reps)} reps is more than usual. Is this an endurance set?"
            )

    if sets is not None:
        if sets > profile.max_sets:
            result.fail(
                f"{_fmt(sets)} sets is implausibly many (maximum {profile.max_sets})."
            )
        elif sets > HIGH_SET_COUNT:
            result.warn(f"{_fmt(sets)} sets is a lot. Watch out for overtraining.")

    if weight is not None and reps is not None and sets is not None:
        total_volume = weight * reps * sets
        if total_volume > HIGH_SESSION_VOLUME:
            result.warn(
                f"Total volume of {_fmt(total_volume)}kg is very high. Make sure to rest properly."
            )

    return result


def validate_cardio(
    exercise_name: str,
    duration_minutes: float,
    distance_km: float | None = None,
    speed_kmh: float | None = None,
) -> ValidationResult:
    """Check a cardio entry.

    Only an impossible running speed is an error; everything else is a
    warning because cardio logs vary far more than lifting logs.

    Args:
        exercise_name: Activity name, used to pick running or cycling rules
        duration_minutes: Length of the activity
        distance_km: Distance covered, if logged
        speed_kmh: Average speed, if logged

    Returns:
        ValidationResult with any warnings and errors
    """
    result = ValidationResult()
    duration = _number(duration_minutes, "Duration", result)
    distance = _number(distance_km, "Distance", result)
    speed = _number(speed_kmh, "Speed", result)

    if duration is not None:
        if duration > VERY_LONG_CARDIO_MINUTES:
            result.warn(
                f"{_fmt(duration)} minutes is a very long session. Please verify the input."
            )
        elif duration > LONG_CARDIO_MINUTES:
            result.warn(
                f"{_fmt(duration)} minutes is a long session. Remember to stay hydrated."
            )

    kind = classify_cardio(exercise_name)
    logger.debug("Validating cardio %r as %s", exercise_name, kind.value)

    if kind is CardioKind.RUNNING:
        if distance is not None and distance > MARATHON_KM:
            result.warn(
                f"{_fmt(distance)}km is longer than a marathon. Please verify the input."
            )
        if speed is not None and speed > MAX_RUNNING_SPEED_KMH:
            result.fail(
                f"{_fmt(speed)}km/h exceeds sustainable human running speed. "
                "Please verify the input."
            )
    elif kind is CardioKind.CYCLING:
        if distance is not None and distance > LONG_RIDE_KM:
            result.warn(
                f"{_fmt(distance)}km is a very long ride. Please verify the input."
            )
        if speed is not None and speed > FAST_RIDE_KMH:
            result.warn(f"{_fmt(speed)}km/h is a very fast, pro-level pace.")

    return result
