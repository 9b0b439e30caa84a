"""Plausibility bounds for logged exercises."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class ExperienceLevel(str, Enum):
    """Training experience level."""

    BEGINNER = "beginner"  # < 1 year consistent training
    INTERMEDIATE = "intermediate"  # 1-3 years
    ADVANCED = "advanced"  # 3+ years


class MuscleCategory(str, Enum):
    """Muscle-group categories used by the exercise picker."""

    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"


@dataclass(frozen=True)
class Range:
    """Inclusive numeric band."""

    min: float
    max: float


@dataclass(frozen=True)
class ExerciseLimitProfile:
    """Hard limits and typical bands for one exercise or category."""

    max_weight: float
    typical_weight: Mapping[ExperienceLevel, Range]
    max_reps: int
    typical_reps: Range
    max_sets: int

    @property
    def advanced_weight_ceiling(self) -> float:
        """Heaviest weight still considered typical for anyone."""
        return self.typical_weight[ExperienceLevel.ADVANCED].max


class LimitTier(str, Enum):
    """Which table a resolved profile came from."""

    EXERCISE = "exercise"
    CATEGORY = "category"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class LimitTable:
    """Immutable lookup of limit profiles.

    Lookup goes exact exercise name, then category, then the fallback
    category, so resolution always yields a profile.
    """

    exercises: Mapping[str, ExerciseLimitProfile]
    categories: Mapping[str, ExerciseLimitProfile]
    fallback_category: str = MuscleCategory.CHEST.value

    def __post_init__(self):
        if self.fallback_category not in self.categories:
            raise ValueError(
                f"Fallback category '{self.fallback_category}' has no limit profile"
            )
        # Freeze the caller's dicts so the table can be shared between requests
        object.__setattr__(self, "exercises", MappingProxyType(dict(self.exercises)))
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))

    def resolve_with_tier(
        self, exercise_name: str | None, category: str | None
    ) -> tuple[ExerciseLimitProfile, LimitTier]:
        """Resolve the profile for an exercise and report which tier matched."""
        if exercise_name is not None and exercise_name in self.exercises:
            return self.exercises[exercise_name], LimitTier.EXERCISE
        if category is not None:
            key = category.value if isinstance(category, Enum) else category
            if key in self.categories:
                return self.categories[key], LimitTier.CATEGORY
        return self.categories[self.fallback_category], LimitTier.FALLBACK


@dataclass
class ValidationResult:
    """Outcome of checking one logged exercise."""

    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def fail(self, message: str) -> None:
        self.errors.append(message)

    def to_dict(self) -> dict:
        return {
            "isValid": self.is_valid,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }


def _profile(
    max_weight: float,
    beginner: tuple[float, float],
    intermediate: tuple[float, float],
    advanced: tuple[float, float],
    max_reps: int,
    typical_reps: tuple[float, float],
    max_sets: int,
) -> ExerciseLimitProfile:
    return ExerciseLimitProfile(
        max_weight=max_weight,
        typical_weight=MappingProxyType(
            {
                ExperienceLevel.BEGINNER: Range(*beginner),
                ExperienceLevel.INTERMEDIATE: Range(*intermediate),
                ExperienceLevel.ADVANCED: Range(*advanced),
            }
        ),
        max_reps=max_reps,
        typical_reps=Range(*typical_reps),
        max_sets=max_sets,
    )


CATEGORY_LIMITS: Mapping[str, ExerciseLimitProfile] = MappingProxyType(
    {
        MuscleCategory.CHEST.value: _profile(300, (20, 60), (40, 100), (80, 200), 50, (1, 30), 20),
        MuscleCategory.BACK.value: _profile(350, (20, 70), (50, 120), (100, 250), 50, (1, 30), 20),
        MuscleCategory.LEGS.value: _profile(500, (30, 100), (80, 200), (150, 400), 50, (1, 30), 20),
        MuscleCategory.SHOULDERS.value: _profile(150, (5, 30), (20, 60), (40, 100), 50, (1, 30), 20),
        MuscleCategory.ARMS.value: _profile(100, (5, 20), (15, 40), (30, 70), 50, (1, 30), 20),
        MuscleCategory.CORE.value: _profile(100, (0, 20), (10, 40), (20, 80), 100, (1, 50), 20),
    }
)

_BENCH_PRESS = _profile(300, (20, 60), (40, 100), (80, 200), 30, (1, 15), 10)
_SQUAT = _profile(400, (30, 80), (60, 150), (120, 300), 30, (1, 20), 10)
_DEADLIFT = _profile(450, (40, 100), (80, 180), (150, 350), 20, (1, 12), 8)
_SHOULDER_PRESS = _profile(150, (10, 30), (25, 60), (50, 100), 30, (1, 15), 10)
_LAT_PULLDOWN = _profile(200, (20, 60), (40, 100), (80, 180), 30, (6, 20), 10)

# Keyed by the exact names the exercise picker stores, in English and Japanese
EXERCISE_LIMITS: Mapping[str, ExerciseLimitProfile] = MappingProxyType(
    {
        "Bench Press": _BENCH_PRESS,
        "ベンチプレス": _BENCH_PRESS,
        "Squat": _SQUAT,
        "スクワット": _SQUAT,
        "Deadlift": _DEADLIFT,
        "デッドリフト": _DEADLIFT,
        "Shoulder Press": _SHOULDER_PRESS,
        "ショルダープレス": _SHOULDER_PRESS,
        "Lat Pulldown": _LAT_PULLDOWN,
        "ラットプルダウン": _LAT_PULLDOWN,
    }
)

DEFAULT_LIMIT_TABLE = LimitTable(
    exercises=EXERCISE_LIMITS,
    categories=CATEGORY_LIMITS,
    fallback_category=MuscleCategory.CHEST.value,
)
