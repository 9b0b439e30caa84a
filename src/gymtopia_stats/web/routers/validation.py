"""Exercise validation routes."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ...services.validation import validate_cardio, validate_exercise

router = APIRouter(prefix="/validate", tags=["validation"])


class StrengthEntry(BaseModel):
    """A strength exercise about to be logged."""

    exercise_name: str = Field(min_length=1)
    category: str | None = Field(None, description="Muscle-group category")
    weight: float = Field(description="Weight in kg")
    reps: float
    sets: float


class CardioEntry(BaseModel):
    """A cardio exercise about to be logged."""

    exercise_name: str = Field(min_length=1)
    duration_minutes: float
    distance_km: float | None = None
    speed_kmh: float | None = None


@router.post("/exercise")
async def validate_strength_entry(entry: StrengthEntry):
    """Check a strength entry against the plausibility limits."""
    result = validate_exercise(
        entry.exercise_name, entry.category, entry.weight, entry.reps, entry.sets
    )
    return result.to_dict()


@router.post("/cardio")
async def validate_cardio_entry(entry: CardioEntry):
    """Check a cardio entry against the plausibility limits."""
    result = validate_cardio(
        entry.exercise_name, entry.duration_minutes, entry.distance_km, entry.speed_kmh
    )
    return result.to_dict()
