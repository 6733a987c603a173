"""Models for estimates returned by the language model."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_WORKOUT_CALORIES = 2000
MAX_FOOD_CALORIES = 3000


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _require_number(value: object) -> object:
    """Reject strings, booleans and non-finite floats."""
    if not _is_number(value):
        raise ValueError("must be a number")
    return value


class WorkoutEstimate(BaseModel):
    """Exercise estimate."""

    model_config = ConfigDict(extra="ignore")

    activity: str = Field(min_length=1)
    calories_burned: int | float
    duration_minutes: int | float | None = None

    @field_validator("calories_burned", mode="before")
    @classmethod
    def require_numeric_calories(cls, value: object) -> object:
        return _require_number(value)

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def drop_non_numeric_duration(cls, value: object) -> object:
        return value if _is_number(value) else None

    def clamped(self) -> "WorkoutEstimate":
        """Return a copy with calories capped at the per-workout maximum."""
        return self.model_copy(
            update={
                "calories_burned": min(self.calories_burned, MAX_WORKOUT_CALORIES)
            }
        )


class FoodEstimate(BaseModel):
    """Nutrition estimate for a food item or meal."""

    model_config = ConfigDict(extra="ignore")

    food: str = Field(min_length=1)
    calories: int | float
    protein: int | float | None = None
    carbs: int | float | None = None
    fat: int | float | None = None

    @field_validator("calories", mode="before")
    @classmethod
    def require_numeric_calories(cls, value: object) -> object:
        return _require_number(value)

    @field_validator("protein", "carbs", "fat", mode="before")
    @classmethod
    def drop_non_numeric_macros(cls, value: object) -> object:
        return value if _is_number(value) else None

    def clamped(self) -> "FoodEstimate":
        """Return a copy with calories capped at the per-meal maximum."""
        return self.model_copy(
            update={"calories": min(self.calories, MAX_FOOD_CALORIES)}
        )
