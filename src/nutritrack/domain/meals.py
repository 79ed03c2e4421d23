"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NutrientEstimate:
    """Estimated calories and macros for a meal description."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class MealEntry:
    """A single logged meal. Entries are never edited after creation."""

    id: str
    food: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    logged_at: datetime
