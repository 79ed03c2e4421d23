"""Stored document format for daily food logs."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from nutritrack.domain.meals import MealEntry

FOOD_LOG_VERSION = 1
KEY_PREFIX = "foodlog_"


class StoredMealEntry(BaseModel):
    """Meal entry as written to storage."""

    id: str
    food: str
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    timestamp: datetime


class StoredFoodLog(BaseModel):
    """Versioned envelope around a day's entries."""

    version: int = FOOD_LOG_VERSION
    entries: list[StoredMealEntry] = Field(default_factory=list)


def storage_key(day: date) -> str:
    """Return the storage key for a calendar day."""
    return f"{KEY_PREFIX}{day.isoformat()}"


def encode_entries(entries: list[MealEntry]) -> dict[str, object]:
    """Return a JSON-ready document for ``entries``."""
    document = StoredFoodLog(
        entries=[
            StoredMealEntry(
                id=entry.id,
                food=entry.food,
                calories=entry.calories,
                protein=entry.protein_g,
                carbs=entry.carbs_g,
                fat=entry.fat_g,
                timestamp=entry.logged_at,
            )
            for entry in entries
        ]
    )
    return document.model_dump(mode="json")


def decode_entries(payload: object) -> list[MealEntry]:
    """Parse a stored document, accepting the unversioned list format.

    Raises ``pydantic.ValidationError`` (a ValueError) on malformed data.
    """
    if isinstance(payload, list):
        payload = {"version": 0, "entries": payload}
    document = StoredFoodLog.model_validate(payload)
    return [
        MealEntry(
            id=stored.id,
            food=stored.food,
            calories=stored.calories,
            protein_g=stored.protein,
            carbs_g=stored.carbs,
            fat_g=stored.fat,
            logged_at=stored.timestamp,
        )
        for stored in document.entries
    ]
