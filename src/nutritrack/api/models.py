"""Request and response models for the HTTP API."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from nutritrack.domain.bmr import ActivityLevel, Sex
from nutritrack.domain.meals import MealEntry
from nutritrack.domain.stats import DailyTotals

MAX_MEAL_TEXT_LENGTH = 500


class MealRequest(BaseModel):
    """Free-text meal submission."""

    text: str = Field(max_length=MAX_MEAL_TEXT_LENGTH)


class MealEntryModel(BaseModel):
    """Meal entry as returned by the API."""

    id: str
    food: str
    calories: float
    protein: float
    carbs: float
    fat: float
    timestamp: datetime

    @classmethod
    def from_entry(cls, entry: MealEntry) -> "MealEntryModel":
        return cls(
            id=entry.id,
            food=entry.food,
            calories=entry.calories,
            protein=entry.protein_g,
            carbs=entry.carbs_g,
            fat=entry.fat_g,
            timestamp=entry.logged_at,
        )


class TotalsModel(BaseModel):
    """Summed nutrients for a day."""

    calories: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def from_totals(cls, totals: DailyTotals) -> "TotalsModel":
        return cls(
            calories=totals.calories,
            protein=totals.protein_g,
            carbs=totals.carbs_g,
            fat=totals.fat_g,
        )


class DailyLogResponse(BaseModel):
    date: date
    entries: list[MealEntryModel]
    totals: TotalsModel


class MealAddedResponse(BaseModel):
    entry: MealEntryModel
    totals: TotalsModel


class ResetResponse(BaseModel):
    date: date
    status: str = "cleared"


class WeekDayModel(BaseModel):
    """One row of the weekly chart series."""

    day: str
    date: date
    calories: float
    protein: float
    carbs: float
    fat: float
    logged: bool


class WeeklyStatsModel(BaseModel):
    avg_calories: int
    avg_protein: int
    avg_carbs: int
    avg_fat: int
    highest_calorie_day: str
    highest_calorie_date: date | None
    total_days_logged: int


class WeeklyInsightsModel(BaseModel):
    protein_consistency: str
    tracking_habit: str


class WeeklyDashboardResponse(BaseModel):
    days: list[WeekDayModel]
    stats: WeeklyStatsModel
    insights: WeeklyInsightsModel


class BmrRequest(BaseModel):
    """Biometrics for the BMR calculator."""

    age: float = Field(gt=0, le=120)
    sex: Sex
    weight_kg: float = Field(gt=0, le=500)
    height_cm: float = Field(gt=0, le=300)
    activity_level: ActivityLevel


class BmrResponse(BaseModel):
    bmr: int
    maintenance: int
    weight_loss: int
    bulking: int
