"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros."""

    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    entry_count: int = 0

    @property
    def logged(self) -> bool:
        """Return True when at least one meal was logged for the day."""
        return self.entry_count > 0


@dataclass(frozen=True)
class WeeklyStats:
    """Averages and extrema over the logged days of a week."""

    avg_calories: int
    avg_protein_g: int
    avg_carbs_g: int
    avg_fat_g: int
    highest_calorie_day: date | None
    total_days_logged: int


@dataclass(frozen=True)
class WeeklyInsights:
    """Short feedback labels derived from weekly stats."""

    protein_consistency: str
    tracking_habit: str
