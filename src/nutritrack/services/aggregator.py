"""Daily and weekly aggregation over meal entries."""

from collections.abc import Iterable, Sequence
from datetime import date

from nutritrack.domain.meals import MealEntry
from nutritrack.domain.stats import DailyTotals, WeeklyInsights, WeeklyStats
from nutritrack.rounding import round_half_up

HIGH_PROTEIN_G = 50
MODERATE_PROTEIN_G = 20
HABIT_DAYS = 5
MOMENTUM_DAYS = 3

EMPTY_WEEK = WeeklyStats(
    avg_calories=0,
    avg_protein_g=0,
    avg_carbs_g=0,
    avg_fat_g=0,
    highest_calorie_day=None,
    total_days_logged=0,
)


def aggregate_day(day: date, entries: Iterable[MealEntry]) -> DailyTotals:
    """Sum each nutrient over a day's entries."""
    total = DailyTotals(day=day, calories=0, protein_g=0, carbs_g=0, fat_g=0)
    for entry in entries:
        total = DailyTotals(
            day=day,
            calories=total.calories + entry.calories,
            protein_g=total.protein_g + entry.protein_g,
            carbs_g=total.carbs_g + entry.carbs_g,
            fat_g=total.fat_g + entry.fat_g,
            entry_count=total.entry_count + 1,
        )
    return total


def summarize_week(days: Sequence[DailyTotals]) -> WeeklyStats:
    """Average the logged days and find the highest-calorie one.

    ``days`` must be ordered oldest first; ties on calories go to the earliest
    day. Days without entries are left out of every denominator.
    """
    logged = [day for day in days if day.logged]
    if not logged:
        return EMPTY_WEEK

    count = len(logged)
    highest = logged[0]
    for day in logged[1:]:
        if day.calories > highest.calories:
            highest = day

    return WeeklyStats(
        avg_calories=round_half_up(sum(day.calories for day in logged) / count),
        avg_protein_g=round_half_up(sum(day.protein_g for day in logged) / count),
        avg_carbs_g=round_half_up(sum(day.carbs_g for day in logged) / count),
        avg_fat_g=round_half_up(sum(day.fat_g for day in logged) / count),
        highest_calorie_day=highest.day,
        total_days_logged=count,
    )


def weekly_insights(stats: WeeklyStats) -> WeeklyInsights:
    """Return feedback labels for protein intake and logging consistency."""
    if stats.avg_protein_g > HIGH_PROTEIN_G:
        protein = "Excellent consistency"
    elif stats.avg_protein_g > MODERATE_PROTEIN_G:
        protein = "Good progress"
    else:
        protein = "Room for improvement"

    if stats.total_days_logged >= HABIT_DAYS:
        habit = "Great tracking habit!"
    elif stats.total_days_logged >= MOMENTUM_DAYS:
        habit = "Building momentum"
    else:
        habit = "Keep logging daily"

    return WeeklyInsights(protein_consistency=protein, tracking_habit=habit)
