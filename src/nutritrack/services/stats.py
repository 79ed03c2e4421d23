"""Statistics service for daily food logs."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from nutritrack.domain.stats import DailyTotals, WeeklyInsights, WeeklyStats
from nutritrack.services.aggregator import (
    aggregate_day,
    summarize_week,
    weekly_insights,
)
from nutritrack.services.meals import FoodLogRepository

WINDOW_DAYS = 7


@dataclass
class WeeklySummary:
    """Trailing seven-day totals with stats and insights."""

    daily: list[DailyTotals]
    stats: WeeklyStats
    insights: WeeklyInsights


@dataclass
class StatsService:
    """Service for computing trailing-window stats in a timezone."""

    repository: FoodLogRepository
    timezone_name: str = "UTC"

    def get_day(self, day: date) -> DailyTotals:
        """Return totals for a single day."""
        return aggregate_day(day, self.repository.load(day))

    def get_week(self, today: date | None = None) -> WeeklySummary:
        """Return totals for today and the six prior days, oldest first."""
        end = today or datetime.now(tz=ZoneInfo(self.timezone_name)).date()
        daily = [
            self.get_day(end - timedelta(days=offset))
            for offset in range(WINDOW_DAYS - 1, -1, -1)
        ]
        stats = summarize_week(daily)
        return WeeklySummary(
            daily=daily,
            stats=stats,
            insights=weekly_insights(stats),
        )
