"""Meal logging service."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from nutritrack.domain.meals import MealEntry
from nutritrack.domain.stats import DailyTotals
from nutritrack.services.aggregator import aggregate_day
from nutritrack.services.interpreter import FoodTextInterpreter

_logger = logging.getLogger(__name__)


class MealLogError(Exception):
    """Raised when a meal could not be interpreted or saved."""


class FoodLogRepository(Protocol):
    """Persistence interface for daily food logs."""

    def load(self, day: date) -> list[MealEntry]:
        """Return the entries logged on a day, oldest first."""

    def save(self, day: date, entries: list[MealEntry]) -> None:
        """Replace the entries stored for a day."""

    def clear(self, day: date) -> None:
        """Delete every entry stored for a day."""


@dataclass
class MealLogService:
    """Service that interprets meal text and persists daily logs."""

    interpreter: FoodTextInterpreter
    repository: FoodLogRepository
    timezone_name: str = "UTC"
    interpret_delay_seconds: float = 0.0

    def today(self, now: datetime | None = None) -> date:
        """Return the calendar date of ``now`` in the configured timezone."""
        tz = ZoneInfo(self.timezone_name)
        return (now or datetime.now(tz=tz)).astimezone(tz).date()

    async def add_meal(
        self, text: str, now: datetime | None = None
    ) -> MealEntry | None:
        """Interpret ``text`` and append it to the day's log.

        Blank text is ignored and returns None. On failure nothing is written
        and MealLogError is raised.
        """
        if not text.strip():
            return None
        tz = ZoneInfo(self.timezone_name)
        logged_at = (now or datetime.now(tz=tz)).astimezone(tz)
        day = logged_at.date()
        try:
            if self.interpret_delay_seconds > 0:
                await asyncio.sleep(self.interpret_delay_seconds)
            estimate = self.interpreter.interpret(text)
            entries = self.repository.load(day)
            entry = MealEntry(
                id=_next_entry_id(logged_at, entries),
                food=text,
                calories=estimate.calories,
                protein_g=estimate.protein_g,
                carbs_g=estimate.carbs_g,
                fat_g=estimate.fat_g,
                logged_at=logged_at,
            )
            self.repository.save(day, [*entries, entry])
        except Exception as exc:
            raise MealLogError(f"Could not log meal for {day}") from exc
        _logger.info(
            "Meal logged: day=%s calories=%s entries=%s",
            day,
            entry.calories,
            len(entries) + 1,
        )
        return entry

    def get_day(self, day: date) -> tuple[DailyTotals, list[MealEntry]]:
        """Return a day's totals and entries."""
        entries = self.repository.load(day)
        return aggregate_day(day, entries), entries

    def get_today(
        self, now: datetime | None = None
    ) -> tuple[DailyTotals, list[MealEntry]]:
        """Return today's totals and entries."""
        return self.get_day(self.today(now))

    def start_new_day(self, now: datetime | None = None) -> date:
        """Clear today's log and return the cleared date."""
        day = self.today(now)
        self.repository.clear(day)
        _logger.info("Food log reset: day=%s", day)
        return day


def _next_entry_id(logged_at: datetime, entries: list[MealEntry]) -> str:
    """Return a millisecond timestamp id not already used by ``entries``."""
    taken = {entry.id for entry in entries}
    millis = int(logged_at.timestamp() * 1000)
    while str(millis) in taken:
        millis += 1
    return str(millis)
