"""Tests for meal log service."""

import asyncio
from datetime import UTC, date, datetime, timedelta

import pytest

from nutritrack.services.interpreter import FoodTextInterpreter
from nutritrack.services.meals import MealLogError, MealLogService
from tests.conftest import FailingFoodLogRepository, InMemoryFoodLogRepository

NOW = datetime(2024, 3, 10, 8, 30, tzinfo=UTC)


def _service(repository: InMemoryFoodLogRepository, **kwargs) -> MealLogService:
    return MealLogService(
        interpreter=FoodTextInterpreter(),
        repository=repository,
        **kwargs,
    )


def test_add_meal_saves_entry_and_totals() -> None:
    repository = InMemoryFoodLogRepository()
    service = _service(repository)

    entry = asyncio.run(service.add_meal("2 eggs and 1 cup rice", now=NOW))

    assert entry is not None
    assert entry.food == "2 eggs and 1 cup rice"
    assert entry.calories == 286
    assert entry.id == str(int(NOW.timestamp() * 1000))
    totals, entries = service.get_day(NOW.date())
    assert entries == [entry]
    assert (totals.calories, totals.protein_g, totals.carbs_g, totals.fat_g) == (
        286,
        15,
        30,
        10,
    )


def test_add_meal_appends_in_order_with_unique_ids() -> None:
    repository = InMemoryFoodLogRepository()
    service = _service(repository)

    first = asyncio.run(service.add_meal("banana", now=NOW))
    second = asyncio.run(service.add_meal("2 slices bread", now=NOW))

    assert first is not None
    assert second is not None
    assert first.id != second.id
    assert [entry.food for entry in repository.days[NOW.date()]] == [
        "banana",
        "2 slices bread",
    ]


def test_add_meal_ignores_blank_text() -> None:
    repository = InMemoryFoodLogRepository()
    service = _service(repository)

    assert asyncio.run(service.add_meal("   ", now=NOW)) is None
    assert repository.saves == 0


def test_add_meal_uses_configured_timezone_for_day() -> None:
    repository = InMemoryFoodLogRepository()
    service = _service(repository, timezone_name="America/Los_Angeles")

    late_utc = datetime(2024, 3, 10, 3, 0, tzinfo=UTC)
    entry = asyncio.run(service.add_meal("banana", now=late_utc))

    assert entry is not None
    assert list(repository.days) == [date(2024, 3, 9)]


def test_add_meal_failure_leaves_log_untouched() -> None:
    repository = FailingFoodLogRepository()
    earlier = asyncio.run(
        _service(InMemoryFoodLogRepository()).add_meal("banana", now=NOW)
    )
    assert earlier is not None
    repository.days[NOW.date()] = [earlier]
    service = _service(repository)

    with pytest.raises(MealLogError):
        asyncio.run(service.add_meal("2 eggs", now=NOW))

    assert repository.days[NOW.date()] == [earlier]


def test_add_meal_waits_for_configured_delay(monkeypatch) -> None:
    delays: list[float] = []

    async def fake_sleep(seconds: float) -> None:
        delays.append(seconds)

    monkeypatch.setattr("nutritrack.services.meals.asyncio.sleep", fake_sleep)
    service = _service(InMemoryFoodLogRepository(), interpret_delay_seconds=1.0)

    asyncio.run(service.add_meal("banana", now=NOW))

    assert delays == [1.0]


def test_start_new_day_clears_only_today() -> None:
    repository = InMemoryFoodLogRepository()
    service = _service(repository)
    today = NOW.date()
    yesterday = today - timedelta(days=1)
    asyncio.run(service.add_meal("banana", now=NOW - timedelta(days=1)))
    asyncio.run(service.add_meal("2 eggs", now=NOW))

    cleared = service.start_new_day(now=NOW)

    assert cleared == today
    assert today not in repository.days
    assert [entry.food for entry in repository.days[yesterday]] == ["banana"]
    totals, entries = service.get_today(now=NOW)
    assert entries == []
    assert totals.calories == 0


def test_start_new_day_just_before_midnight() -> None:
    repository = InMemoryFoodLogRepository()
    service = _service(repository)
    late = datetime(2024, 3, 10, 23, 59, 59, tzinfo=UTC)
    asyncio.run(service.add_meal("banana", now=late))

    cleared = service.start_new_day(now=late)

    assert cleared == date(2024, 3, 10)
    assert repository.days == {}
