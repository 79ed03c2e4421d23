"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from nutritrack.config import Settings
from nutritrack.containers import AppContainer, build_container
from nutritrack.domain.meals import MealEntry
from nutritrack.services.meals import FoodLogRepository


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    days: dict[date, list[MealEntry]] = field(default_factory=dict)
    saves: int = 0

    def load(self, day: date) -> list[MealEntry]:
        return list(self.days.get(day, []))

    def save(self, day: date, entries: list[MealEntry]) -> None:
        self.saves += 1
        self.days[day] = list(entries)

    def clear(self, day: date) -> None:
        self.days.pop(day, None)


@dataclass
class FailingFoodLogRepository(InMemoryFoodLogRepository):
    """Repository whose writes always fail."""

    def save(self, day: date, entries: list[MealEntry]) -> None:
        raise OSError("disk full")


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "upsert": [], "delete": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_on_conflict: str | None = None
    actions: list[str] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(self, payload, on_conflict: str = "") -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.actions.append(action)
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        timezone="UTC",
        storage_backend="file",
        data_dir=tmp_path / "data",
    )


@pytest.fixture
def repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def container(
    settings: Settings, repository: InMemoryFoodLogRepository
) -> AppContainer:
    return build_container(settings, repository=repository)
