"""JSON file repository for daily food logs."""

import json
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from nutritrack.adapters.food_log_document import (
    decode_entries,
    encode_entries,
    storage_key,
)
from nutritrack.domain.meals import MealEntry
from nutritrack.services.meals import FoodLogRepository


@dataclass
class JsonFileFoodLogRepository(FoodLogRepository):
    """Stores each day as ``<root>/foodlog_<date>.json``."""

    root: Path

    def load(self, day: date) -> list[MealEntry]:
        """Return the entries stored for a day."""
        path = self._path(day)
        if not path.exists():
            return []
        return decode_entries(json.loads(path.read_text(encoding="utf-8")))

    def save(self, day: date, entries: list[MealEntry]) -> None:
        """Write the day's entries, replacing the previous file in one step."""
        self.root.mkdir(parents=True, exist_ok=True)
        path = self._path(day)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(
            json.dumps(encode_entries(entries), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        tmp_path.replace(path)

    def clear(self, day: date) -> None:
        """Remove the day's file if present."""
        self._path(day).unlink(missing_ok=True)

    def _path(self, day: date) -> Path:
        return self.root / f"{storage_key(day)}.json"
