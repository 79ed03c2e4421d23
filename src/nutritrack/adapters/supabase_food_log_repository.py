"""Supabase repository for daily food logs."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

from supabase import Client

from nutritrack.adapters.food_log_document import (
    decode_entries,
    encode_entries,
    storage_key,
)
from nutritrack.domain.meals import MealEntry
from nutritrack.services.meals import FoodLogRepository


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation keyed by ``foodlog_<date>`` rows."""

    client: Client
    table: str = "food_logs"

    def load(self, day: date) -> list[MealEntry]:
        """Return the entries stored for a day."""
        response = (
            self.client.table(self.table)
            .select("payload")
            .eq("key", storage_key(day))
            .limit(1)
            .execute()
        )
        if not response.data:
            return []
        return decode_entries(response.data[0].get("payload") or [])

    def save(self, day: date, entries: list[MealEntry]) -> None:
        """Upsert the day's document."""
        self.client.table(self.table).upsert(
            {
                "key": storage_key(day),
                "payload": encode_entries(entries),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()

    def clear(self, day: date) -> None:
        """Delete the day's row."""
        self.client.table(self.table).delete().eq("key", storage_key(day)).execute()
