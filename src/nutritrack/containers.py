"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutritrack.adapters.json_file_food_log_repository import (
    JsonFileFoodLogRepository,
)
from nutritrack.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from nutritrack.config import Settings
from nutritrack.services.interpreter import (
    DEFAULT_FOOD_TABLE,
    FoodTextInterpreter,
    load_food_table,
)
from nutritrack.services.meals import FoodLogRepository, MealLogService
from nutritrack.services.stats import StatsService


class ConfigurationError(RuntimeError):
    """Raised when settings cannot produce a working container."""


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    repository: FoodLogRepository
    meal_log_service: MealLogService
    stats_service: StatsService


def build_repository(settings: Settings) -> FoodLogRepository:
    """Create the food log repository selected by settings."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ConfigurationError(
                "supabase storage requires SUPABASE_URL and SUPABASE_SERVICE_KEY"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseFoodLogRepository(client, table=settings.supabase_table)
    return JsonFileFoodLogRepository(settings.data_dir)


def build_container(
    settings: Settings | None = None,
    repository: FoodLogRepository | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_repository = (
        repository if repository is not None else build_repository(resolved_settings)
    )
    table = (
        load_food_table(resolved_settings.food_table_path)
        if resolved_settings.food_table_path
        else DEFAULT_FOOD_TABLE
    )
    meal_log_service = MealLogService(
        interpreter=FoodTextInterpreter(table=table),
        repository=resolved_repository,
        timezone_name=resolved_settings.timezone,
        interpret_delay_seconds=resolved_settings.interpret_delay_seconds,
    )
    stats_service = StatsService(
        repository=resolved_repository,
        timezone_name=resolved_settings.timezone,
    )
    return AppContainer(
        settings=resolved_settings,
        repository=resolved_repository,
        meal_log_service=meal_log_service,
        stats_service=stats_service,
    )
