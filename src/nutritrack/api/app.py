"""FastAPI application factory."""

import logging
from datetime import date

from fastapi import FastAPI, HTTPException, Request, Response, status

from nutritrack.api.models import (
    BmrRequest,
    BmrResponse,
    DailyLogResponse,
    MealAddedResponse,
    MealEntryModel,
    MealRequest,
    ResetResponse,
    TotalsModel,
    WeekDayModel,
    WeeklyDashboardResponse,
    WeeklyInsightsModel,
    WeeklyStatsModel,
)
from nutritrack.app_logging import configure_logging
from nutritrack.containers import AppContainer
from nutritrack.domain.meals import MealEntry
from nutritrack.domain.stats import DailyTotals
from nutritrack.services.bmr import calculate_bmr
from nutritrack.services.meals import MealLogError
from nutritrack.services.stats import WeeklySummary

ADD_MEAL_FAILED = "Error adding meal. Please try again."


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="NutriTrack")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(
        "/food-log/meals",
        status_code=status.HTTP_201_CREATED,
        response_model=MealAddedResponse,
        responses={status.HTTP_204_NO_CONTENT: {"description": "Blank text ignored"}},
    )
    async def add_meal(payload: MealRequest, request: Request) -> object:
        """Interpret a meal description and add it to today's log."""
        state_container: AppContainer = request.app.state.container
        service = state_container.meal_log_service
        try:
            entry = await service.add_meal(payload.text)
        except MealLogError:
            logger.exception("Failed to add meal", extra={"text": payload.text})
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=ADD_MEAL_FAILED,
            ) from None
        if entry is None:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        totals, _ = service.get_day(entry.logged_at.date())
        return MealAddedResponse(
            entry=MealEntryModel.from_entry(entry),
            totals=TotalsModel.from_totals(totals),
        )

    @app.get("/food-log/today", response_model=DailyLogResponse)
    async def today_log(request: Request) -> DailyLogResponse:
        """Return today's entries and totals."""
        state_container: AppContainer = request.app.state.container
        totals, entries = state_container.meal_log_service.get_today()
        return _daily_log_response(totals, entries)

    @app.delete("/food-log/today", response_model=ResetResponse)
    async def start_new_day(request: Request) -> ResetResponse:
        """Clear today's log only."""
        state_container: AppContainer = request.app.state.container
        cleared = state_container.meal_log_service.start_new_day()
        return ResetResponse(date=cleared)

    @app.get("/food-log/{day}", response_model=DailyLogResponse)
    async def day_log(day: date, request: Request) -> DailyLogResponse:
        """Return entries and totals for an ISO date."""
        state_container: AppContainer = request.app.state.container
        totals, entries = state_container.meal_log_service.get_day(day)
        return _daily_log_response(totals, entries)

    @app.get("/dashboard/weekly", response_model=WeeklyDashboardResponse)
    async def weekly_dashboard(request: Request) -> WeeklyDashboardResponse:
        """Return the trailing seven-day series, stats and insights."""
        state_container: AppContainer = request.app.state.container
        return _weekly_response(state_container.stats_service.get_week())

    @app.post("/bmr", response_model=BmrResponse)
    async def bmr(payload: BmrRequest) -> BmrResponse:
        """Compute BMR and daily calorie targets."""
        results = calculate_bmr(
            age=payload.age,
            sex=payload.sex,
            weight_kg=payload.weight_kg,
            height_cm=payload.height_cm,
            activity_level=payload.activity_level,
        )
        return BmrResponse(
            bmr=results.bmr,
            maintenance=results.maintenance,
            weight_loss=results.weight_loss,
            bulking=results.bulking,
        )

    return app


def _daily_log_response(
    totals: DailyTotals, entries: list[MealEntry]
) -> DailyLogResponse:
    return DailyLogResponse(
        date=totals.day,
        entries=[MealEntryModel.from_entry(entry) for entry in entries],
        totals=TotalsModel.from_totals(totals),
    )


def _weekday_label(day: date) -> str:
    """Return a short weekday label like ``Mon``."""
    return day.strftime("%a")


def _weekly_response(summary: WeeklySummary) -> WeeklyDashboardResponse:
    stats = summary.stats
    highest = stats.highest_calorie_day
    return WeeklyDashboardResponse(
        days=[
            WeekDayModel(
                day=_weekday_label(totals.day),
                date=totals.day,
                calories=totals.calories,
                protein=totals.protein_g,
                carbs=totals.carbs_g,
                fat=totals.fat_g,
                logged=totals.logged,
            )
            for totals in summary.daily
        ],
        stats=WeeklyStatsModel(
            avg_calories=stats.avg_calories,
            avg_protein=stats.avg_protein_g,
            avg_carbs=stats.avg_carbs_g,
            avg_fat=stats.avg_fat_g,
            highest_calorie_day=_weekday_label(highest) if highest else "None",
            highest_calorie_date=highest,
            total_days_logged=stats.total_days_logged,
        ),
        insights=WeeklyInsightsModel(
            protein_consistency=summary.insights.protein_consistency,
            tracking_habit=summary.insights.tracking_habit,
        ),
    )
