"""FastAPI application factory."""

import logging
from dataclasses import asdict
from datetime import date

from fastapi import FastAPI, HTTPException, Path, Query, Request, status

from hydration_tracker.api.admin import router as admin_router
from hydration_tracker.api.models import GoalUpdate, IntakeCreate, PreferencesUpdate
from hydration_tracker.app_logging import configure_logging
from hydration_tracker.containers import AppContainer
from hydration_tracker.domain.goals import ActivityLevel
from hydration_tracker.domain.intakes import PRESET_AMOUNTS
from hydration_tracker.services.goals import hourly_recommendation, recommended_intake
from hydration_tracker.services.intakes import InvalidIntakeError, IntakeNotFoundError
from hydration_tracker.services.settings import InvalidGoalError, to_payload
from hydration_tracker.services.stats import HistoryPeriod


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/intakes", status_code=status.HTTP_201_CREATED)
    async def create_intake(body: IntakeCreate, request: Request) -> dict[str, object]:
        """Log an intake for today."""
        state_container: AppContainer = request.app.state.container
        try:
            event = state_container.intake_service.record_intake(
                body.amount, body.drink_kind
            )
        except InvalidIntakeError as exc:
            logger.info("Rejected intake: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        return asdict(event)

    @app.get("/intakes")
    async def list_intakes(
        request: Request, day: date | None = Query(default=None, alias="date")
    ) -> dict[str, object]:
        """Return intakes for a date, defaulting to today."""
        state_container: AppContainer = request.app.state.container
        resolved = (day or date.today()).isoformat()
        events = state_container.intake_service.list_for_date(resolved)
        return {"date": resolved, "intakes": [asdict(event) for event in events]}

    @app.delete("/intakes/{intake_id}")
    async def delete_intake(intake_id: str, request: Request) -> dict[str, str]:
        """Delete an intake."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.intake_service.delete_intake(intake_id)
        except IntakeNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
        return {"status": "ok"}

    @app.get("/presets")
    async def presets(request: Request) -> dict[str, object]:
        """Return quick-add amounts with labels."""
        state_container: AppContainer = request.app.state.container
        labels = {preset.amount: preset.label for preset in PRESET_AMOUNTS}
        amounts = state_container.settings_service.get_settings().preset_amounts
        return {
            "presets": [
                {"amount": amount, "label": labels.get(amount, f"{amount} ml")}
                for amount in amounts
            ]
        }

    @app.get("/stats/today")
    async def today_stats(request: Request) -> dict[str, object]:
        """Return today's progress and pacing."""
        state_container: AppContainer = request.app.state.container
        progress = state_container.stats_service.get_today_progress()
        payload = asdict(progress)
        payload["celebration_message"] = (
            progress.celebration.message if progress.celebration else None
        )
        return payload

    @app.get("/stats/days/{day}")
    async def day_stats(day: date, request: Request) -> dict[str, object]:
        """Return stats for one calendar date."""
        state_container: AppContainer = request.app.state.container
        return asdict(state_container.stats_service.get_day(day.isoformat()))

    @app.get("/stats/weeks/{week_start}")
    async def week_stats(week_start: date, request: Request) -> dict[str, object]:
        """Return stats for the seven days from a start date."""
        state_container: AppContainer = request.app.state.container
        return asdict(state_container.stats_service.get_week(week_start.isoformat()))

    @app.get("/stats/months/{year}/{month}")
    async def month_stats(
        request: Request,
        year: int = Path(ge=1, le=9999),
        month: int = Path(ge=1, le=12),
    ) -> dict[str, object]:
        """Return stats for a calendar month."""
        state_container: AppContainer = request.app.state.container
        return asdict(state_container.stats_service.get_month(year, month))

    @app.get("/stats/history")
    async def history(
        request: Request, period: HistoryPeriod = HistoryPeriod.WEEK
    ) -> dict[str, object]:
        """Return chart data and summary for a history period."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.stats_service.get_history(period, date.today())
        return asdict(summary)

    @app.get("/settings")
    async def get_settings(request: Request) -> dict[str, object]:
        """Return current settings."""
        state_container: AppContainer = request.app.state.container
        return to_payload(state_container.settings_service.get_settings())

    @app.put("/settings/goal")
    async def update_goal(body: GoalUpdate, request: Request) -> dict[str, object]:
        """Set a custom goal or derive one from weight and activity."""
        state_container: AppContainer = request.app.state.container
        service = state_container.settings_service
        try:
            if body.is_custom:
                if body.goal_amount is None:
                    raise InvalidGoalError("goal_amount is required for a custom goal")
                goal = service.set_custom_goal(body.goal_amount)
            else:
                if body.body_weight_kg is None:
                    raise InvalidGoalError(
                        "body_weight_kg is required for a computed goal"
                    )
                goal = service.set_computed_goal(
                    body.body_weight_kg, body.activity_level
                )
        except InvalidGoalError as exc:
            logger.info("Rejected goal update: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        return asdict(goal)

    @app.put("/settings/preferences")
    async def update_preferences(
        body: PreferencesUpdate, request: Request
    ) -> dict[str, object]:
        """Update preset amounts, theme or notification preference."""
        state_container: AppContainer = request.app.state.container
        updated = state_container.settings_service.update_preferences(
            preset_amounts=body.preset_amounts,
            theme=body.theme,
            notifications=body.notifications,
        )
        return to_payload(updated)

    @app.get("/goals/recommendation")
    async def goal_recommendation(
        body_weight_kg: float,
        activity_level: ActivityLevel = ActivityLevel.MODERATE,
    ) -> dict[str, int]:
        """Preview the recommended goal without saving it."""
        recommended = recommended_intake(body_weight_kg, activity_level)
        return {
            "recommended_intake": recommended,
            "hourly_recommendation": hourly_recommendation(recommended),
        }

    return app
