"""Pydantic models for API request bodies."""

from pydantic import BaseModel

from hydration_tracker.domain.goals import ActivityLevel, Theme
from hydration_tracker.domain.intakes import DrinkKind


class IntakeCreate(BaseModel):
    """Request body for logging an intake."""

    amount: int
    drink_kind: DrinkKind = DrinkKind.WATER


class GoalUpdate(BaseModel):
    """Request body for changing the daily goal.

    A custom goal needs ``goal_amount``; a computed goal needs
    ``body_weight_kg`` and uses ``activity_level``.
    """

    is_custom: bool
    goal_amount: int | None = None
    body_weight_kg: float | None = None
    activity_level: ActivityLevel = ActivityLevel.MODERATE


class PreferencesUpdate(BaseModel):
    """Request body for display preferences."""

    preset_amounts: list[int] | None = None
    theme: Theme | None = None
    notifications: bool | None = None
