"""Domain models for goal configuration and user settings."""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_GOAL_ML = 2000
DEFAULT_PRESET_AMOUNTS = [200, 350, 500, 1000]


class ActivityLevel(str, Enum):
    """Daily activity level used for the recommended goal."""

    LIGHT = "light"
    MODERATE = "moderate"
    INTENSE = "intense"


ACTIVITY_BONUS_ML = {
    ActivityLevel.LIGHT: 0,
    ActivityLevel.MODERATE: 200,
    ActivityLevel.INTENSE: 500,
}


class Theme(str, Enum):
    """Display theme preference."""

    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class GoalConfiguration:
    """The active daily goal and how it was set."""

    goal_amount: int
    is_custom: bool
    body_weight_kg: float | None = None
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    updated_at_ms: int = 0


@dataclass(frozen=True)
class UserSettings:
    """Stored preferences for the tracker."""

    daily_goal: GoalConfiguration
    preset_amounts: list[int] = field(
        default_factory=lambda: list(DEFAULT_PRESET_AMOUNTS)
    )
    theme: Theme = Theme.LIGHT
    notifications: bool = False


def default_settings() -> UserSettings:
    """Return a fresh copy of the default settings."""
    return UserSettings(
        daily_goal=GoalConfiguration(goal_amount=DEFAULT_GOAL_ML, is_custom=False)
    )
