"""Goal and preference settings service."""

import logging
from dataclasses import asdict, dataclass, replace
from datetime import UTC, datetime
from typing import Protocol

from hydration_tracker.domain.goals import (
    ActivityLevel,
    GoalConfiguration,
    Theme,
    UserSettings,
    default_settings,
)
from hydration_tracker.services.goals import recommended_intake

MIN_BODY_WEIGHT_KG = 30
MAX_BODY_WEIGHT_KG = 200

_logger = logging.getLogger(__name__)


class InvalidGoalError(ValueError):
    """Raised when goal inputs are out of range."""


class SettingsRepository(Protocol):
    """Persistence interface for the settings record."""

    def read(self) -> dict[str, object] | None:
        """Return the stored settings payload, if any."""

    def write(self, payload: dict[str, object]) -> None:
        """Replace the stored settings payload."""

    def clear(self) -> None:
        """Remove the stored settings payload."""


@dataclass
class SettingsService:
    """Service for reading and updating settings."""

    repository: SettingsRepository

    def get_settings(self) -> UserSettings:
        """Return stored settings merged over the defaults."""
        payload = self.repository.read()
        if not payload:
            return default_settings()
        try:
            return from_payload(payload)
        except (TypeError, ValueError):
            _logger.warning("Stored settings are malformed, using defaults")
            return default_settings()

    def get_goal(self) -> GoalConfiguration:
        """Return the active goal configuration."""
        return self.get_settings().daily_goal

    def set_custom_goal(
        self, goal_amount: int, now: datetime | None = None
    ) -> GoalConfiguration:
        """Set a goal entered directly by the user."""
        if goal_amount <= 0:
            raise InvalidGoalError("Goal amount must be positive")
        current = self.get_settings()
        goal = replace(
            current.daily_goal,
            goal_amount=goal_amount,
            is_custom=True,
            updated_at_ms=_now_ms(now),
        )
        self._save(replace(current, daily_goal=goal))
        _logger.info("Custom goal set: goal_amount=%s", goal_amount)
        return goal

    def set_computed_goal(
        self,
        body_weight_kg: float,
        activity_level: ActivityLevel,
        now: datetime | None = None,
    ) -> GoalConfiguration:
        """Derive the goal from body weight and activity level."""
        if not MIN_BODY_WEIGHT_KG <= body_weight_kg <= MAX_BODY_WEIGHT_KG:
            raise InvalidGoalError(
                f"Body weight must be between {MIN_BODY_WEIGHT_KG} "
                f"and {MAX_BODY_WEIGHT_KG} kg"
            )
        level = ActivityLevel(activity_level)
        goal = GoalConfiguration(
            goal_amount=recommended_intake(body_weight_kg, level),
            is_custom=False,
            body_weight_kg=body_weight_kg,
            activity_level=level,
            updated_at_ms=_now_ms(now),
        )
        self._save(replace(self.get_settings(), daily_goal=goal))
        _logger.info(
            "Computed goal set: goal_amount=%s weight=%s activity=%s",
            goal.goal_amount,
            body_weight_kg,
            level.value,
        )
        return goal

    def update_preferences(
        self,
        preset_amounts: list[int] | None = None,
        theme: Theme | None = None,
        notifications: bool | None = None,
    ) -> UserSettings:
        """Update display preferences, leaving unspecified ones untouched."""
        current = self.get_settings()
        updated = replace(
            current,
            preset_amounts=(
                list(preset_amounts)
                if preset_amounts is not None
                else current.preset_amounts
            ),
            theme=Theme(theme) if theme is not None else current.theme,
            notifications=(
                notifications if notifications is not None else current.notifications
            ),
        )
        self._save(updated)
        return updated

    def _save(self, settings: UserSettings) -> None:
        self.repository.write(to_payload(settings))


def to_payload(settings: UserSettings) -> dict[str, object]:
    """Serialize settings into a JSON-compatible dict."""
    payload = asdict(settings)
    payload["theme"] = settings.theme.value
    payload["daily_goal"]["activity_level"] = settings.daily_goal.activity_level.value
    return payload


def from_payload(payload: dict[str, object]) -> UserSettings:
    """Build settings from stored data, filling absent fields from defaults."""
    defaults = default_settings()
    goal_defaults = asdict(defaults.daily_goal)
    raw_goal = payload.get("daily_goal")
    goal_data = {
        key: value
        for key, value in (raw_goal if isinstance(raw_goal, dict) else {}).items()
        if key in goal_defaults
    }
    merged_goal = {**goal_defaults, **goal_data}
    weight = merged_goal["body_weight_kg"]
    goal = GoalConfiguration(
        goal_amount=int(merged_goal["goal_amount"]),
        is_custom=bool(merged_goal["is_custom"]),
        body_weight_kg=float(weight) if weight is not None else None,
        activity_level=ActivityLevel(merged_goal["activity_level"]),
        updated_at_ms=int(merged_goal["updated_at_ms"]),
    )
    presets = payload.get("preset_amounts", defaults.preset_amounts)
    return UserSettings(
        daily_goal=goal,
        preset_amounts=[int(amount) for amount in presets],
        theme=Theme(payload.get("theme", defaults.theme)),
        notifications=bool(payload.get("notifications", defaults.notifications)),
    )


def _now_ms(now: datetime | None) -> int:
    moment = now or datetime.now(tz=UTC)
    return int(moment.timestamp() * 1000)
