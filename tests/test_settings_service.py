"""Tests for settings service."""

from datetime import UTC, datetime

import pytest

from hydration_tracker.domain.goals import ActivityLevel, Theme
from hydration_tracker.services.settings import InvalidGoalError, SettingsService
from tests.conftest import InMemorySettingsRepository


def test_get_settings_returns_defaults_when_empty() -> None:
    service = SettingsService(InMemorySettingsRepository())

    settings = service.get_settings()

    assert settings.daily_goal.goal_amount == 2000
    assert settings.daily_goal.is_custom is False
    assert settings.daily_goal.body_weight_kg is None
    assert settings.preset_amounts == [200, 350, 500, 1000]
    assert settings.theme is Theme.LIGHT
    assert settings.notifications is False


def test_get_settings_merges_partial_payload() -> None:
    repo = InMemorySettingsRepository(
        payload={"daily_goal": {"goal_amount": 2500}, "theme": "dark", "extra": 1}
    )
    service = SettingsService(repo)

    settings = service.get_settings()

    assert settings.daily_goal.goal_amount == 2500
    assert settings.daily_goal.is_custom is False
    assert settings.daily_goal.activity_level is ActivityLevel.MODERATE
    assert settings.theme is Theme.DARK
    assert settings.preset_amounts == [200, 350, 500, 1000]


def test_get_settings_falls_back_on_malformed_payload() -> None:
    repo = InMemorySettingsRepository(
        payload={"daily_goal": {"activity_level": "extreme"}}
    )
    service = SettingsService(repo)

    assert service.get_goal().goal_amount == 2000


def test_set_custom_goal_keeps_weight() -> None:
    repo = InMemorySettingsRepository()
    service = SettingsService(repo)
    service.set_computed_goal(80, ActivityLevel.LIGHT)
    now = datetime(2024, 1, 1, tzinfo=UTC)

    goal = service.set_custom_goal(3000, now=now)

    assert goal.goal_amount == 3000
    assert goal.is_custom is True
    assert goal.body_weight_kg == 80
    assert goal.updated_at_ms == int(now.timestamp() * 1000)
    assert service.get_goal() == goal


def test_set_custom_goal_rejects_non_positive() -> None:
    service = SettingsService(InMemorySettingsRepository())

    with pytest.raises(InvalidGoalError):
        service.set_custom_goal(0)


def test_set_computed_goal_stores_serialized_payload() -> None:
    repo = InMemorySettingsRepository()
    service = SettingsService(repo)

    goal = service.set_computed_goal(60, ActivityLevel.MODERATE)

    assert goal.goal_amount == 2000
    assert goal.is_custom is False
    assert repo.payload is not None
    assert repo.payload["daily_goal"]["activity_level"] == "moderate"
    assert repo.payload["daily_goal"]["goal_amount"] == 2000


@pytest.mark.parametrize("weight", [29.9, 200.5])
def test_set_computed_goal_rejects_weight_out_of_range(weight: float) -> None:
    service = SettingsService(InMemorySettingsRepository())

    with pytest.raises(InvalidGoalError):
        service.set_computed_goal(weight, ActivityLevel.LIGHT)


def test_update_preferences_leaves_goal_untouched() -> None:
    service = SettingsService(InMemorySettingsRepository())
    service.set_custom_goal(2400)

    updated = service.update_preferences(preset_amounts=[250, 500], theme="dark")

    assert updated.preset_amounts == [250, 500]
    assert updated.theme is Theme.DARK
    assert updated.notifications is False
    assert service.get_goal().goal_amount == 2400
