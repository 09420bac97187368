"""Recommended goal and pacing calculations."""

from datetime import datetime, timedelta

from hydration_tracker.domain.goals import ACTIVITY_BONUS_ML, ActivityLevel
from hydration_tracker.rounding import round_half_up

ML_PER_KG = 30
WAKING_HOURS = 16


def recommended_intake(body_weight_kg: float, activity_level: ActivityLevel) -> int:
    """Return the recommended daily intake in ml.

    The result is not clamped; callers validate the weight range.
    """
    bonus = ACTIVITY_BONUS_ML[ActivityLevel(activity_level)]
    return round_half_up(body_weight_kg * ML_PER_KG + bonus)


def hourly_recommendation(daily_goal: int) -> int:
    """Return the hourly amount that spreads the goal over waking hours."""
    return round_half_up(daily_goal / WAKING_HOURS)


def remaining_per_hour(current_amount: int, goal_amount: int, hours_left: int) -> int:
    """Return the amount per hour still needed to reach the goal."""
    remaining = goal_amount - current_amount
    if remaining <= 0:
        return 0
    return round_half_up(remaining / max(hours_left, 1))


def hours_left_in_day(now: datetime) -> int:
    """Return the whole hours remaining until local midnight."""
    midnight = (now + timedelta(days=1)).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    return int((midnight - now).total_seconds() // 3600)
