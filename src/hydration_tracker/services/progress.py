"""Progress display helpers derived from achievement rates."""

from enum import Enum

COMPLETE_RATE = 100
HIGH_RATE = 67
MEDIUM_RATE = 34
ONE_AND_A_HALF_RATE = 150
DOUBLE_GOAL_RATE = 200


class ProgressTier(str, Enum):
    """Color tier for the progress bar."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    COMPLETE = "complete"


class Celebration(str, Enum):
    """Celebration shown once the goal is reached."""

    GOAL_MET = "goal_met"
    ONE_AND_A_HALF = "one_and_a_half"
    DOUBLE_GOAL = "double_goal"

    @property
    def message(self) -> str:
        return _CELEBRATION_MESSAGES[self]


_CELEBRATION_MESSAGES = {
    Celebration.GOAL_MET: "Congratulations! Today's goal is done!",
    Celebration.ONE_AND_A_HALF: "Amazing! 1.5x your goal!",
    Celebration.DOUBLE_GOAL: "Incredible! You doubled your goal!",
}


def progress_color_tier(rate: float) -> ProgressTier:
    """Return the color tier for an achievement rate."""
    if rate >= COMPLETE_RATE:
        return ProgressTier.COMPLETE
    if rate >= HIGH_RATE:
        return ProgressTier.HIGH
    if rate >= MEDIUM_RATE:
        return ProgressTier.MEDIUM
    return ProgressTier.LOW


def progress_width(current: float, goal: float) -> float:
    """Return the progress bar width as a percentage capped at 100."""
    if goal == 0:
        return 0
    return min(current / goal * 100, 100)


def celebration_message(rate: float) -> Celebration | None:
    """Return the highest celebration reached by ``rate``, if any."""
    if rate >= DOUBLE_GOAL_RATE:
        return Celebration.DOUBLE_GOAL
    if rate >= ONE_AND_A_HALF_RATE:
        return Celebration.ONE_AND_A_HALF
    if rate >= COMPLETE_RATE:
        return Celebration.GOAL_MET
    return None
