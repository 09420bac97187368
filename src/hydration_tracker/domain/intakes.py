"""Domain models for intake logging."""

from dataclasses import dataclass
from enum import Enum

MIN_INTAKE_ML = 1
MAX_INTAKE_ML = 9999


class DrinkKind(str, Enum):
    """Kind of liquid consumed."""

    WATER = "water"
    OTHER = "other"


@dataclass(frozen=True)
class IntakeEvent:
    """A single logged intake.

    ``calendar_date`` is fixed when the event is created and is the only key
    used for daily, weekly and monthly bucketing.
    """

    id: str
    occurred_at_ms: int
    amount: int
    drink_kind: DrinkKind
    calendar_date: str


@dataclass(frozen=True)
class PresetAmount:
    """Quick-add amount shown next to the intake form."""

    amount: int
    label: str


PRESET_AMOUNTS = [
    PresetAmount(amount=200, label="Glass"),
    PresetAmount(amount=350, label="Small bottle"),
    PresetAmount(amount=500, label="Bottle"),
    PresetAmount(amount=1000, label="Large bottle"),
]
