"""Intake logging service."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import uuid4

from hydration_tracker.domain.intakes import (
    MAX_INTAKE_ML,
    MIN_INTAKE_ML,
    DrinkKind,
    IntakeEvent,
)

_logger = logging.getLogger(__name__)


class InvalidIntakeError(ValueError):
    """Raised when an intake amount is outside the accepted range."""


class IntakeNotFoundError(LookupError):
    """Raised when deleting an intake that does not exist."""


class IntakeRepository(Protocol):
    """Persistence interface for intake events."""

    def append(self, event: IntakeEvent) -> None:
        """Store a new intake event."""

    def remove_by_id(self, event_id: str) -> bool:
        """Remove an event, returning False when it was not found."""

    def list_all(self) -> list[IntakeEvent]:
        """Return every stored event."""

    def list_by_date(self, day: str) -> list[IntakeEvent]:
        """Return events attributed to a calendar date."""

    def list_by_date_range(self, start: str, end: str) -> list[IntakeEvent]:
        """Return events with calendar dates in the inclusive range."""

    def clear(self) -> None:
        """Remove every stored event."""


@dataclass
class IntakeService:
    """Application service for recording and removing intakes."""

    repository: IntakeRepository

    def record_intake(
        self,
        amount: int,
        drink_kind: DrinkKind = DrinkKind.WATER,
        now: datetime | None = None,
    ) -> IntakeEvent:
        """Validate and persist a new intake attributed to today's date."""
        if not MIN_INTAKE_ML <= amount <= MAX_INTAKE_ML:
            raise InvalidIntakeError(
                f"Amount must be between {MIN_INTAKE_ML} and {MAX_INTAKE_ML} ml"
            )
        moment = now or datetime.now().astimezone()
        event = IntakeEvent(
            id=uuid4().hex,
            occurred_at_ms=int(moment.timestamp() * 1000),
            amount=amount,
            drink_kind=DrinkKind(drink_kind),
            calendar_date=moment.date().isoformat(),
        )
        self.repository.append(event)
        _logger.info(
            "Recorded intake: id=%s amount=%s date=%s",
            event.id,
            event.amount,
            event.calendar_date,
        )
        return event

    def delete_intake(self, event_id: str) -> None:
        """Delete an intake by id."""
        if not self.repository.remove_by_id(event_id):
            raise IntakeNotFoundError(event_id)
        _logger.info("Deleted intake: id=%s", event_id)

    def list_for_date(self, day: str) -> list[IntakeEvent]:
        """Return intakes for a calendar date, oldest first."""
        events = self.repository.list_by_date(day)
        return sorted(events, key=lambda event: event.occurred_at_ms)

    def list_for_range(self, start: str, end: str) -> list[IntakeEvent]:
        """Return intakes in an inclusive date range."""
        return self.repository.list_by_date_range(start, end)
