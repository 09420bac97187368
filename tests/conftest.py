"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from hydration_tracker.config import Settings
from hydration_tracker.containers import AppContainer
from hydration_tracker.domain.intakes import DrinkKind, IntakeEvent
from hydration_tracker.services.export import DataExportService
from hydration_tracker.services.intakes import IntakeRepository, IntakeService
from hydration_tracker.services.settings import SettingsRepository, SettingsService
from hydration_tracker.services.stats import StatsService


def make_event(
    calendar_date: str,
    amount: int,
    drink_kind: DrinkKind = DrinkKind.WATER,
    occurred_at_ms: int = 0,
    event_id: str | None = None,
) -> IntakeEvent:
    return IntakeEvent(
        id=event_id or f"{calendar_date}-{amount}-{occurred_at_ms}",
        occurred_at_ms=occurred_at_ms,
        amount=amount,
        drink_kind=drink_kind,
        calendar_date=calendar_date,
    )


@dataclass
class InMemoryIntakeRepository(IntakeRepository):
    """In-memory intake repository for tests."""

    events: list[IntakeEvent] = field(default_factory=list)

    def append(self, event: IntakeEvent) -> None:
        self.events.append(event)

    def remove_by_id(self, event_id: str) -> bool:
        before = len(self.events)
        self.events = [event for event in self.events if event.id != event_id]
        return len(self.events) < before

    def list_all(self) -> list[IntakeEvent]:
        return list(self.events)

    def list_by_date(self, day: str) -> list[IntakeEvent]:
        return [event for event in self.events if event.calendar_date == day]

    def list_by_date_range(self, start: str, end: str) -> list[IntakeEvent]:
        return [
            event for event in self.events if start <= event.calendar_date <= end
        ]

    def clear(self) -> None:
        self.events = []


@dataclass
class InMemorySettingsRepository(SettingsRepository):
    """In-memory settings repository for tests."""

    payload: dict[str, object] | None = None

    def read(self) -> dict[str, object] | None:
        return self.payload

    def write(self, payload: dict[str, object]) -> None:
        self.payload = payload

    def clear(self) -> None:
        self.payload = None


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
        admin_token="admin-token",
    )


@pytest.fixture
def intake_repository() -> InMemoryIntakeRepository:
    return InMemoryIntakeRepository()


@pytest.fixture
def settings_repository() -> InMemorySettingsRepository:
    return InMemorySettingsRepository()


@pytest.fixture
def container(
    settings: Settings,
    intake_repository: InMemoryIntakeRepository,
    settings_repository: InMemorySettingsRepository,
) -> AppContainer:
    settings_service = SettingsService(settings_repository)
    return AppContainer(
        settings=settings,
        intake_service=IntakeService(intake_repository),
        settings_service=settings_service,
        stats_service=StatsService(intake_repository, settings_service),
        export_service=DataExportService(intake_repository, settings_service),
    )
