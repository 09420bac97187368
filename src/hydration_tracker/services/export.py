"""Data export and reset."""

import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from hydration_tracker.domain.intakes import IntakeEvent
from hydration_tracker.services.intakes import IntakeRepository
from hydration_tracker.services.settings import SettingsService, to_payload

DATA_VERSION = "1.0.0"

_logger = logging.getLogger(__name__)


@dataclass
class DataExportService:
    """Service for exporting or wiping all stored data."""

    intake_repository: IntakeRepository
    settings_service: SettingsService

    def export_data(self, now: datetime | None = None) -> str:
        """Return every intake and the current settings as indented JSON."""
        exported_at = now or datetime.now(tz=UTC)
        intakes = sorted(
            self.intake_repository.list_all(),
            key=lambda event: event.occurred_at_ms,
        )
        document = {
            "version": DATA_VERSION,
            "export_date": exported_at.isoformat(),
            "intakes": [_serialize_intake(event) for event in intakes],
            "settings": to_payload(self.settings_service.get_settings()),
        }
        return json.dumps(document, indent=2)

    def clear_all_data(self) -> None:
        """Remove all intakes and stored settings."""
        self.intake_repository.clear()
        self.settings_service.repository.clear()
        _logger.info("Cleared all intake and settings data")


def _serialize_intake(event: IntakeEvent) -> dict[str, object]:
    return {
        "id": event.id,
        "occurred_at_ms": event.occurred_at_ms,
        "amount": event.amount,
        "drink_kind": event.drink_kind.value,
        "calendar_date": event.calendar_date,
    }
