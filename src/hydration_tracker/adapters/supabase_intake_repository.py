"""Supabase repository for intake events."""

from dataclasses import dataclass

from supabase import Client

from hydration_tracker.domain.intakes import DrinkKind, IntakeEvent
from hydration_tracker.services.intakes import IntakeRepository

_COLUMNS = "id, occurred_at_ms, amount, drink_kind, calendar_date"


@dataclass
class SupabaseIntakeRepository(IntakeRepository):
    """Supabase implementation for intake persistence."""

    client: Client
    table: str = "intakes"

    def append(self, event: IntakeEvent) -> None:
        """Insert an intake row."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "id": event.id,
                    "occurred_at_ms": event.occurred_at_ms,
                    "amount": event.amount,
                    "drink_kind": event.drink_kind.value,
                    "calendar_date": event.calendar_date,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create intake")

    def remove_by_id(self, event_id: str) -> bool:
        """Delete an intake row by id."""
        response = self.client.table(self.table).delete().eq("id", event_id).execute()
        return bool(response.data)

    def list_all(self) -> list[IntakeEvent]:
        """Return every intake ordered by timestamp."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .order("occurred_at_ms", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_by_date(self, day: str) -> list[IntakeEvent]:
        """Return intakes for a calendar date."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .eq("calendar_date", day)
            .order("occurred_at_ms", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_by_date_range(self, start: str, end: str) -> list[IntakeEvent]:
        """Return intakes with calendar dates between start and end inclusive."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .gte("calendar_date", start)
            .lte("calendar_date", end)
            .order("occurred_at_ms", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def clear(self) -> None:
        """Delete every intake row."""
        self.client.table(self.table).delete().neq("id", "").execute()


def _parse_row(row: dict[str, object]) -> IntakeEvent:
    return IntakeEvent(
        id=str(row["id"]),
        occurred_at_ms=int(row.get("occurred_at_ms", 0)),
        amount=int(row.get("amount", 0)),
        drink_kind=DrinkKind(row.get("drink_kind", DrinkKind.WATER.value)),
        calendar_date=str(row.get("calendar_date", "")),
    )
