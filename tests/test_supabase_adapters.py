"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field

import pytest

from hydration_tracker.adapters.supabase_intake_repository import (
    SupabaseIntakeRepository,
)
from hydration_tracker.adapters.supabase_settings_repository import (
    SETTINGS_ROW_ID,
    SupabaseSettingsRepository,
)
from hydration_tracker.domain.intakes import DrinkKind
from tests.conftest import make_event


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "upsert": [],
            "delete": [],
        }
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def upsert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("eq", column, value))
        return self

    def neq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("neq", column, value))
        return self

    def gte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("gte", column, value))
        return self

    def lte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("lte", column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_intake_repository_append() -> None:
    client = FakeSupabaseClient()
    table = client.table("intakes")
    event = make_event("2024-01-01", 500, DrinkKind.OTHER, occurred_at_ms=42)
    table.queue("insert", [{"id": event.id}])

    SupabaseIntakeRepository(client).append(event)

    assert table.last_payload == {
        "id": event.id,
        "occurred_at_ms": 42,
        "amount": 500,
        "drink_kind": "other",
        "calendar_date": "2024-01-01",
    }


def test_supabase_intake_repository_append_raises_without_data() -> None:
    client = FakeSupabaseClient()

    with pytest.raises(RuntimeError):
        SupabaseIntakeRepository(client).append(make_event("2024-01-01", 500))


def test_supabase_intake_repository_range_query() -> None:
    client = FakeSupabaseClient()
    table = client.table("water_intakes")
    table.queue(
        "select",
        [
            {
                "id": "abc",
                "occurred_at_ms": 1704100000000,
                "amount": 250,
                "drink_kind": "water",
                "calendar_date": "2024-01-01",
            }
        ],
    )
    repository = SupabaseIntakeRepository(client, table="water_intakes")

    events = repository.list_by_date_range("2024-01-01", "2024-01-07")

    assert len(events) == 1
    assert events[0].id == "abc"
    assert events[0].amount == 250
    assert events[0].drink_kind is DrinkKind.WATER
    assert ("gte", "calendar_date", "2024-01-01") in table.last_filters
    assert ("lte", "calendar_date", "2024-01-07") in table.last_filters


def test_supabase_intake_repository_list_by_date() -> None:
    client = FakeSupabaseClient()
    table = client.table("intakes")
    table.queue(
        "select",
        [
            {
                "id": "a",
                "occurred_at_ms": 1,
                "amount": 100,
                "drink_kind": "water",
                "calendar_date": "2024-01-01",
            }
        ],
    )

    events = SupabaseIntakeRepository(client).list_by_date("2024-01-01")

    assert [event.id for event in events] == ["a"]
    assert ("eq", "calendar_date", "2024-01-01") in table.last_filters


def test_supabase_intake_repository_remove_by_id() -> None:
    client = FakeSupabaseClient()
    table = client.table("intakes")
    table.queue("delete", [{"id": "abc"}])
    repository = SupabaseIntakeRepository(client)

    assert repository.remove_by_id("abc") is True
    assert repository.remove_by_id("abc") is False


def test_supabase_settings_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    table = client.table("settings")
    payload = {"daily_goal": {"goal_amount": 2500}}
    table.queue("upsert", [{"id": SETTINGS_ROW_ID, "payload": payload}])
    table.queue("select", [{"id": SETTINGS_ROW_ID, "payload": payload}])
    repository = SupabaseSettingsRepository(client)

    repository.write(payload)
    fetched = repository.read()

    assert table.last_payload == {"id": SETTINGS_ROW_ID, "payload": payload}
    assert fetched == payload


def test_supabase_settings_repository_write_raises_without_data() -> None:
    client = FakeSupabaseClient()
    client.table("settings").queue("upsert", [])

    with pytest.raises(RuntimeError, match="Failed to save settings"):
        SupabaseSettingsRepository(client).write({"theme": "dark"})


def test_supabase_settings_repository_missing_row() -> None:
    client = FakeSupabaseClient()

    assert SupabaseSettingsRepository(client).read() is None
