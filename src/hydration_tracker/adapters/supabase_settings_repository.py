"""Supabase repository for the settings record."""

from dataclasses import dataclass

from supabase import Client

from hydration_tracker.services.settings import SettingsRepository

SETTINGS_ROW_ID = "default"


@dataclass
class SupabaseSettingsRepository(SettingsRepository):
    """Supabase implementation storing settings as a JSON payload."""

    client: Client
    table: str = "settings"

    def read(self) -> dict[str, object] | None:
        """Return the stored settings payload."""
        response = (
            self.client.table(self.table)
            .select("payload")
            .eq("id", SETTINGS_ROW_ID)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        payload = response.data[0].get("payload")
        return payload if isinstance(payload, dict) else None

    def write(self, payload: dict[str, object]) -> None:
        """Upsert the settings payload."""
        response = (
            self.client.table(self.table)
            .upsert({"id": SETTINGS_ROW_ID, "payload": payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save settings")

    def clear(self) -> None:
        """Delete the settings row."""
        self.client.table(self.table).delete().eq("id", SETTINGS_ROW_ID).execute()
