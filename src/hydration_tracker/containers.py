"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from hydration_tracker.adapters.supabase_intake_repository import (
    SupabaseIntakeRepository,
)
from hydration_tracker.adapters.supabase_settings_repository import (
    SupabaseSettingsRepository,
)
from hydration_tracker.config import Settings
from hydration_tracker.services.export import DataExportService
from hydration_tracker.services.intakes import IntakeService
from hydration_tracker.services.settings import SettingsService
from hydration_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    intake_service: IntakeService
    settings_service: SettingsService
    stats_service: StatsService
    export_service: DataExportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    intake_repository = SupabaseIntakeRepository(
        supabase_client, table=resolved_settings.intakes_table
    )
    settings_repository = SupabaseSettingsRepository(
        supabase_client, table=resolved_settings.settings_table
    )
    settings_service = SettingsService(settings_repository)
    return AppContainer(
        settings=resolved_settings,
        intake_service=IntakeService(intake_repository),
        settings_service=settings_service,
        stats_service=StatsService(intake_repository, settings_service),
        export_service=DataExportService(intake_repository, settings_service),
    )
