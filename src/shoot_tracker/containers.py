"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from shoot_tracker.adapters.json_file_repository import JsonFileDocumentRepository
from shoot_tracker.adapters.supabase_document_repository import (
    SupabaseDocumentRepository,
)
from shoot_tracker.config import Settings
from shoot_tracker.services.shoots import (
    DocumentRepository,
    DocumentShootStore,
    ShootStore,
)
from shoot_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    shoot_store: ShootStore
    stats_service: StatsService


def build_repository(settings: Settings) -> DocumentRepository:
    """Create the document repository selected by settings."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "for the supabase storage backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseDocumentRepository(
            client,
            table=settings.supabase_table,
            document_id=settings.supabase_document_id,
        )
    return JsonFileDocumentRepository(settings.data_file)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    shoot_store = DocumentShootStore(build_repository(resolved_settings))
    return AppContainer(
        settings=resolved_settings,
        shoot_store=shoot_store,
        stats_service=StatsService(shoot_store),
    )
