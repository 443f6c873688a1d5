"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from shoot_tracker.config import Settings
from shoot_tracker.containers import AppContainer
from shoot_tracker.domain.shoots import ShootDetails, ShootDocument
from shoot_tracker.services.shoots import (
    DocumentRepository,
    DocumentShootStore,
    StorageError,
)
from shoot_tracker.services.stats import StatsService


@dataclass
class InMemoryDocumentRepository(DocumentRepository):
    """In-memory document repository for tests."""

    document: ShootDocument = field(default_factory=ShootDocument)
    saves: int = 0

    def load(self) -> ShootDocument:
        return ShootDocument(
            shoots=list(self.document.shoots),
            edited_shoots=list(self.document.edited_shoots),
        )

    def save(self, document: ShootDocument) -> None:
        self.saves += 1
        self.document = ShootDocument(
            shoots=list(document.shoots),
            edited_shoots=list(document.edited_shoots),
        )


@dataclass
class FailingDocumentRepository(InMemoryDocumentRepository):
    """Repository whose writes always fail."""

    def save(self, document: ShootDocument) -> None:
        raise StorageError("disk full")


@dataclass
class TickingClock:
    """Clock that advances one second on every call."""

    current: datetime = field(
        default_factory=lambda: datetime(2024, 3, 1, 12, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        self.current = self.current + timedelta(seconds=1)
        return self.current


def make_details(
    model_name: str = "Ava",
    salon_name: str = "Luxe",
    date: str = "2024-03-01",
    price: float = 150,
) -> ShootDetails:
    return ShootDetails(
        model_name=model_name, salon_name=salon_name, date=date, price=price
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        storage_backend="file",
        data_file=tmp_path / "data.json",
        cors_allow_origins="*",
        _env_file=None,
    )


@pytest.fixture
def document_repository() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def shoot_store(
    document_repository: InMemoryDocumentRepository, clock: TickingClock
) -> DocumentShootStore:
    return DocumentShootStore(document_repository, clock=clock)


@pytest.fixture
def container(settings: Settings, shoot_store: DocumentShootStore) -> AppContainer:
    return AppContainer(
        settings=settings,
        shoot_store=shoot_store,
        stats_service=StatsService(shoot_store),
    )
