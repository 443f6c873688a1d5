"""Record store for pending and edited shoots.

Every mutation loads the whole document, builds the next state in memory
and saves it with a single write. Reads never write.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol, TypeVar
from uuid import uuid4

from shoot_tracker.domain.shoots import EditedShoot, Shoot, ShootDetails, ShootDocument

_logger = logging.getLogger(__name__)

_RecordT = TypeVar("_RecordT", Shoot, EditedShoot)


class StorageError(RuntimeError):
    """Raised when the shoot document cannot be persisted."""


class DocumentRepository(Protocol):
    """Persistence interface for the shoot document."""

    def load(self) -> ShootDocument:
        """Return the stored document, or an empty one if nothing is stored."""

    def save(self, document: ShootDocument) -> None:
        """Replace the stored document."""


class ShootStore(Protocol):
    """Lifecycle operations over the pending and edited buckets."""

    def list_pending(self) -> list[Shoot]:
        """Return pending shoots in storage order."""

    def get_pending(self, shoot_id: str) -> Shoot | None:
        """Return a pending shoot by id, if present."""

    def create_pending(self, details: ShootDetails) -> Shoot:
        """Create and return a pending shoot."""

    def update_pending(self, shoot_id: str, details: ShootDetails) -> Shoot | None:
        """Replace the fields of a pending shoot."""

    def delete_pending(self, shoot_id: str) -> bool:
        """Delete a pending shoot, returning whether it existed."""

    def move_to_edited(self, shoot_id: str) -> EditedShoot | None:
        """Move a pending shoot into the edited bucket."""

    def list_edited(self) -> list[EditedShoot]:
        """Return edited shoots in storage order."""

    def get_edited(self, edited_id: str) -> EditedShoot | None:
        """Return an edited shoot by id, if present."""

    def update_edited(
        self, edited_id: str, details: ShootDetails
    ) -> EditedShoot | None:
        """Replace the fields of an edited shoot."""

    def move_back_to_pending(self, edited_id: str) -> Shoot | None:
        """Move an edited shoot back into the pending bucket."""

    def delete_edited(self, edited_id: str) -> bool:
        """Delete an edited shoot, returning whether it existed."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _new_id() -> str:
    return str(uuid4())


@dataclass
class DocumentShootStore(ShootStore):
    """Shoot store backed by a whole-document repository."""

    repository: DocumentRepository
    clock: Callable[[], datetime] = field(default=_utc_now)
    id_factory: Callable[[], str] = field(default=_new_id)

    def list_pending(self) -> list[Shoot]:
        return self.repository.load().shoots

    def get_pending(self, shoot_id: str) -> Shoot | None:
        return _find(self.repository.load().shoots, shoot_id)

    def create_pending(self, details: ShootDetails) -> Shoot:
        document = self.repository.load()
        now = self.clock()
        shoot = Shoot(
            id=self.id_factory(),
            model_name=details.model_name,
            salon_name=details.salon_name,
            date=details.date,
            price=details.price,
            created_at=now,
            updated_at=now,
        )
        self.repository.save(replace(document, shoots=[*document.shoots, shoot]))
        _logger.info("Created shoot: id=%s", shoot.id)
        return shoot

    def update_pending(self, shoot_id: str, details: ShootDetails) -> Shoot | None:
        document = self.repository.load()
        existing = _find(document.shoots, shoot_id)
        if existing is None:
            return None
        updated = replace(
            existing,
            model_name=details.model_name,
            salon_name=details.salon_name,
            date=details.date,
            price=details.price,
            updated_at=self.clock(),
        )
        shoots = [updated if item.id == shoot_id else item for item in document.shoots]
        self.repository.save(replace(document, shoots=shoots))
        return updated

    def delete_pending(self, shoot_id: str) -> bool:
        document = self.repository.load()
        if _find(document.shoots, shoot_id) is None:
            return False
        self.repository.save(
            replace(document, shoots=_without(document.shoots, shoot_id))
        )
        _logger.info("Deleted shoot: id=%s", shoot_id)
        return True

    def move_to_edited(self, shoot_id: str) -> EditedShoot | None:
        document = self.repository.load()
        shoot = _find(document.shoots, shoot_id)
        if shoot is None:
            return None
        edited = EditedShoot(
            id=self.id_factory(),
            original_shoot_id=shoot.id,
            model_name=shoot.model_name,
            salon_name=shoot.salon_name,
            date=shoot.date,
            price=shoot.price,
            created_at=shoot.created_at,
            edited_at=self.clock(),
        )
        self.repository.save(
            ShootDocument(
                shoots=_without(document.shoots, shoot_id),
                edited_shoots=[*document.edited_shoots, edited],
            )
        )
        _logger.info("Moved shoot to edited: id=%s edited_id=%s", shoot_id, edited.id)
        return edited

    def list_edited(self) -> list[EditedShoot]:
        return self.repository.load().edited_shoots

    def get_edited(self, edited_id: str) -> EditedShoot | None:
        return _find(self.repository.load().edited_shoots, edited_id)

    def update_edited(
        self, edited_id: str, details: ShootDetails
    ) -> EditedShoot | None:
        document = self.repository.load()
        existing = _find(document.edited_shoots, edited_id)
        if existing is None:
            return None
        updated = replace(
            existing,
            model_name=details.model_name,
            salon_name=details.salon_name,
            date=details.date,
            price=details.price,
            edited_at=self.clock(),
        )
        edited_shoots = [
            updated if item.id == edited_id else item
            for item in document.edited_shoots
        ]
        self.repository.save(replace(document, edited_shoots=edited_shoots))
        return updated

    def move_back_to_pending(self, edited_id: str) -> Shoot | None:
        document = self.repository.load()
        edited = _find(document.edited_shoots, edited_id)
        if edited is None:
            return None
        shoot = Shoot(
            id=self.id_factory(),
            model_name=edited.model_name,
            salon_name=edited.salon_name,
            date=edited.date,
            price=edited.price,
            created_at=edited.created_at,
            updated_at=self.clock(),
        )
        self.repository.save(
            ShootDocument(
                shoots=[*document.shoots, shoot],
                edited_shoots=_without(document.edited_shoots, edited_id),
            )
        )
        _logger.info("Moved edited shoot back: id=%s shoot_id=%s", edited_id, shoot.id)
        return shoot

    def delete_edited(self, edited_id: str) -> bool:
        document = self.repository.load()
        if _find(document.edited_shoots, edited_id) is None:
            return False
        self.repository.save(
            replace(
                document,
                edited_shoots=_without(document.edited_shoots, edited_id),
            )
        )
        _logger.info("Deleted edited shoot: id=%s", edited_id)
        return True


def _find(items: list[_RecordT], record_id: str) -> _RecordT | None:
    for item in items:
        if item.id == record_id:
            return item
    return None


def _without(items: list[_RecordT], record_id: str) -> list[_RecordT]:
    return [item for item in items if item.id != record_id]
