"""Supabase repository storing the shoot document as a single row."""

import logging
from dataclasses import dataclass

from supabase import Client

from shoot_tracker.adapters.document_codec import (
    document_from_payload,
    document_to_payload,
)
from shoot_tracker.domain.shoots import ShootDocument
from shoot_tracker.services.shoots import DocumentRepository, StorageError

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseDocumentRepository(DocumentRepository):
    """Supabase implementation keeping the whole document in one JSON column."""

    client: Client
    table: str = "shoot_documents"
    document_id: str = "default"

    def load(self) -> ShootDocument:
        """Return the stored document, or an empty one if the row is missing."""
        try:
            response = (
                self.client.table(self.table)
                .select("payload")
                .eq("id", self.document_id)
                .limit(1)
                .execute()
            )
        except Exception as exc:
            _logger.exception("Failed to load shoot document from Supabase")
            raise StorageError("Failed to load shoot document") from exc
        if not response.data:
            return ShootDocument()
        try:
            return document_from_payload(response.data[0].get("payload"))
        except ValueError:
            _logger.warning(
                "Malformed shoot document %s, using empty document",
                self.document_id,
                exc_info=True,
            )
            return ShootDocument()

    def save(self, document: ShootDocument) -> None:
        """Upsert the document row."""
        try:
            self.client.table(self.table).upsert(
                {"id": self.document_id, "payload": document_to_payload(document)}
            ).execute()
        except Exception as exc:
            _logger.exception("Failed to save shoot document to Supabase")
            raise StorageError("Failed to save shoot document") from exc
