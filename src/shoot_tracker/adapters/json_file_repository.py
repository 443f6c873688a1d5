"""JSON file repository for the shoot document."""

import json
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from shoot_tracker.adapters.document_codec import (
    document_from_payload,
    document_to_payload,
)
from shoot_tracker.domain.shoots import ShootDocument
from shoot_tracker.services.shoots import DocumentRepository, StorageError

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileDocumentRepository(DocumentRepository):
    """Stores both buckets in a single pretty-printed JSON file."""

    path: Path

    def load(self) -> ShootDocument:
        """Read the document, falling back to an empty one.

        A missing file is the normal first-run state. An unreadable file or
        one that is not a two-bucket JSON object is logged and also treated
        as empty. Bad records inside a readable file are skipped one by one.
        """
        if not self.path.exists():
            return ShootDocument()
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            return document_from_payload(payload)
        except (OSError, ValueError):
            _logger.warning(
                "Could not read shoot document %s, using empty document",
                self.path,
                exc_info=True,
            )
            return ShootDocument()

    def save(self, document: ShootDocument) -> None:
        """Write the document to a temp file and rename it over the target."""
        content = json.dumps(document_to_payload(document), indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(content)
                if self.path.exists():
                    shutil.copymode(self.path, tmp_name)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            _logger.exception("Failed to write shoot document %s", self.path)
            raise StorageError(f"Failed to write {self.path}") from exc
