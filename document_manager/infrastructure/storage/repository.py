"""In-memory document repository."""

from __future__ import annotations

import logging
import threading
import uuid

from document_manager.domain.entities import Document
from document_manager.domain.exceptions import DuplicateRecordError

logger = logging.getLogger(__name__)


class InMemoryDocumentRepository:
    """Owns the document collection; assigns identifiers and rejects duplicates."""

    def __init__(self) -> None:
        self._documents: list[Document] = []
        self._lock = threading.Lock()

    def save(self, document: Document) -> Document:
        """Store ``document`` and return it, with a generated id if it had none.

        Raises DuplicateRecordError when an equal document (every field,
        ``id`` included) is already stored. A missing id is assigned on the
        caller's document itself, after the duplicate check.
        """
        with self._lock:
            if document in self._documents:
                logger.warning("Rejected duplicate document: %r", document.title)
                raise DuplicateRecordError()

            if not document.has_id():
                document.id = self._generate_id()
                logger.debug("Assigned id %s to document %r", document.id, document.title)

            self._documents.append(document)

        logger.info("Saved document %s (%d stored)", document.id, len(self._documents))
        return document

    def find_by_id(self, id: str) -> Document | None:
        for document in self._documents:
            if document.id == id:
                return document
        return None

    @property
    def documents(self) -> list[Document]:
        return list(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    @staticmethod
    def _generate_id() -> str:
        return str(uuid.uuid4())
