"""Domain service: DocumentManager."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .entities import Document
from .value_objects import SearchQuery

if TYPE_CHECKING:
    from document_manager.infrastructure.search.engine import SearchEngine
    from document_manager.infrastructure.storage.repository import InMemoryDocumentRepository

logger = logging.getLogger(__name__)


class DocumentManager:
    """Save, search and look up documents.

    The repository and the engine are built independently and only meet
    here: ``search`` hands the repository's full collection to the engine.
    """

    def __init__(self, repository: InMemoryDocumentRepository, engine: SearchEngine) -> None:
        self._repository = repository
        self._engine = engine

    def save(self, document: Document) -> Document:
        return self._repository.save(document)

    def search(self, query: SearchQuery) -> list[Document]:
        return self._engine.search(query, self._repository.documents)

    def find_by_id(self, id: str) -> Document | None:
        result = self._repository.find_by_id(id)
        if result is None:
            logger.debug("Document %s not found", id)
        return result

    @property
    def size(self) -> int:
        return len(self._repository)


def create_document_manager() -> DocumentManager:
    """Wire a manager over a fresh in-memory repository and the default engine."""
    from document_manager.infrastructure.search.engine import FilterSearchEngine
    from document_manager.infrastructure.storage.repository import InMemoryDocumentRepository

    return DocumentManager(InMemoryDocumentRepository(), FilterSearchEngine())
