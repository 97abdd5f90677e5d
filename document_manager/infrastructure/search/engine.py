"""Search engine: conjunctive evaluation of query filters."""

from __future__ import annotations

import logging
from typing import Iterable, Protocol, Sequence

from document_manager.domain.entities import Document
from document_manager.domain.value_objects import SearchQuery

from .filters import DEFAULT_FILTERS

logger = logging.getLogger(__name__)


class DocumentFilter(Protocol):
    def is_active(self, query: SearchQuery) -> bool: ...
    def matches(self, document: Document, query: SearchQuery) -> bool: ...


class SearchEngine(Protocol):
    def search(self, query: SearchQuery, documents: Iterable[Document]) -> list[Document]: ...


class FilterSearchEngine:
    """Returns every document that passes all active filters.

    Stateless: results are recomputed from the given documents on each call
    and come back in iteration order, with no sorting or limit.
    """

    def __init__(self, filters: Sequence[DocumentFilter] = DEFAULT_FILTERS) -> None:
        self._filters = tuple(filters)

    def search(self, query: SearchQuery, documents: Iterable[Document]) -> list[Document]:
        active = [f for f in self._filters if f.is_active(query)]
        results = [
            doc for doc in documents
            if all(f.matches(doc, query) for f in active)
        ]
        logger.debug(
            "Search with %d active filter(s) matched %d document(s)",
            len(active),
            len(results),
        )
        return results
