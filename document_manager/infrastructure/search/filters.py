"""Predicate filters evaluated by the search engine.

Each filter is inactive when its query field is ``None``. List-valued
filters are an OR over their values, so an empty list matches nothing.
"""

from __future__ import annotations

from document_manager.domain.entities import Document
from document_manager.domain.value_objects import SearchQuery


class TitlePrefixFilter:
    def is_active(self, query: SearchQuery) -> bool:
        return query.title_prefixes is not None

    def matches(self, document: Document, query: SearchQuery) -> bool:
        return any(document.title.startswith(prefix) for prefix in query.title_prefixes)


class ContentFilter:
    def is_active(self, query: SearchQuery) -> bool:
        return query.contains_contents is not None

    def matches(self, document: Document, query: SearchQuery) -> bool:
        return any(text in document.content for text in query.contains_contents)


class AuthorFilter:
    def is_active(self, query: SearchQuery) -> bool:
        return query.author_ids is not None

    def matches(self, document: Document, query: SearchQuery) -> bool:
        return document.author.id in query.author_ids


class CreatedFromFilter:
    """Lower bound, exclusive."""

    def is_active(self, query: SearchQuery) -> bool:
        return query.created_from is not None

    def matches(self, document: Document, query: SearchQuery) -> bool:
        return document.created > query.created_from


class CreatedToFilter:
    """Upper bound, exclusive."""

    def is_active(self, query: SearchQuery) -> bool:
        return query.created_to is not None

    def matches(self, document: Document, query: SearchQuery) -> bool:
        return document.created < query.created_to


DEFAULT_FILTERS = (
    TitlePrefixFilter(),
    ContentFilter(),
    AuthorFilter(),
    CreatedFromFilter(),
    CreatedToFilter(),
)
