"""Tests for the filter search engine."""

from datetime import datetime, timezone

from document_manager.domain.entities import Author, Document
from document_manager.domain.value_objects import SearchQuery
from document_manager.infrastructure.search.engine import FilterSearchEngine
from document_manager.infrastructure.search.filters import (
    AuthorFilter,
    ContentFilter,
    CreatedFromFilter,
    CreatedToFilter,
    TitlePrefixFilter,
)


def _utc(month: int, day: int = 1) -> datetime:
    return datetime(2023, month, day, 10, tzinfo=timezone.utc)


def _titles(results: list[Document]) -> set[str]:
    return {doc.title for doc in results}


class TestFilters:
    def setup_method(self):
        self.doc = Document(
            title="Java Programming",
            content="Learn Java step by step.",
            author=Author("author1", "Ann"),
            created=_utc(3),
            id="d1",
        )

    def test_inactive_when_field_is_none(self):
        query = SearchQuery()
        for f in (TitlePrefixFilter(), ContentFilter(), AuthorFilter(), CreatedFromFilter(), CreatedToFilter()):
            assert f.is_active(query) is False

    def test_active_for_empty_list(self):
        query = SearchQuery(title_prefixes=[], contains_contents=[], author_ids=[])
        assert TitlePrefixFilter().is_active(query) is True
        assert ContentFilter().is_active(query) is True
        assert AuthorFilter().is_active(query) is True

    def test_empty_list_matches_nothing(self):
        assert TitlePrefixFilter().matches(self.doc, SearchQuery(title_prefixes=[])) is False
        assert ContentFilter().matches(self.doc, SearchQuery(contains_contents=[])) is False
        assert AuthorFilter().matches(self.doc, SearchQuery(author_ids=[])) is False

    def test_title_prefix_any(self):
        f = TitlePrefixFilter()
        assert f.matches(self.doc, SearchQuery(title_prefixes=["Python", "Java"])) is True
        assert f.matches(self.doc, SearchQuery(title_prefixes=["Programming"])) is False

    def test_title_prefix_case_sensitive(self):
        assert TitlePrefixFilter().matches(self.doc, SearchQuery(title_prefixes=["java"])) is False

    def test_content_substring(self):
        f = ContentFilter()
        assert f.matches(self.doc, SearchQuery(contains_contents=["step by"])) is True
        assert f.matches(self.doc, SearchQuery(contains_contents=["Spring"])) is False

    def test_author_membership(self):
        f = AuthorFilter()
        assert f.matches(self.doc, SearchQuery(author_ids=["author1"])) is True
        assert f.matches(self.doc, SearchQuery(author_ids=["author2"])) is False

    def test_bounds_are_exclusive(self):
        assert CreatedFromFilter().matches(self.doc, SearchQuery(created_from=_utc(3))) is False
        assert CreatedToFilter().matches(self.doc, SearchQuery(created_to=_utc(3))) is False
        assert CreatedFromFilter().matches(self.doc, SearchQuery(created_from=_utc(2))) is True
        assert CreatedToFilter().matches(self.doc, SearchQuery(created_to=_utc(4))) is True


class TestFilterSearchEngine:
    def setup_method(self):
        self.engine = FilterSearchEngine()

    def test_empty_query_matches_all(self, sample_documents):
        results = self.engine.search(SearchQuery(), sample_documents)
        assert len(results) == len(sample_documents)

    def test_no_documents(self):
        assert self.engine.search(SearchQuery(title_prefixes=["Java"]), []) == []

    def test_title_prefixes(self, sample_documents):
        results = self.engine.search(
            SearchQuery(title_prefixes=["Java", "Microservices with"]), sample_documents
        )
        assert _titles(results) == {"Java Programming", "Microservices with Spring"}

    def test_contains_contents(self, sample_documents):
        results = self.engine.search(
            SearchQuery(contains_contents=["Master advanced Java"]), sample_documents
        )
        assert _titles(results) == {"Advanced Java Tips"}

    def test_author_ids(self, sample_documents):
        results = self.engine.search(SearchQuery(author_ids=["author2"]), sample_documents)
        assert _titles(results) == {"Microservices with Spring", "Design Patterns in Java"}

    def test_created_range(self, sample_documents):
        results = self.engine.search(
            SearchQuery(created_from=_utc(3), created_to=_utc(5)), sample_documents
        )
        assert _titles(results) == {"Design Patterns in Java"}

    def test_conjunction(self, sample_documents):
        results = self.engine.search(
            SearchQuery(title_prefixes=["Java", "Design"], author_ids=["author1"]),
            sample_documents,
        )
        assert _titles(results) == {"Java Programming"}

    def test_all_filters(self, sample_documents):
        results = self.engine.search(
            SearchQuery(
                title_prefixes=["Design"],
                contains_contents=["patterns"],
                author_ids=["author2"],
                created_from=_utc(3),
                created_to=_utc(5),
            ),
            sample_documents,
        )
        assert _titles(results) == {"Design Patterns in Java"}

    def test_empty_list_rejects_all(self, sample_documents):
        assert self.engine.search(SearchQuery(author_ids=[]), sample_documents) == []

    def test_search_is_repeatable(self, sample_documents):
        query = SearchQuery(author_ids=["author1"])
        assert self.engine.search(query, sample_documents) == self.engine.search(query, sample_documents)

    def test_custom_filters(self, sample_documents):
        engine = FilterSearchEngine(filters=[AuthorFilter()])
        results = engine.search(
            SearchQuery(author_ids=["author2"], title_prefixes=["Java"]), sample_documents
        )
        assert _titles(results) == {"Microservices with Spring", "Design Patterns in Java"}
