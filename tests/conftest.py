"""Shared test fixtures for document_manager tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from document_manager.domain.entities import Author, Document
from document_manager.domain.services import DocumentManager
from document_manager.infrastructure.search.engine import FilterSearchEngine
from document_manager.infrastructure.storage.repository import InMemoryDocumentRepository


def _utc(year: int, month: int, day: int, hour: int = 10) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def author1() -> Author:
    return Author(id="author1", name="Test Author1")


@pytest.fixture
def author2() -> Author:
    return Author(id="author2", name="Test Author2")


@pytest.fixture
def repository() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture
def manager(repository) -> DocumentManager:
    return DocumentManager(repository, FilterSearchEngine())


@pytest.fixture
def sample_documents(author1, author2) -> list[Document]:
    return [
        Document(
            title="Java Programming",
            content="Learn Java step by step.",
            author=author1,
            created=_utc(2023, 1, 1),
        ),
        Document(
            title="Advanced Java Tips",
            content="Master advanced Java techniques.",
            author=author1,
            created=_utc(2023, 2, 1),
        ),
        Document(
            title="Microservices with Spring",
            content="Guide to Microservices.",
            author=author2,
            created=_utc(2023, 3, 1),
        ),
        Document(
            title="Design Patterns in Java",
            content="Learn design patterns in Java.",
            author=author2,
            created=_utc(2023, 4, 1),
        ),
        Document(
            title="Python Basics",
            content="Introduction to Python.",
            author=author1,
            created=_utc(2023, 5, 1),
        ),
    ]


@pytest.fixture
def populated_manager(manager, sample_documents) -> DocumentManager:
    for doc in sample_documents:
        manager.save(doc)
    return manager
