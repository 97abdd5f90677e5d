"""Domain entities: documents and their authors."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class Author:
    id: str
    name: str


@dataclass
class Document:
    """A stored document. Equality covers every field, ``id`` included.

    The repository fills in ``id`` on save; ``created`` is never reassigned.
    A naive ``created`` is read as UTC.
    """

    title: str
    content: str
    author: Author
    created: datetime
    id: str | None = None

    def __post_init__(self) -> None:
        self.created = as_utc(self.created)

    def has_id(self) -> bool:
        return bool(self.id)


def as_utc(value: datetime) -> datetime:
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
