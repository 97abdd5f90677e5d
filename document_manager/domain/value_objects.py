"""Search query value object."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Iterable

from .entities import as_utc
from .exceptions import InvalidQueryError

_LIST_FIELDS = ("title_prefixes", "contains_contents", "author_ids")
_BOUND_FIELDS = ("created_from", "created_to")


@dataclass(frozen=True)
class SearchQuery:
    """All-optional search criteria.

    A field left as ``None`` disables its filter. A list-valued field set to
    an empty collection stays active and matches nothing. Collections are
    stored as tuples and naive bounds are read as UTC.
    """

    title_prefixes: Iterable[str] | None = None
    contains_contents: Iterable[str] | None = None
    author_ids: Iterable[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def __post_init__(self) -> None:
        for name in _LIST_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            # A bare string would otherwise be iterated character by character
            if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
                raise InvalidQueryError(f"{name} must be a list of strings, got {value!r}")
            object.__setattr__(self, name, tuple(value))

        for name in _BOUND_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if not isinstance(value, datetime):
                raise InvalidQueryError(f"{name} must be a datetime, got {value!r}")
            object.__setattr__(self, name, as_utc(value))

    def is_empty(self) -> bool:
        """True when no filter is active."""
        return all(getattr(self, f.name) is None for f in fields(self))
