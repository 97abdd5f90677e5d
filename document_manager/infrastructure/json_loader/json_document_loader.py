"""Loads documents from a JSON seed file.

Accepted layouts: a top-level list of document objects, or an object with a
``documents`` key holding that list. Timestamps are ISO-8601; a trailing
``Z`` or no offset at all is read as UTC.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from document_manager.domain.entities import Author, Document, as_utc
from document_manager.domain.exceptions import DocumentLoadException

if TYPE_CHECKING:
    from document_manager.domain.services import DocumentManager

logger = logging.getLogger(__name__)


class JsonDocumentLoader:
    """Reads document records exported as JSON."""

    def load(self, path: Path) -> list[Document]:
        data = self._read_json(path)
        if isinstance(data, dict):
            data = data.get("documents", [])
        if not isinstance(data, list):
            raise DocumentLoadException(f"{path}: expected a list of documents")

        try:
            documents = [self._parse_document(item) for item in data]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DocumentLoadException(f"{path}: invalid document record: {e}") from e

        logger.info("Loaded %d documents from %s", len(documents), path)
        return documents

    def load_into(self, path: Path, manager: DocumentManager) -> int:
        """Save every document from ``path`` through ``manager``."""
        documents = self.load(path)
        for document in documents:
            manager.save(document)
        return len(documents)

    @staticmethod
    def _read_json(path: Path) -> dict | list:
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise DocumentLoadException(f"Cannot read {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise DocumentLoadException(f"{path} is not valid JSON: {e}") from e

    def _parse_document(self, data: dict) -> Document:
        return Document(
            id=data.get("id") or None,
            title=data["title"],
            content=data.get("content", ""),
            author=self._parse_author(data["author"]),
            created=parse_timestamp(data["created"]),
        )

    @staticmethod
    def _parse_author(data: dict) -> Author:
        return Author(id=data["id"], name=data.get("name", ""))


def parse_timestamp(value: str) -> datetime:
    """Parse ISO-8601; a trailing ``Z`` or a missing offset both mean UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return as_utc(datetime.fromisoformat(value))
