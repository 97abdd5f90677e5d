"""Markdown and JSON formatters for documents and search results."""

from __future__ import annotations

import json
from typing import Any

from document_manager.domain.entities import Document

DEFAULT_PREVIEW_LENGTH = 100


class MarkdownFormatter:
    """Formats documents as Markdown for terminal output."""

    def __init__(self, preview_length: int = DEFAULT_PREVIEW_LENGTH) -> None:
        self._preview_length = preview_length

    def format_error(self, exception: Exception) -> str:
        return f"**Error:** {exception}\n"

    def format_search_results(self, results: list[Document]) -> str:
        if not results:
            return "Nothing found.\n"

        if len(results) == 1:
            return self.format_document(results[0])

        if len(results) <= 5:
            return self._format_compact_results(results)

        return self._format_table_results(results)

    def format_document(self, document: Document) -> str:
        parts: list[str] = [f"## {document.title}\n"]
        parts.append(f"**Id:** `{document.id}`")
        parts.append(f"**Author:** {document.author.name} (`{document.author.id}`)")
        parts.append(f"**Created:** {document.created.isoformat()}\n")

        if document.content:
            parts.append(document.content)
            parts.append("")

        return "\n".join(parts)

    def _preview(self, text: str) -> str:
        short = text[: self._preview_length]
        if len(text) > self._preview_length:
            short += "..."
        return short

    def _format_compact_results(self, results: list[Document]) -> str:
        parts: list[str] = [f"Found {len(results)} documents:\n"]

        for doc in results:
            parts.append(f"- **{doc.title}** ({doc.author.name}, {doc.created.date()}) `{doc.id}`")
            if doc.content:
                parts.append(f"  {self._preview(doc.content)}")

        parts.append("")
        return "\n".join(parts)

    def _format_table_results(self, results: list[Document]) -> str:
        parts: list[str] = [
            f"Found {len(results)} documents:\n",
            "| # | Title | Author | Created | Id |",
            "|---|-------|--------|---------|----|",
        ]

        for i, doc in enumerate(results, 1):
            parts.append(
                f"| {i} | **{doc.title}** | {doc.author.name} | {doc.created.isoformat()} | `{doc.id}` |"
            )

        parts.append("")
        return "\n".join(parts)


class JsonFormatter:
    """Formats documents as JSON text; timestamps become ISO-8601 strings."""

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def format_error(self, exception: Exception) -> str:
        return json.dumps({"error": str(exception)}, indent=self._indent)

    def format_search_results(self, results: list[Document]) -> str:
        return json.dumps(
            [document_to_dict(doc) for doc in results],
            indent=self._indent,
            ensure_ascii=False,
        )

    def format_document(self, document: Document) -> str:
        return json.dumps(document_to_dict(document), indent=self._indent, ensure_ascii=False)


def document_to_dict(document: Document) -> dict[str, Any]:
    return {
        "id": document.id,
        "title": document.title,
        "content": document.content,
        "author": {"id": document.author.id, "name": document.author.name},
        "created": document.created.isoformat(),
    }
