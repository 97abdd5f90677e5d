"""CLI entry point for the document manager."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import NoReturn

import click

from document_manager.config import AppConfig, load_config
from document_manager.domain.exceptions import DocumentNotFoundException, DomainException
from document_manager.domain.services import DocumentManager, create_document_manager
from document_manager.domain.value_objects import SearchQuery
from document_manager.infrastructure.json_loader.json_document_loader import (
    JsonDocumentLoader,
    parse_timestamp,
)
from document_manager.presentation.formatter import JsonFormatter, MarkdownFormatter

logger = logging.getLogger(__name__)


def _parse_datetime(ctx: click.Context, param: click.Parameter, value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not an ISO-8601 timestamp") from None


def _multi(values: tuple[str, ...]) -> list[str] | None:
    # An omitted repeatable option disables its filter instead of matching nothing
    return list(values) if values else None


def _fail(app_config: AppConfig, exception: Exception) -> NoReturn:
    click.echo(_formatter(app_config).format_error(exception), err=True)
    sys.exit(1)


def _formatter(app_config: AppConfig) -> MarkdownFormatter | JsonFormatter:
    if app_config.output.format == "json":
        return JsonFormatter()
    return MarkdownFormatter(preview_length=app_config.output.preview_length)


def _build_manager(app_config: AppConfig) -> DocumentManager:
    manager = create_document_manager()
    if app_config.storage.seed_path:
        count = JsonDocumentLoader().load_into(Path(app_config.storage.seed_path), manager)
        logger.debug("Seeded %d documents", count)
    else:
        logger.warning("No seed file configured, the repository is empty")
    return manager


@click.group()
@click.option("--config", "-c", default=None, help="Path to YAML config file")
@click.option(
    "--seed", "-s",
    default=None,
    help="JSON file with documents to load (overrides config/env)",
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["markdown", "json"]),
    default=None,
    help="Output format (overrides config/env)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=None,
    help="Enable debug logging (overrides config/env)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: str | None,
    seed: str | None,
    output_format: str | None,
    verbose: bool | None,
) -> None:
    """Search and look up documents held in an in-memory repository.

    Configuration priority: YAML config < env vars (DOCUMENT_MANAGER_*) < CLI arguments.
    """
    cli_overrides = {
        "storage.seed_path": seed,
        "output.format": output_format,
        "logging.verbose": verbose,
    }
    try:
        app_config = load_config(config_path=config, cli_overrides=cli_overrides)
    except ValueError as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e

    logging.basicConfig(
        level=logging.DEBUG if app_config.logging.verbose else logging.INFO,
        format=app_config.logging.format,
        stream=sys.stderr,
    )
    ctx.obj = app_config


@cli.command()
@click.option("--title-prefix", "-t", multiple=True, help="Title starts with (repeatable, any)")
@click.option("--contains", "-q", multiple=True, help="Content contains (repeatable, any)")
@click.option("--author", "-a", multiple=True, help="Author id (repeatable, any)")
@click.option("--created-from", callback=_parse_datetime, help="Created strictly after (ISO-8601)")
@click.option("--created-to", callback=_parse_datetime, help="Created strictly before (ISO-8601)")
@click.pass_obj
def search(
    app_config: AppConfig,
    title_prefix: tuple[str, ...],
    contains: tuple[str, ...],
    author: tuple[str, ...],
    created_from: datetime | None,
    created_to: datetime | None,
) -> None:
    """Print every document matching all given filters."""
    try:
        manager = _build_manager(app_config)
        query = SearchQuery(
            title_prefixes=_multi(title_prefix),
            contains_contents=_multi(contains),
            author_ids=_multi(author),
            created_from=created_from,
            created_to=created_to,
        )
        results = manager.search(query)
    except DomainException as e:
        _fail(app_config, e)

    click.echo(_formatter(app_config).format_search_results(results))


@cli.command()
@click.argument("document_id")
@click.pass_obj
def get(app_config: AppConfig, document_id: str) -> None:
    """Print the document with DOCUMENT_ID."""
    try:
        document = _build_manager(app_config).find_by_id(document_id)
        if document is None:
            raise DocumentNotFoundException(f"Document '{document_id}' not found")
    except DomainException as e:
        _fail(app_config, e)

    click.echo(_formatter(app_config).format_document(document))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
