#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf server.
"""

import json
import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the server and inspect the book catalog."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Start the Bookshelf API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Reloaded and forked workers import the app fresh and read these
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"
        os.environ["BOOKSHELF_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSHELF_DEBUG", "false")
        os.environ.setdefault("BOOKSHELF_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "bookshelf.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from bookshelf.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.group()
@click.option(
    "--log-level",
    default="warning",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: warning)",
)
def books(log_level: str) -> None:
    """Inspect the book catalog."""
    configure_logging(debug=(log_level == "debug"), level=log_level)


def _load_store(catalog: str | None):
    from bookshelf.catalog import CatalogError, build_book_store

    try:
        return build_book_store(catalog or settings.catalog_path)
    except CatalogError as e:
        logger.error("Failed to load catalog", error=str(e))
        click.echo(f"✗ Error loading catalog: {e}", err=True)
        sys.exit(1)


def _book_row(record) -> dict:
    from bookshelf.formatting import InvalidDateError, format_timestamp

    try:
        created_at = format_timestamp(record.created_at)
    except InvalidDateError:
        created_at = None
    return {
        "id": record.id,
        "title": record.title,
        "author": record.author,
        "createdAt": created_at,
    }


def _echo_book(row: dict) -> None:
    click.echo(f"  ID: {row['id']}")
    click.echo(f"  Title: {row['title']}")
    click.echo(f"  Author: {row['author']}")
    click.echo(f"  Created: {row['createdAt'] or '(invalid date)'}")


@books.command("list")
@click.option(
    "--catalog",
    type=click.Path(dir_okay=False),
    help="Catalog file to read instead of the configured one",
)
@click.option(
    "--output-format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format (default: table)",
)
def list_books_command(catalog: str | None, output_format: str) -> None:
    """List all books in the catalog."""
    from bookshelf.catalog import list_books

    store = _load_store(catalog)
    rows = [_book_row(record) for record in list_books(store)]

    if output_format == "json":
        click.echo(json.dumps(rows, indent=2, ensure_ascii=False))
        return

    if not rows:
        click.echo("No books found.")
        return

    click.echo(f"Found {len(rows)} book(s):")
    click.echo()
    for row in rows:
        _echo_book(row)
        click.echo()


@books.command("get")
@click.argument("book_id")
@click.option(
    "--catalog",
    type=click.Path(dir_okay=False),
    help="Catalog file to read instead of the configured one",
)
def get_book_command(book_id: str, catalog: str | None) -> None:
    """Show the book with BOOK_ID."""
    from bookshelf.catalog import GetBookRequest, get_book

    store = _load_store(catalog)
    record = get_book(store, GetBookRequest(id=book_id))
    if record is None:
        click.echo(f"✗ Book '{book_id}' not found", err=True)
        sys.exit(1)

    _echo_book(_book_row(record))


@cli.command()
def schema() -> None:
    """Print the GraphQL schema (SDL)."""
    from bookshelf.graphql.schema import print_schema

    click.echo(print_schema())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
