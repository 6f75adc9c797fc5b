"""
Startup validation for the Bookshelf service.

Checks the loaded catalog before the server starts taking requests.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from .catalog.store import BookStore
from .config import Settings, settings
from .formatting import InvalidDateError, format_timestamp
from .logging import get_logger

logger = get_logger(__name__)


class ValidationError(Exception):
    """Raised when application validation fails."""

    pass


def validate_catalog(store: BookStore) -> dict[str, Any]:
    """
    Validate the contents of a book store.

    Duplicate ids and blank titles or authors are warnings. Timestamps that
    cannot be formatted are errors and make the result invalid.

    Returns a dictionary with validation results.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "book_count": len(store),
    }

    if len(store) == 0:
        results["warnings"].append("Catalog is empty")

    id_counts = Counter(record.id for record in store)
    duplicates = sorted(book_id for book_id, count in id_counts.items() if count > 1)
    if duplicates:
        results["warnings"].append(
            f"Duplicate book ids {duplicates}; lookups return the first match"
        )

    for record in store:
        if not record.title.strip() or not record.author.strip():
            results["warnings"].append(f"Book {record.id} has a blank title or author")
        try:
            format_timestamp(record.created_at)
        except InvalidDateError as e:
            results["valid"] = False
            results["errors"].append(f"Book {record.id} has an invalid createdAt: {e}")

    if results["valid"]:
        logger.info(
            "Catalog validation successful",
            book_count=results["book_count"],
            warnings=results["warnings"],
        )
    else:
        logger.error("Catalog validation failed", errors=results["errors"])

    return results


def validate_startup_configuration(
    store: BookStore, app_settings: Settings | None = None
) -> dict[str, Any]:
    """
    Run all startup validation checks.

    Args:
        store: Book store about to be served
        app_settings: Settings deciding the environment (global settings if omitted)

    Raises:
        ValidationError: If the catalog is invalid in a production environment
    """
    app_settings = app_settings or settings
    catalog_results = validate_catalog(store)

    if not catalog_results["valid"] and app_settings.is_production:
        raise ValidationError("Catalog validation failed in production")

    return {
        "catalog": catalog_results,
        "overall_valid": catalog_results["valid"],
    }
