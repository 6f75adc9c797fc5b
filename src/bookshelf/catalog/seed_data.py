"""
Seed catalog and catalog file loading.

The seeded books are the default contents of the store. A YAML or JSON file
can replace them at startup (see ``Settings.catalog_path``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from ..logging import get_logger
from .models import BookRecord

logger = get_logger(__name__)


class CatalogError(Exception):
    """Raised when a catalog file cannot be loaded."""

    pass


SEED_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(id=1, title="The Awakening", author="Kate Chopin", created_at=458295425),
    BookRecord(id=2, title="City of Glass", author="Paul Auster", created_at=458295345),
    BookRecord(id=3, title="Meditations", author="Marcus Aurelius", created_at=458295321),
    BookRecord(id=4, title="Steppenwolf", author="Hermann Hesse", created_at=458297425),
    BookRecord(id=5, title="Post Office", author="Charles B.", created_at=45829325),
    BookRecord(id=6, title="Ham on Rye", author="Charles B.", created_at=45823325),
    BookRecord(id=7, title="Of Human Bondage", author="Somerset Maugham", created_at=45825325),
    BookRecord(id=8, title="Asi Empieza lo Malo", author="Javier Marías", created_at=45826325),
)


def _extract_entries(data: Any, path: str) -> list[Any]:
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("books", [])
    if not isinstance(data, list):
        raise CatalogError(f"Catalog file {path} must contain a list of books")
    return data


def load_catalog_file(path: str | Path) -> list[BookRecord]:
    """
    Load book records from a YAML or JSON catalog file.

    The document is either a list of books or a mapping with a ``books`` key.
    Each book needs ``id``, ``title``, ``author`` and ``createdAt`` (or
    ``created_at``) in epoch milliseconds.

    Returns:
        Records in file order

    Raises:
        CatalogError: If the file is missing, unparsable or malformed
    """
    path = str(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file not found: {path}") from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Catalog file {path} is not valid YAML/JSON: {e}") from e

    records: list[BookRecord] = []
    for index, entry in enumerate(_extract_entries(data, path)):
        if not isinstance(entry, dict):
            raise CatalogError(f"Catalog entry {index} in {path} is not a mapping")
        try:
            records.append(BookRecord.model_validate(entry))
        except PydanticValidationError as e:
            raise CatalogError(f"Invalid catalog entry {index} in {path}: {e}") from e

    logger.info("Loaded catalog file", path=path, books=len(records))
    return records
