"""
Read-only in-memory book store
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from ..logging import get_logger
from .models import BookRecord
from .seed_data import SEED_BOOKS, load_catalog_file

logger = get_logger(__name__)


class BookStore:
    """Ordered, immutable sequence of book records.

    Records keep the order they were given in. Ids are not checked for
    uniqueness; lookups return the first match.
    """

    def __init__(self, records: Iterable[BookRecord]):
        self._records: tuple[BookRecord, ...] = tuple(records)

    @classmethod
    def seeded(cls) -> BookStore:
        """Create a store holding the default seed catalog."""
        return cls(SEED_BOOKS)

    def all(self) -> tuple[BookRecord, ...]:
        return self._records

    def find(self, predicate: Callable[[BookRecord], bool]) -> BookRecord | None:
        """Return the first record matching ``predicate``, or None."""
        for record in self._records:
            if predicate(record):
                return record
        return None

    def __iter__(self) -> Iterator[BookRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"BookStore(books={len(self._records)})"


def build_book_store(catalog_path: str | Path | None = None) -> BookStore:
    """Build the store from a catalog file, or from the seed catalog if no path is given."""
    if catalog_path:
        store = BookStore(load_catalog_file(catalog_path))
        logger.info("Book store built from catalog file", path=str(catalog_path), books=len(store))
    else:
        store = BookStore.seeded()
        logger.debug("Book store built from seed catalog", books=len(store))
    return store
