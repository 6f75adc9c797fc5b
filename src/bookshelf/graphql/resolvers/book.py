from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...catalog.lookup import GetBookRequest, ListBooksRequest, get_book, list_books
from ...catalog.store import BookStore
from ...logging import get_logger

if TYPE_CHECKING:
    from ..types.book import Book

logger = get_logger(__name__)


def get_store_from_info(info: strawberry.Info) -> BookStore:
    """Fetch the book store injected into the GraphQL context."""
    store = info.context.get("store")
    if store is None:
        raise RuntimeError("GraphQL context has no book store")
    return store


# Query resolvers
async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in store order."""
    from ..types.book import Book as BookType

    store = get_store_from_info(info)
    records = list_books(store, ListBooksRequest())
    logger.debug("Resolved books", count=len(records))
    return [BookType.from_record(record) for record in records]


async def resolve_book_by_id(
    info: strawberry.Info, id: str | list[str] | None
) -> Book | None:
    """
    Resolve a single book by its ID.

    Ids that are not numeric, or that match no book, resolve to None.
    """
    from ..types.book import Book as BookType

    store = get_store_from_info(info)
    record = get_book(store, GetBookRequest(id=id))

    if record is None:
        logger.info("Book not found", book_id=id)
        return None

    return BookType.from_record(record)
