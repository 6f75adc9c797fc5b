"""
Book lookup operations over a BookStore.

Ids arrive as GraphQL ``ID`` text (or a list of them) and are converted with
a lenient leading-integer parse. Text without a leading integer parses to
None, which never matches a stored record.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from ..logging import get_logger
from .models import BookRecord
from .store import BookStore

logger = get_logger(__name__)

_HEX_PREFIX = re.compile(r"^([+-]?)0[xX]([0-9a-fA-F]*)")
_DECIMAL_PREFIX = re.compile(r"^[+-]?[0-9]+")


class ListBooksRequest(BaseModel):
    """Arguments of the list-books operation (none)."""

    model_config = ConfigDict(frozen=True)


class GetBookRequest(BaseModel):
    """Arguments of the get-book operation."""

    model_config = ConfigDict(frozen=True)

    id: str | list[str] | None = None

    @property
    def book_id(self) -> int | None:
        return parse_book_id(self.id)


def parse_book_id(raw: str | Sequence[str] | None) -> int | None:
    """
    Parse a book id the lenient way: leading integer of the text, or None.

    - surrounding whitespace is ignored, a sign is allowed
    - ``0x``/``0X`` introduces hexadecimal digits
    - trailing garbage after the digits is ignored (``"12abc"`` -> 12)
    - a sequence is joined with commas, so its first element decides
    """
    if raw is None:
        return None
    if not isinstance(raw, str):
        raw = ",".join(str(part) for part in raw)

    text = raw.strip()

    match = _HEX_PREFIX.match(text)
    if match:
        sign, digits = match.groups()
        if not digits:
            return None
        value = int(digits, 16)
        return -value if sign == "-" else value

    match = _DECIMAL_PREFIX.match(text)
    if match:
        return int(match.group(0))

    return None


def list_books(store: BookStore, request: ListBooksRequest | None = None) -> list[BookRecord]:
    """Return every book in store order.

    ``request`` carries no fields; it is accepted so both lookups share the
    ``(store, request)`` call shape.
    """
    _ = request
    return list(store.all())


def get_book(store: BookStore, request: GetBookRequest) -> BookRecord | None:
    """Return the first book whose id equals the parsed request id, or None."""
    book_id = request.book_id
    if book_id is None:
        logger.debug("Book id did not parse as an integer", raw_id=request.id)
        return None

    return store.find(lambda record: record.id == book_id)
