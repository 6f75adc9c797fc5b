"""In-memory book catalog: records, store and lookups."""

from .lookup import GetBookRequest, ListBooksRequest, get_book, list_books, parse_book_id
from .models import BookRecord
from .seed_data import SEED_BOOKS, CatalogError, load_catalog_file
from .store import BookStore, build_book_store

__all__ = [
    "BookRecord",
    "BookStore",
    "CatalogError",
    "GetBookRequest",
    "ListBooksRequest",
    "SEED_BOOKS",
    "build_book_store",
    "get_book",
    "list_books",
    "load_catalog_file",
    "parse_book_id",
]
