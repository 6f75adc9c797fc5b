"""
Book GraphQL type definitions
"""

import strawberry

from ...catalog.models import BookRecord
from ...formatting import format_timestamp
from ...logging import get_logger

logger = get_logger(__name__)


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: strawberry.ID | None
    title: str | None
    author: str | None
    created_at_ms: strawberry.Private[int]

    @strawberry.field
    def created_at(self) -> str | None:
        """Creation time as an ISO-8601 UTC string."""
        logger.debug(
            "Resolving book createdAt",
            book_id=self.id,
            title=self.title,
            created_at=self.created_at_ms,
        )
        return format_timestamp(self.created_at_ms)

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        """Convert a catalog record to the GraphQL type."""
        return cls(
            id=strawberry.ID(str(record.id)),
            title=record.title,
            author=record.author,
            created_at_ms=record.created_at,
        )
