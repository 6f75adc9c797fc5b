"""
Book record model held by the catalog store
"""

from pydantic import BaseModel, ConfigDict, Field


class BookRecord(BaseModel):
    """A single catalog entry.

    ``created_at`` is the raw stored timestamp in epoch milliseconds. It is
    only formatted when the record is served.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str
    author: str
    created_at: int = Field(alias="createdAt")
