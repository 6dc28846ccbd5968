"""Derived records returned by aggregation queries."""

from pydantic import BaseModel, ConfigDict, Field


class AuthorBookCount(BaseModel):
    """Number of books written by one author."""

    model_config = ConfigDict(populate_by_name=True)

    author: str
    book_count: int = Field(alias="bookCount")
