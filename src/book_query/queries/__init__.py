"""Query functions over author and book collections."""

from .aggregate import (
    book_counts_per_author,
    books_grouped_by_color,
    friendliest_author,
    most_prolific_author,
)
from .lookup import find_author_by_name, find_book_by_id, titles_by_author_name
from .related import related_books

__all__ = [
    "find_book_by_id",
    "find_author_by_name",
    "titles_by_author_name",
    "book_counts_per_author",
    "books_grouped_by_color",
    "most_prolific_author",
    "friendliest_author",
    "related_books",
]
