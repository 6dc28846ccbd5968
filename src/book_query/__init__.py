"""Book Query - lookups and aggregations over in-memory authors and books."""

from book_query.catalog import Catalog
from book_query.errors import (
    AmbiguousMaximumError,
    AuthorNotFoundError,
    BookNotFoundError,
    BookQueryError,
    EmptyCollectionError,
    NotFoundError,
    PreconditionError,
)
from book_query.models import Author, AuthorBookCount, AuthorRef, Book
from book_query.queries import (
    book_counts_per_author,
    books_grouped_by_color,
    find_author_by_name,
    find_book_by_id,
    friendliest_author,
    most_prolific_author,
    related_books,
    titles_by_author_name,
)

__version__ = "0.1.0"

__all__ = [
    "Author",
    "AuthorRef",
    "Book",
    "AuthorBookCount",
    "Catalog",
    "find_book_by_id",
    "find_author_by_name",
    "titles_by_author_name",
    "book_counts_per_author",
    "books_grouped_by_color",
    "most_prolific_author",
    "friendliest_author",
    "related_books",
    "BookQueryError",
    "NotFoundError",
    "BookNotFoundError",
    "AuthorNotFoundError",
    "PreconditionError",
    "EmptyCollectionError",
    "AmbiguousMaximumError",
]
