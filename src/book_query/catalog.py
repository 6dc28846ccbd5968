"""
Catalog

Bundles an author collection and a book collection so the query
functions can be called without passing both every time.
"""

from dataclasses import dataclass, field

from .models.entities import Author, Book
from .models.results import AuthorBookCount
from .queries import (
    book_counts_per_author,
    books_grouped_by_color,
    find_author_by_name,
    find_book_by_id,
    friendliest_author,
    most_prolific_author,
    related_books,
    titles_by_author_name,
)


@dataclass
class Catalog:
    """
    In-memory authors and books.

    The collections are used as given; nothing is copied or changed.

    Usage:
        catalog = Catalog(authors=authors, books=books)
        catalog.related_books(46)
        catalog.friendliest_author()
    """

    authors: list[Author] = field(default_factory=list)
    books: list[Book] = field(default_factory=list)

    @classmethod
    def from_records(cls, authors: list[dict], books: list[dict]) -> "Catalog":
        """Build a catalog from plain author and book dicts."""
        return cls(
            authors=[Author.model_validate(a) for a in authors],
            books=[Book.model_validate(b) for b in books],
        )

    def find_book_by_id(self, book_id: int) -> Book | None:
        return find_book_by_id(book_id, self.books)

    def find_author_by_name(self, name: str) -> Author | None:
        return find_author_by_name(name, self.authors)

    def titles_by_author_name(self, name: str) -> list[str]:
        return titles_by_author_name(name, self.authors, self.books)

    def book_counts_per_author(self) -> list[AuthorBookCount]:
        return book_counts_per_author(self.authors)

    def books_grouped_by_color(self) -> dict[str, list[str]]:
        return books_grouped_by_color(self.books)

    def most_prolific_author(self) -> str:
        return most_prolific_author(self.authors)

    def related_books(self, book_id: int, unique: bool | None = None) -> list[str]:
        return related_books(book_id, self.authors, self.books, unique=unique)

    def friendliest_author(self) -> str | None:
        return friendliest_author(self.authors, self.books)
