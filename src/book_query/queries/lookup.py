"""Lookups of single books and authors."""

import logging
from collections.abc import Iterable

from ..models.entities import Author, Book

logger = logging.getLogger(__name__)


def _normalize_name(name: str) -> str:
    return name.casefold()


def find_book_by_id(book_id: int, books: Iterable[Book]) -> Book | None:
    """Return the first book with the given id, or None."""
    for book in books:
        if book.id == book_id:
            return book
    logger.debug("No book with id %s", book_id)
    return None


def find_author_by_name(name: str, authors: Iterable[Author]) -> Author | None:
    """Return the first author whose name matches, ignoring case, or None."""
    wanted = _normalize_name(name)
    for author in authors:
        if _normalize_name(author.name) == wanted:
            return author
    logger.debug("No author named %r", name)
    return None


def titles_by_author_name(
    name: str,
    authors: Iterable[Author],
    books: Iterable[Book],
) -> list[str]:
    """Titles of the books written by the named author.

    Titles come back in the order of the author's own book list. An unknown
    author gives an empty list; book ids with no matching book are skipped.
    """
    author = find_author_by_name(name, authors)
    if author is None:
        return []

    titles_by_id = {}
    for book in books:
        titles_by_id.setdefault(book.id, book.title)

    titles = []
    for book_id in author.books:
        if book_id not in titles_by_id:
            logger.debug("Skipping book id %s listed for %s: no such book", book_id, author.name)
            continue
        titles.append(titles_by_id[book_id])
    return titles
