"""Related books: everything written by the authors of a given book."""

import logging
from collections.abc import Iterable, Sequence

from ..config import get_settings
from ..errors import BookNotFoundError
from ..models.entities import Author, Book
from .lookup import find_book_by_id

logger = logging.getLogger(__name__)


def related_books(
    book_id: int,
    authors: Iterable[Author],
    books: Sequence[Book],
    unique: bool | None = None,
) -> list[str]:
    """Sorted titles of all books by any author of the given book.

    The book itself is included. A title shared by several of those authors
    is listed once per author unless ``unique`` is set.

    Args:
        book_id: Id of the reference book
        authors: All authors
        books: All books
        unique: Drop duplicate titles. Defaults to ``Settings.related_books_unique``.

    Raises:
        BookNotFoundError: if book_id, or an id in one of the authors' book
            lists, matches no book
    """
    if unique is None:
        unique = get_settings().related_books_unique

    target = find_book_by_id(book_id, books)
    if target is None:
        logger.warning("related_books called with unknown book id %s", book_id)
        raise BookNotFoundError(book_id)

    author_ids = set(target.author_ids)

    # Concatenate the book lists of every author of the target, keeping repeats
    related_ids: list[int] = []
    for author in authors:
        if author.id in author_ids:
            related_ids.extend(author.books)

    titles = []
    for related_id in related_ids:
        book = find_book_by_id(related_id, books)
        if book is None:
            raise BookNotFoundError(related_id)
        titles.append(book.title)

    if unique:
        titles = list(set(titles))

    logger.debug("Book %s has %d related titles", book_id, len(titles))
    return sorted(titles)
