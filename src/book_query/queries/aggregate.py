"""
Aggregations over whole author and book collections.

Counting, grouping and picking the author with the highest count.
"""

import logging
from collections.abc import Iterable, Sequence

from ..errors import AmbiguousMaximumError, AuthorNotFoundError, EmptyCollectionError
from ..models.entities import Author, Book
from ..models.results import AuthorBookCount

logger = logging.getLogger(__name__)


def book_counts_per_author(authors: Iterable[Author]) -> list[AuthorBookCount]:
    """Number of books for each author, in input order."""
    return [
        AuthorBookCount(author=author.name, book_count=author.book_count)
        for author in authors
    ]


def books_grouped_by_color(books: Iterable[Book]) -> dict[str, list[str]]:
    """Map each color to the titles of its books.

    Colors appear in the order they are first seen, titles in input order.
    """
    groups: dict[str, list[str]] = {}
    for book in books:
        if book.color in groups:
            groups[book.color].append(book.title)
        else:
            groups[book.color] = [book.title]
    return groups


def most_prolific_author(authors: Sequence[Author]) -> str:
    """
    Name of the author with the most books.

    Raises:
        EmptyCollectionError: if there are no authors
        AmbiguousMaximumError: if several authors share the highest count
    """
    if not authors:
        raise EmptyCollectionError("authors")

    top_count = max(author.book_count for author in authors)
    leaders = [author.name for author in authors if author.book_count == top_count]

    if len(leaders) > 1:
        logger.warning("Tie for most books (%d): %s", top_count, leaders)
        raise AmbiguousMaximumError(leaders, top_count)

    return leaders[0]


def friendliest_author(authors: Iterable[Author], books: Iterable[Book]) -> str | None:
    """
    Name of the author who appears on the most co-authored books.

    Co-authored books are scanned in order, and their authors in listed
    order; on a tie the author counted first wins. Returns None when no book
    has more than one author.

    Raises:
        AuthorNotFoundError: if the winning author id has no author record
    """
    tally: dict[int, int] = {}
    for book in books:
        if not book.is_co_authored:
            continue
        for author_id in book.author_ids:
            if author_id in tally:
                tally[author_id] += 1
            else:
                tally[author_id] = 1

    if not tally:
        logger.debug("No co-authored books")
        return None

    top_count = max(tally.values())
    winner_id = next(author_id for author_id, count in tally.items() if count == top_count)

    for author in authors:
        if author.id == winner_id:
            return author.name

    logger.warning("Co-author id %s has no author record", winner_id)
    raise AuthorNotFoundError(winner_id)
