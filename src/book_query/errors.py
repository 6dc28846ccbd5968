"""Exceptions raised by the query functions."""


class BookQueryError(Exception):
    """Base class for all book query errors."""


class NotFoundError(BookQueryError, LookupError):
    """A record that a query depends on does not exist."""


class BookNotFoundError(NotFoundError):
    """No book with the given id."""

    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book id not found: {book_id}")


class AuthorNotFoundError(NotFoundError):
    """No author with the given id."""

    def __init__(self, author_id: int):
        self.author_id = author_id
        super().__init__(f"Author id not found: {author_id}")


class PreconditionError(BookQueryError, ValueError):
    """The input does not satisfy a query's precondition."""


class EmptyCollectionError(PreconditionError):
    """A query that needs at least one record got none."""

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(f"Expected at least one record in {collection}")


class AmbiguousMaximumError(PreconditionError):
    """More than one record shares the maximum value."""

    def __init__(self, names: list[str], count: int):
        self.names = names
        self.count = count
        super().__init__(
            f"{len(names)} authors tie with {count} books: {', '.join(names)}"
        )
