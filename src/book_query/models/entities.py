"""Author and book records."""

from pydantic import BaseModel, Field


class AuthorRef(BaseModel):
    """Reference from a book to one of its authors."""

    id: int


class Book(BaseModel):
    """A book, written by one or more authors."""

    id: int
    title: str
    color: str
    authors: list[AuthorRef] = Field(default_factory=list)

    @property
    def author_ids(self) -> list[int]:
        """Ids of this book's authors, in listed order."""
        return [ref.id for ref in self.authors]

    @property
    def is_co_authored(self) -> bool:
        return len(self.authors) > 1


class Author(BaseModel):
    """An author and the ids of the books they wrote."""

    id: int
    name: str
    books: list[int] = Field(default_factory=list)

    @property
    def book_count(self) -> int:
        return len(self.books)
