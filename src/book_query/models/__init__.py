"""Data models for authors, books and query results."""

from book_query.models.entities import Author, AuthorRef, Book
from book_query.models.results import AuthorBookCount

__all__ = ["Author", "AuthorRef", "Book", "AuthorBookCount"]
