"""Shared fixtures: a small, consistent set of authors and books."""

import pytest

from book_query.config import get_settings
from book_query.models import Author, Book

AUTHOR_RECORDS = [
    {"id": 1, "name": "Lauren Beukes", "books": [37, 38]},
    {"id": 2, "name": "Terry Pratchett", "books": [40, 41, 42, 43, 44, 45, 46]},
    {"id": 3, "name": "Neil Gaiman", "books": [46, 47, 48]},
    {"id": 4, "name": "Stephen Baxter", "books": [43, 44, 45]},
    {"id": 5, "name": "J.K. Rowling", "books": [51, 50]},
    {"id": 6, "name": "Douglas Adams", "books": [52]},
]

BOOK_RECORDS = [
    {"id": 37, "title": "The Shining Girls", "color": "black", "authors": [{"id": 1}]},
    {"id": 38, "title": "Zoo City", "color": "orange", "authors": [{"id": 1}]},
    {"id": 40, "title": "The Color of Magic", "color": "green", "authors": [{"id": 2}]},
    {"id": 41, "title": "The Hogfather", "color": "red", "authors": [{"id": 2}]},
    {"id": 42, "title": "Wee Free Men", "color": "blue", "authors": [{"id": 2}]},
    {"id": 43, "title": "The Long Earth", "color": "blue", "authors": [{"id": 2}, {"id": 4}]},
    {"id": 44, "title": "The Long War", "color": "black", "authors": [{"id": 2}, {"id": 4}]},
    {"id": 45, "title": "The Long Mars", "color": "red", "authors": [{"id": 2}, {"id": 4}]},
    {"id": 46, "title": "Good Omens", "color": "white", "authors": [{"id": 2}, {"id": 3}]},
    {"id": 47, "title": "Neverwhere", "color": "black", "authors": [{"id": 3}]},
    {"id": 48, "title": "Coraline", "color": "purple", "authors": [{"id": 3}]},
    {"id": 50, "title": "Harry Potter and the Philosopher's Stone", "color": "red", "authors": [{"id": 5}]},
    {"id": 51, "title": "Harry Potter and the Chamber of Secrets", "color": "green", "authors": [{"id": 5}]},
    {"id": 52, "title": "The Hitchhiker's Guide to the Galaxy", "color": "blue", "authors": [{"id": 6}]},
]


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def authors() -> list[Author]:
    return [Author.model_validate(record) for record in AUTHOR_RECORDS]


@pytest.fixture
def books() -> list[Book]:
    return [Book.model_validate(record) for record in BOOK_RECORDS]


@pytest.fixture
def author_records() -> list[dict]:
    return [dict(record) for record in AUTHOR_RECORDS]


@pytest.fixture
def book_records() -> list[dict]:
    return [dict(record) for record in BOOK_RECORDS]
