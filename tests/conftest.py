# ABOUTME: Shared pytest fixtures for shelfkeeper tests.
# ABOUTME: Provides a fresh Library per test plus a few pre-populated variants.

from io import StringIO

import pytest
from rich.console import Console

from shelfkeeper.catalog import Library, UserType


@pytest.fixture
def library() -> Library:
    """An empty Library."""
    return Library()


@pytest.fixture
def stocked_library(library: Library) -> Library:
    """A Library with four books and one Student and one Faculty member."""
    for title, author in [
        ("Dune", "Frank Herbert"),
        ("Emma", "Jane Austen"),
        ("Ulysses", "James Joyce"),
        ("Beloved", "Toni Morrison"),
    ]:
        library.add_new_book(title, author, f"isbn-{title.lower()}")
    library.add_new_user(UserType.STUDENT, "Alice")
    library.add_new_user(UserType.FACULTY, "Bob")
    return library


@pytest.fixture
def console() -> Console:
    """A Rich console writing to a buffer, wide enough that messages don't wrap."""
    return Console(file=StringIO(), width=160)
