# ABOUTME: Public API for the shelfkeeper catalog core.
# ABOUTME: Exports the Library registry, entity types, factories, and result types.

from shelfkeeper.catalog.factories import create_book, create_user
from shelfkeeper.catalog.library import Library
from shelfkeeper.catalog.records import BookRecord, UserListing, UserRecord
from shelfkeeper.catalog.results import (
    ErrorKind,
    Failure,
    InvalidUserTypeError,
    LibraryError,
    NotBorrowedError,
    Result,
)
from shelfkeeper.catalog.types import MAX_BOOKS, Book, User, UserType

__all__ = [
    "MAX_BOOKS",
    "Book",
    "BookRecord",
    "ErrorKind",
    "Failure",
    "InvalidUserTypeError",
    "Library",
    "LibraryError",
    "NotBorrowedError",
    "Result",
    "User",
    "UserListing",
    "UserRecord",
    "UserType",
    "create_book",
    "create_user",
]
