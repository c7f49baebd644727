# ABOUTME: Factories that build Books and Users with fresh, never-reused IDs.
# ABOUTME: Also the single place that turns a numeric user type code into a UserType.

import itertools

from shelfkeeper.catalog.results import InvalidUserTypeError
from shelfkeeper.catalog.types import USER_TYPE_CODES, Book, User, UserType

# Process-wide ID sequences, one per entity kind.
_book_ids = itertools.count()
_user_ids = itertools.count()


def resolve_user_type(kind: object) -> UserType:
    """Map a menu code (1 or 2) or a UserType to a UserType.

    Raises:
        InvalidUserTypeError: For any other value.
    """
    if isinstance(kind, UserType):
        return kind
    # bool is an int subclass; True must not pass as Student
    if isinstance(kind, int) and not isinstance(kind, bool) and kind in USER_TYPE_CODES:
        return USER_TYPE_CODES[kind]
    raise InvalidUserTypeError("Only valid options are 1 or 2")


def create_book(title: str, author: str, isbn: str) -> Book:
    """Build a new, available Book with the next book ID."""
    return Book(book_id=next(_book_ids), title=title, author=author, isbn=isbn)


def create_user(kind: int | UserType, name: str) -> User:
    """Build a new User of the given type with the next user ID.

    The type is validated before an ID is drawn, so a rejected call leaves
    the sequence untouched.

    Raises:
        InvalidUserTypeError: If ``kind`` is not 1 (Student) or 2 (Faculty).
    """
    user_type = resolve_user_type(kind)
    return User(user_id=next(_user_ids), name=name, user_type=user_type)
