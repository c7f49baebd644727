# ABOUTME: The Library registry: owns every Book and User and runs borrow/return.
# ABOUTME: Mutations return Result values; lookups return None when nothing matches.

import logging
from collections.abc import Iterator

from shelfkeeper.catalog.factories import create_book, create_user
from shelfkeeper.catalog.records import (
    BookRecord,
    UserListing,
    book_to_record,
    user_to_record,
)
from shelfkeeper.catalog.results import (
    ErrorKind,
    InvalidUserTypeError,
    NotBorrowedError,
    Result,
)
from shelfkeeper.catalog.types import Book, User, UserType

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "No User with that ID Exists"
BOOK_NOT_FOUND = "No Book with that ID Exists"


class Library:
    """In-memory catalog of books and patrons.

    Both collections are dicts keyed by ID, so listing order is insertion
    order. Callers construct their own instance; there is no shared global.

    Invariant kept by every operation: a book is unavailable exactly when
    its ID sits in one user's ``borrowed_book_ids``.
    """

    def __init__(self) -> None:
        self._books: dict[int, Book] = {}
        self._users: dict[int, User] = {}

    @property
    def book_count(self) -> int:
        return len(self._books)

    @property
    def user_count(self) -> int:
        return len(self._users)

    # --- Book operations ---

    def add_book(self, book: Book) -> Result[int]:
        """Insert a Book built by the factory. Returns its ID."""
        if book.book_id in self._books:
            return Result.fail(ErrorKind.DUPLICATE_ID, f"Book {book.book_id} already exists.")
        self._books[book.book_id] = book
        logger.debug("Added book %d (%r)", book.book_id, book.title)
        return Result.success(book.book_id)

    def add_new_book(self, title: str, author: str, isbn: str) -> Result[int]:
        """Create a Book and add it in one step."""
        return self.add_book(create_book(title, author, isbn))

    def get_book(self, book_id: int) -> Book | None:
        return self._books.get(book_id)

    def find_book_by_title(self, title: str) -> Book | None:
        """Return the first book, in insertion order, whose title matches exactly."""
        for book in self._books.values():
            if book.title == title:
                return book
        return None

    def edit_book(self, book_id: int, title: str, author: str, isbn: str) -> Result[None]:
        book = self._books.get(book_id)
        if book is None:
            return Result.fail(ErrorKind.BOOK_NOT_FOUND, "Book not found.")
        book.edit(title, author, isbn)
        logger.debug("Edited book %d", book_id)
        return Result.success()

    def remove_book(self, book_id: int) -> Result[None]:
        """Delete a book. If it is checked out, the borrower's list drops it too."""
        book = self._books.pop(book_id, None)
        if book is None:
            return Result.fail(ErrorKind.BOOK_NOT_FOUND, "Book not found.")
        borrower = self.borrower_of(book_id)
        if borrower is not None:
            borrower.return_book(book_id)
            logger.debug("Removed book %d from user %d's borrowed list", book_id, borrower.user_id)
        logger.debug("Removed book %d", book_id)
        return Result.success()

    def borrower_of(self, book_id: int) -> User | None:
        """The user currently holding ``book_id``, if any."""
        for user in self._users.values():
            if user.holds(book_id):
                return user
        return None

    # --- User operations ---

    def register_user(self, user: User) -> Result[int]:
        """Insert a User built by the factory. Returns its ID."""
        if user.user_id in self._users:
            return Result.fail(ErrorKind.DUPLICATE_ID, f"User {user.user_id} already exists.")
        self._users[user.user_id] = user
        logger.debug("Registered %s %d (%r)", user.type_label, user.user_id, user.name)
        return Result.success(user.user_id)

    def add_new_user(self, kind: int | UserType, name: str) -> Result[int]:
        """Create a User of type ``kind`` (1 Student, 2 Faculty) and register it."""
        try:
            user = create_user(kind, name)
        except InvalidUserTypeError as exc:
            return Result.from_error(exc)
        return self.register_user(user)

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def edit_user(self, user_id: int, name: str) -> Result[None]:
        user = self._users.get(user_id)
        if user is None:
            return Result.fail(ErrorKind.USER_NOT_FOUND, "User not found.")
        user.edit(name)
        logger.debug("Edited user %d", user_id)
        return Result.success()

    def remove_user(self, user_id: int) -> Result[None]:
        """Delete a user. Any books they held become available again."""
        user = self._users.pop(user_id, None)
        if user is None:
            return Result.fail(ErrorKind.USER_NOT_FOUND, "User not found.")
        for book_id in user.borrowed_book_ids:
            book = self._books.get(book_id)
            if book is not None:
                book.set_available(True)
                logger.debug("Released book %d held by removed user %d", book_id, user_id)
        logger.debug("Removed user %d", user_id)
        return Result.success()

    # --- Circulation ---

    def borrow_book(self, user_id: int, book_id: int) -> Result[None]:
        """Check ``book_id`` out to ``user_id``.

        Checks run in a fixed order and the first failure is returned with
        nothing changed: user exists, book exists, book is available, user
        is under their limit.
        """
        user = self._users.get(user_id)
        if user is None:
            return Result.fail(ErrorKind.USER_NOT_FOUND, USER_NOT_FOUND)
        book = self._books.get(book_id)
        if book is None:
            return Result.fail(ErrorKind.BOOK_NOT_FOUND, BOOK_NOT_FOUND)
        if not book.available:
            return Result.fail(ErrorKind.BOOK_UNAVAILABLE, "Book is not available for borrowing.")
        if not user.can_borrow():
            return Result.fail(ErrorKind.BORROW_LIMIT_REACHED, "User has reached borrowing limit.")

        # Neither step below can fail once the checks pass.
        book.set_available(False)
        user.borrow_book(book_id)
        logger.debug("User %d borrowed book %d", user_id, book_id)
        return Result.success()

    def return_book(self, user_id: int, book_id: int) -> Result[None]:
        """Check ``book_id`` back in from ``user_id``.

        A book still marked available cannot be on anyone's list, so it is
        refused as not borrowed before any state changes.
        """
        user = self._users.get(user_id)
        if user is None:
            return Result.fail(ErrorKind.USER_NOT_FOUND, USER_NOT_FOUND)
        book = self._books.get(book_id)
        if book is None:
            return Result.fail(ErrorKind.BOOK_NOT_FOUND, BOOK_NOT_FOUND)
        if book.available:
            return Result.fail(ErrorKind.NOT_BORROWED, "Book not borrowed by user.")

        try:
            user.return_book(book_id)
        except NotBorrowedError as exc:
            return Result.from_error(exc)
        book.set_available(True)
        logger.debug("User %d returned book %d", user_id, book_id)
        return Result.success()

    # --- Listing ---

    def list_all_books(self) -> Iterator[BookRecord]:
        """Yield a record for every book, in insertion order."""
        for book in list(self._books.values()):
            yield book_to_record(book)

    def list_all_users(self) -> Iterator[UserListing]:
        """Yield every user with the records of the books they hold."""
        for user in list(self._users.values()):
            held = []
            for book_id in user.borrowed_book_ids:
                book = self.get_book(book_id)
                if book is not None:
                    held.append(book_to_record(book))
            yield UserListing(user=user_to_record(user), books=tuple(held))
