# ABOUTME: Core entity types for the catalog: Book, User, and the UserType variants.
# ABOUTME: Borrowing limits come from a lookup table keyed by UserType, not from subclasses.

from dataclasses import dataclass, field
from enum import Enum

from shelfkeeper.catalog.results import NotBorrowedError


class UserType(Enum):
    """Patron variants. The value is the numeric code used by the menu."""

    STUDENT = 1
    FACULTY = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


MAX_BOOKS: dict[UserType, int] = {
    UserType.STUDENT: 3,
    UserType.FACULTY: 5,
}

USER_TYPE_CODES: dict[int, UserType] = {t.value: t for t in UserType}


@dataclass
class Book:
    """A single cataloged book.

    ``book_id`` is assigned by the factory and never changes. ``available`` is
    false exactly while some user holds the book.
    """

    book_id: int
    title: str
    author: str
    isbn: str
    available: bool = True

    def edit(self, title: str, author: str, isbn: str) -> None:
        """Overwrite the descriptive fields. Identity and availability are untouched."""
        self.title = title
        self.author = author
        self.isbn = isbn

    def set_available(self, available: bool) -> None:
        self.available = available


@dataclass
class User:
    """A patron, tagged with its UserType.

    ``user_type`` is fixed at creation; only ``name`` may be edited.
    ``borrowed_book_ids`` keeps the order books were checked out.
    """

    user_id: int
    name: str
    user_type: UserType
    borrowed_book_ids: list[int] = field(default_factory=list)

    @property
    def max_books(self) -> int:
        return MAX_BOOKS[self.user_type]

    @property
    def type_label(self) -> str:
        return self.user_type.label

    def can_borrow(self) -> bool:
        return len(self.borrowed_book_ids) < self.max_books

    def holds(self, book_id: int) -> bool:
        return book_id in self.borrowed_book_ids

    def borrow_book(self, book_id: int) -> None:
        """Record a checkout. The caller has already checked can_borrow()."""
        self.borrowed_book_ids.append(book_id)

    def return_book(self, book_id: int) -> None:
        """Drop a book from the borrowed list.

        Raises:
            NotBorrowedError: If the user does not hold this book.
        """
        try:
            self.borrowed_book_ids.remove(book_id)
        except ValueError as exc:
            raise NotBorrowedError("Book not borrowed by user.") from exc

    def edit(self, name: str) -> None:
        self.name = name
