# ABOUTME: Immutable snapshots of Books and Users handed out for display.
# ABOUTME: Listing callers get these instead of live entities so they cannot mutate state.

from dataclasses import dataclass

from shelfkeeper.catalog.types import Book, User, UserType


@dataclass(frozen=True)
class BookRecord:
    """Point-in-time view of a Book."""

    book_id: int
    title: str
    author: str
    isbn: str
    available: bool


@dataclass(frozen=True)
class UserRecord:
    """Point-in-time view of a User."""

    user_id: int
    name: str
    user_type: UserType
    max_books: int
    borrowed_book_ids: tuple[int, ...]

    @property
    def type_label(self) -> str:
        return self.user_type.label


@dataclass(frozen=True)
class UserListing:
    """A user together with the records of the books they currently hold."""

    user: UserRecord
    books: tuple[BookRecord, ...]


def book_to_record(book: Book) -> BookRecord:
    return BookRecord(
        book_id=book.book_id,
        title=book.title,
        author=book.author,
        isbn=book.isbn,
        available=book.available,
    )


def user_to_record(user: User) -> UserRecord:
    return UserRecord(
        user_id=user.user_id,
        name=user.name,
        user_type=user.user_type,
        max_books=user.max_books,
        borrowed_book_ids=tuple(user.borrowed_book_ids),
    )
