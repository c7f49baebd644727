# ABOUTME: Error taxonomy and result values for Library operations.
# ABOUTME: Library methods return Result; entity-level violations raise LibraryError subclasses.

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Why a Library operation was refused."""

    USER_NOT_FOUND = "user_not_found"
    BOOK_NOT_FOUND = "book_not_found"
    INVALID_USER_TYPE = "invalid_user_type"
    BOOK_UNAVAILABLE = "book_unavailable"
    BORROW_LIMIT_REACHED = "borrow_limit_reached"
    NOT_BORROWED = "not_borrowed"
    DUPLICATE_ID = "duplicate_id"


class LibraryError(Exception):
    """Base class for catalog errors. Carries the ErrorKind it corresponds to."""

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class InvalidUserTypeError(LibraryError):
    """Raised by the user factory for an unrecognized user type code."""

    def __init__(self, message: str = "Only valid options are 1 or 2") -> None:
        super().__init__(message, ErrorKind.INVALID_USER_TYPE)


class NotBorrowedError(LibraryError):
    """Raised when a user returns a book they do not hold."""

    def __init__(self, message: str = "Book not borrowed by user.") -> None:
        super().__init__(message, ErrorKind.NOT_BORROWED)


@dataclass(frozen=True)
class Failure:
    """A refused operation: the error kind plus a message fit for display."""

    kind: ErrorKind
    message: str

    @classmethod
    def from_error(cls, exc: LibraryError) -> "Failure":
        return cls(kind=exc.kind, message=str(exc))


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a Library operation.

    Exactly one of ``value`` (on success) or ``failure`` is meaningful. Callers
    branch on ``ok`` or on ``failure.kind``; ``unwrap()`` is there for code that
    would rather have an exception.
    """

    value: T | None = None
    failure: Failure | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(failure=Failure(kind=kind, message=message))

    @classmethod
    def from_error(cls, exc: LibraryError) -> "Result[T]":
        """A failed Result for an error raised below the Library."""
        return cls(failure=Failure.from_error(exc))

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def kind(self) -> ErrorKind | None:
        """The failure kind, or None on success."""
        return self.failure.kind if self.failure else None

    def unwrap(self) -> T | None:
        """Return the value, or raise LibraryError if the operation failed."""
        if self.failure is not None:
            raise LibraryError(self.failure.message, self.failure.kind)
        return self.value
