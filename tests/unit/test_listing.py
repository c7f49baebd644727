# ABOUTME: Unit tests for Library.list_all_books() and list_all_users().
# ABOUTME: Validates ordering, lazy iteration, snapshot immutability, and resolved borrowed books.

import dataclasses
import inspect

import pytest

from shelfkeeper.catalog import BookRecord, Library, UserType


class TestListAllBooks:
    """Tests for Library.list_all_books()."""

    def test_empty(self, library: Library) -> None:
        assert list(library.list_all_books()) == []

    def test_is_lazy(self, library: Library) -> None:
        assert inspect.isgenerator(library.list_all_books())

    def test_insertion_order(self, stocked_library: Library) -> None:
        titles = [record.title for record in stocked_library.list_all_books()]
        assert titles == ["Dune", "Emma", "Ulysses", "Beloved"]

    def test_records_are_frozen(self, stocked_library: Library) -> None:
        record = next(stocked_library.list_all_books())
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.title = "Changed"  # type: ignore[misc]

    def test_record_reflects_availability(self, library: Library) -> None:
        user_id = library.add_new_user(UserType.STUDENT, "Alice").value
        book_id = library.add_new_book("Dune", "Frank Herbert", "1").value
        library.borrow_book(user_id, book_id)

        (record,) = library.list_all_books()

        assert record == BookRecord(
            book_id=book_id, title="Dune", author="Frank Herbert", isbn="1", available=False
        )

    def test_removed_books_not_listed(self, stocked_library: Library) -> None:
        dune = stocked_library.find_book_by_title("Dune")
        assert dune is not None
        stocked_library.remove_book(dune.book_id)
        titles = [record.title for record in stocked_library.list_all_books()]
        assert "Dune" not in titles


class TestListAllUsers:
    """Tests for Library.list_all_users()."""

    def test_empty(self, library: Library) -> None:
        assert list(library.list_all_users()) == []

    def test_users_with_types(self, stocked_library: Library) -> None:
        listings = list(stocked_library.list_all_users())
        assert [(item.user.name, item.user.type_label) for item in listings] == [
            ("Alice", "Student"),
            ("Bob", "Faculty"),
        ]
        assert [item.user.max_books for item in listings] == [3, 5]

    def test_borrowed_books_resolved(self, stocked_library: Library) -> None:
        """Each listing carries full records for the books the user holds, in borrow order."""
        alice = next(stocked_library.list_all_users()).user.user_id
        for title in ("Ulysses", "Dune"):
            book = stocked_library.find_book_by_title(title)
            assert book is not None
            stocked_library.borrow_book(alice, book.book_id)

        listing = next(stocked_library.list_all_users())

        assert [book.title for book in listing.books] == ["Ulysses", "Dune"]
        assert all(not book.available for book in listing.books)
        assert len(listing.user.borrowed_book_ids) == 2

    def test_user_without_books(self, stocked_library: Library) -> None:
        listings = list(stocked_library.list_all_users())
        assert all(item.books == () for item in listings)

    def test_snapshot_does_not_track_later_changes(self, stocked_library: Library) -> None:
        listing = next(stocked_library.list_all_users())
        stocked_library.edit_user(listing.user.user_id, "Alicia")
        assert listing.user.name == "Alice"
