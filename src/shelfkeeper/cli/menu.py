# ABOUTME: Interactive text menu for managing books, users, and transactions.
# ABOUTME: Prompts with Click, renders with Rich, and drives a Library through its public API.

import click
from rich.console import Console
from rich.markup import escape

from shelfkeeper.catalog.factories import resolve_user_type
from shelfkeeper.catalog.library import Library
from shelfkeeper.catalog.results import InvalidUserTypeError, Result
from shelfkeeper.catalog.types import Book
from shelfkeeper.cli.options import DEFAULT_LIBRARY_NAME
from shelfkeeper.cli.render import books_table, users_table

MAIN_MENU = ("Manage Books", "Manage Users", "Manage Transactions", "Exit")
BOOK_MENU = ("Add a Book", "Edit a Book", "Remove a Book", "Go Back")
USER_MENU = ("Add a User", "Edit a User", "Remove a User", "Go Back")
TRANSACTION_MENU = (
    "Check Out A Book",
    "Check In A Book",
    "List All Books",
    "List All Users",
    "Go Back",
)


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


class MenuSession:
    """Menu loop over a single Library.

    Every prompt goes through click.prompt, so the session can be driven by
    a real terminal, by CliRunner input, or by patching click.prompt.
    Cancel sentinels follow the prompts: "0" for text and type prompts,
    "-1" for IDs to edit or remove, "x" for the user ID in a transaction.
    """

    def __init__(
        self,
        library: Library,
        *,
        console: Console | None = None,
        name: str = DEFAULT_LIBRARY_NAME,
    ) -> None:
        self._library = library
        self._console = console or Console()
        self._name = name

    def run(self) -> None:
        """Show the main menu until the user chooses Exit."""
        while True:
            choice = self._choose(f"Welcome to the {self._name}:", MAIN_MENU)
            if choice == 1:
                self._books_menu()
            elif choice == 2:
                self._users_menu()
            elif choice == 3:
                self._transactions_menu()
            elif choice == 4:
                self._console.print(f"Thank you for using the {escape(self._name)}!")
                return
            else:
                self._error("Invalid choice, please try again")

    # --- Prompt helpers ---

    def _ask(self, text: str) -> str:
        return click.prompt(text, type=str, default="", show_default=False)

    def _choose(self, heading: str, options: tuple[str, ...]) -> int | None:
        self._console.print(f"\n[bold]{escape(heading)}[/bold]")
        for number, label in enumerate(options, start=1):
            self._console.print(f"  {number}. {label}")
        return _parse_int(self._ask("Enter your choice"))

    def _error(self, message: str) -> None:
        self._console.print(f"[red]ERROR: {escape(message)}[/red]")

    def _report(self, result: Result, success: str) -> None:
        if result.ok:
            self._console.print(f"[green]{escape(success)}[/green]")
        else:
            assert result.failure is not None
            self._error(result.failure.message)

    def _ask_id(self, text: str) -> int | None:
        """Prompt for an ID; returns None on cancel (-1) or unparseable input."""
        raw = self._ask(text)
        value = _parse_int(raw)
        if value is None:
            self._error(f"'{raw}' is not a valid ID")
            return None
        if value == -1:
            return None
        return value

    # --- Books ---

    def _books_menu(self) -> None:
        while True:
            choice = self._choose("Manage Books:", BOOK_MENU)
            if choice == 1:
                self._add_book()
            elif choice == 2:
                self._edit_book()
            elif choice == 3:
                self._remove_book()
            elif choice == 4:
                return
            else:
                self._error("Invalid choice")

    def _add_book(self) -> None:
        self._console.print("\n[bold]Add a Book:[/bold]")
        fields = []
        for label in ("Title", "Author", "ISBN"):
            value = self._ask(f"Enter the {label} (0 to cancel)")
            if value == "0":
                return
            fields.append(value)
        title, author, isbn = fields
        result = self._library.add_new_book(title, author, isbn)
        self._report(result, f"Book Added with ID {result.value}")

    def _edit_book(self) -> None:
        self._console.print("\n[bold]Edit a Book:[/bold]")
        book_id = self._ask_id("Enter Book ID to edit (or -1 to cancel)")
        if book_id is None:
            return
        if self._library.get_book(book_id) is None:
            self._error("Book not found")
            return
        title = self._ask("Enter new Title")
        author = self._ask("Enter new Author")
        isbn = self._ask("Enter new ISBN")
        self._report(self._library.edit_book(book_id, title, author, isbn), "Book Edited")

    def _remove_book(self) -> None:
        self._console.print("\n[bold]Remove a Book:[/bold]")
        book_id = self._ask_id("Enter Book ID to remove (or -1 to cancel)")
        if book_id is None:
            return
        self._report(self._library.remove_book(book_id), "Book Removed")

    # --- Users ---

    def _users_menu(self) -> None:
        while True:
            choice = self._choose("Manage Users:", USER_MENU)
            if choice == 1:
                self._add_user()
            elif choice == 2:
                self._edit_user()
            elif choice == 3:
                self._remove_user()
            elif choice == 4:
                return
            else:
                self._error("Invalid choice")

    def _add_user(self) -> None:
        self._console.print("\n[bold]Add a User:[/bold]")
        while True:
            raw = self._ask("Enter 1 for student or 2 for faculty (0 to cancel)")
            code = _parse_int(raw)
            if code == 0:
                return
            try:
                user_type = resolve_user_type(code)
            except InvalidUserTypeError as exc:
                self._error(str(exc))
                continue
            break

        name = self._ask("Enter name (0 to cancel)")
        if name == "0":
            return
        result = self._library.add_new_user(user_type, name)
        self._report(result, f"User Added with ID {result.value}")

    def _edit_user(self) -> None:
        self._console.print("\n[bold]Edit a User:[/bold]")
        user_id = self._ask_id("Enter User ID to edit (or -1 to cancel)")
        if user_id is None:
            return
        if self._library.get_user(user_id) is None:
            self._error("User not found")
            return
        name = self._ask("Enter new name")
        self._report(self._library.edit_user(user_id, name), "User Edited")

    def _remove_user(self) -> None:
        self._console.print("\n[bold]Remove a User:[/bold]")
        user_id = self._ask_id("Enter User ID to remove (or -1 to cancel)")
        if user_id is None:
            return
        self._report(self._library.remove_user(user_id), "User Removed")

    # --- Transactions ---

    def _transactions_menu(self) -> None:
        while True:
            choice = self._choose("Manage Transactions:", TRANSACTION_MENU)
            if choice == 1:
                self._circulate(check_out=True)
            elif choice == 2:
                self._circulate(check_out=False)
            elif choice == 3:
                self._list_books()
            elif choice == 4:
                self._list_users()
            elif choice == 5:
                return
            else:
                self._error("Invalid choice")

    def _pick_book_by_title(self) -> Book | None:
        while True:
            title = self._ask("Book Title (or 0 to cancel)")
            if title == "0":
                return None
            book = self._library.find_book_by_title(title)
            if book is not None:
                return book
            self._error("No book with that title exists")

    def _pick_user_id(self) -> int | None:
        while True:
            raw = self._ask("User ID (or x to cancel)")
            if raw.lower() == "x":
                return None
            user_id = _parse_int(raw)
            if user_id is None:
                self._error("Invalid User ID")
                continue
            if self._library.get_user(user_id) is None:
                self._error("No User with that ID Exists")
                continue
            return user_id

    def _circulate(self, *, check_out: bool) -> None:
        heading = "Check Out A Book:" if check_out else "Check In A Book:"
        self._console.print(f"\n[bold]{heading}[/bold]")
        book = self._pick_book_by_title()
        if book is None:
            return
        user_id = self._pick_user_id()
        if user_id is None:
            return
        if check_out:
            result = self._library.borrow_book(user_id, book.book_id)
            verb = "checked out"
        else:
            result = self._library.return_book(user_id, book.book_id)
            verb = "checked in"
        self._report(result, f"{book.title} {verb} by User {user_id}")

    def _list_books(self) -> None:
        records = list(self._library.list_all_books())
        if not records:
            self._console.print("[yellow]No books in the library.[/yellow]")
            return
        self._console.print(books_table(records))

    def _list_users(self) -> None:
        listings = list(self._library.list_all_users())
        if not listings:
            self._console.print("[yellow]No users registered.[/yellow]")
            return
        self._console.print(users_table(listings))
