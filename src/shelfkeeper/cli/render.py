# ABOUTME: Rich table builders for book and user listings.
# ABOUTME: Turns catalog records into tables; does no printing itself.

from collections.abc import Iterable

from rich.markup import escape
from rich.table import Table

from shelfkeeper.catalog.records import BookRecord, UserListing


def books_table(records: Iterable[BookRecord], title: str | None = "All Books") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("ISBN")
    table.add_column("Status")

    for record in records:
        status = "[green]available[/green]" if record.available else "[yellow]checked out[/yellow]"
        table.add_row(
            str(record.book_id),
            escape(record.title),
            escape(record.author) or "[dim]unknown[/dim]",
            escape(record.isbn) or "—",
            status,
        )
    return table


def users_table(listings: Iterable[UserListing]) -> Table:
    """One row per user; checked-out books are listed in the last column."""
    table = Table(title="All Users")
    table.add_column("ID", style="dim", width=4)
    table.add_column("Name", style="bold")
    table.add_column("Class")
    table.add_column("Limit", justify="right")
    table.add_column("Books Checked Out")

    for listing in listings:
        user = listing.user
        held = "\n".join(
            f"{book.book_id}: {escape(book.title)} ({escape(book.author)})" for book in listing.books
        )
        table.add_row(
            str(user.user_id),
            escape(user.name),
            user.type_label,
            f"{len(user.borrowed_book_ids)}/{user.max_books}",
            held or "[dim]none[/dim]",
        )
    return table
