# ABOUTME: The `shelfkeeper menu` command that starts an interactive session.
# ABOUTME: Builds a fresh in-memory Library and hands it to a MenuSession.

import click
from rich.console import Console

from shelfkeeper.catalog.library import Library
from shelfkeeper.cli.menu import MenuSession
from shelfkeeper.cli.options import name_option


@click.command("menu")
@name_option
def menu(library_name: str) -> None:
    """Manage books, users, and checkouts from an interactive menu.

    All state lives in memory and is discarded on exit.
    """
    console = Console()
    session = MenuSession(Library(), console=console, name=library_name)
    session.run()
