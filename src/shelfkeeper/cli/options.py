# ABOUTME: Shared Click options for shelfkeeper CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --verbose and --name.

import click

DEFAULT_LIBRARY_NAME = "Norco Library"

verbose_option = click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log catalog changes at DEBUG level.",
)

name_option = click.option(
    "--name",
    "library_name",
    default=DEFAULT_LIBRARY_NAME,
    show_default=True,
    help="Library name shown in the menu banner.",
)
