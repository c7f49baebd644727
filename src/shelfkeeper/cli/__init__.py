# ABOUTME: CLI package for shelfkeeper, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from shelfkeeper.cli.commands import menu_cmd
from shelfkeeper.cli.options import verbose_option


@click.group()
@click.version_option(package_name="shelfkeeper")
@verbose_option
def cli(verbose: bool) -> None:
    """shelfkeeper - an in-memory library catalog and circulation tracker."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
            force=True,
        )


cli.add_command(menu_cmd.menu)
