# ABOUTME: End-to-end tests for the shelfkeeper CLI.
# ABOUTME: Drives `shelfkeeper menu` through Click's CliRunner with scripted keyboard input.

import itertools

import pytest
from click.testing import CliRunner

from shelfkeeper.catalog import factories
from shelfkeeper.cli import cli


@pytest.fixture(autouse=True)
def fresh_ids(monkeypatch: pytest.MonkeyPatch) -> None:
    """Restart the ID sequences so scripted input can refer to IDs 0, 1, ..."""
    monkeypatch.setattr(factories, "_book_ids", itertools.count())
    monkeypatch.setattr(factories, "_user_ids", itertools.count())


def _keys(*lines: str) -> str:
    return "\n".join(lines) + "\n"


class TestCliBasics:
    """E2e tests for the root command group."""

    def test_help_lists_menu(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "menu" in result.output

    def test_menu_exits_cleanly(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["menu"], input=_keys("4"))
        assert result.exit_code == 0
        assert "Welcome to the Norco Library:" in result.output
        assert "Thank you for using the Norco Library!" in result.output

    def test_menu_name_option(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["menu", "--name", "Branch Library"], input=_keys("4"))
        assert result.exit_code == 0
        assert "Thank you for using the Branch Library!" in result.output

    def test_verbose_flag(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-v", "menu"], input=_keys("1", "1", "Dune", "F", "I", "4", "4"))
        assert result.exit_code == 0
        assert "Book Added with ID 0" in result.output

    def test_input_ending_early_aborts(self) -> None:
        """Running out of input mid-session aborts instead of looping forever."""
        runner = CliRunner()
        result = runner.invoke(cli, ["menu"], input=_keys("1"))
        assert result.exit_code != 0


class TestCliCirculation:
    """E2e tests for a full session: add books and a user, then circulate."""

    def test_borrow_limit_session(self) -> None:
        """A Student borrows three books, is refused a fourth, returns one, then succeeds."""
        keys = [
            # four books
            "1",
            "1", "A", "Author", "I1",
            "1", "B", "Author", "I2",
            "1", "C", "Author", "I3",
            "1", "D", "Author", "I4",
            "4",
            # one student
            "2", "1", "1", "Alice", "4",
            # circulation
            "3",
            "1", "A", "0",
            "1", "B", "0",
            "1", "C", "0",
            "1", "D", "0",
            "2", "A", "0",
            "1", "D", "0",
            "4",
            "5",
            "4",
        ]
        runner = CliRunner()
        result = runner.invoke(cli, ["menu"], input=_keys(*keys))

        assert result.exit_code == 0
        assert "User Added with ID 0" in result.output
        for title in "ABC":
            assert f"{title} checked out by User 0" in result.output
        assert "ERROR: User has reached borrowing limit." in result.output
        assert "A checked in by User 0" in result.output
        assert "D checked out by User 0" in result.output
        assert "Alice" in result.output

    def test_remove_then_lookup_by_title(self) -> None:
        keys = [
            "1", "1", "T", "A", "I", "3", "0", "4",
            "3", "1", "T", "0", "5",
            "4",
        ]
        runner = CliRunner()
        result = runner.invoke(cli, ["menu"], input=_keys(*keys))

        assert result.exit_code == 0
        assert "Book Removed" in result.output
        assert "ERROR: No book with that title exists" in result.output
