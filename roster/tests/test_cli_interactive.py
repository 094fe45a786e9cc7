"""Tests for interactive CLI loop functionality.

Covers:
- _run_cli_interactive: REPL-like command loop
- EOF/KeyboardInterrupt handling
- JSON command parsing
"""

import json
from unittest.mock import patch

import pytest

from roster.adapters.cli.commands import CLICommandHandler
from roster.core.models import User
from roster.core.registry import UserRegistry
from roster.main import _run_cli_interactive
from roster.tests.fakes import FakeUserDirectoryPort, FakeUserStorePort


def _printed(mock_print) -> str:
    return "\n".join(str(arg) for call in mock_print.call_args_list for arg in call[0])


@pytest.mark.asyncio
class TestInteractiveCLILoop:
    """Test suite for interactive CLI loop."""

    async def test_cli_reads_and_executes_commands(self) -> None:
        """Test that CLI reads commands in 'command args_json' format and executes them."""
        handler = CLICommandHandler(FakeUserDirectoryPort())

        with patch("builtins.input", side_effect=["list {}", "exit"]):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        assert '"operation": "list"' in _printed(mock_print)

    async def test_cli_handles_json_parse_errors(self) -> None:
        """Test that CLI handles malformed JSON gracefully."""
        directory = FakeUserDirectoryPort()
        handler = CLICommandHandler(directory)

        commands = ["add not-valid-json", "exit"]

        with patch("builtins.input", side_effect=commands):
            await _run_cli_interactive(handler)

        assert directory.users == []

    async def test_cli_rejects_non_object_arguments(self) -> None:
        directory = FakeUserDirectoryPort()
        handler = CLICommandHandler(directory)

        with patch("builtins.input", side_effect=["delete [1]", "exit"]):
            await _run_cli_interactive(handler)

        assert directory.delete_calls == []

    async def test_cli_handles_eof(self) -> None:
        """Test that CLI handles EOF (Ctrl+D) gracefully."""
        handler = CLICommandHandler(FakeUserDirectoryPort())

        def input_with_eof(_: str) -> str:
            raise EOFError()

        with patch("builtins.input", side_effect=input_with_eof):
            await _run_cli_interactive(handler)

    async def test_cli_handles_keyboard_interrupt(self) -> None:
        """Test that CLI handles KeyboardInterrupt (Ctrl+C) gracefully."""
        handler = CLICommandHandler(FakeUserDirectoryPort())

        call_count = [0]

        def input_with_interrupt(_: str) -> str:
            call_count[0] += 1
            if call_count[0] == 1:
                raise KeyboardInterrupt()
            return "exit"

        with patch("builtins.input", side_effect=input_with_interrupt):
            await _run_cli_interactive(handler)

        assert call_count[0] == 2

    async def test_cli_executes_add_and_login(self) -> None:
        """Commands run against a real registry in order."""
        registry = UserRegistry(store=FakeUserStorePort())
        handler = CLICommandHandler(registry)

        commands = [
            f'add {json.dumps({"id": 1, "username": "Ivan", "password": "123"})}',
            f'login {json.dumps({"username": "Ivan", "password": "123"})}',
            "exit",
        ]

        with patch("builtins.input", side_effect=commands):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        assert registry.get_all() == [User.of(1, "Ivan", "123")]
        assert '"authenticated": true' in _printed(mock_print)

    async def test_cli_executes_delete_command(self) -> None:
        store = FakeUserStorePort()
        store.will_return(1, True)
        registry = UserRegistry(store=store)
        registry.add(User.of(1, "Ivan", "123"))
        handler = CLICommandHandler(registry)

        commands = [f'delete {json.dumps({"user_id": 1})}', "exit"]

        with patch("builtins.input", side_effect=commands):
            with patch("builtins.print"):
                await _run_cli_interactive(handler)

        assert store.delete_calls == [1]
        assert registry.get_all() == []

    async def test_cli_ignores_empty_input(self) -> None:
        """Test that CLI ignores empty input lines."""
        handler = CLICommandHandler(FakeUserDirectoryPort())

        with patch("builtins.input", side_effect=["", "   ", "exit"]):
            await _run_cli_interactive(handler)

    async def test_cli_shows_help_command(self) -> None:
        """Test that CLI shows help on 'help' command."""
        handler = CLICommandHandler(FakeUserDirectoryPort())

        with patch("builtins.input", side_effect=["help", "exit"]):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        assert "Available Commands" in _printed(mock_print)

    async def test_cli_handles_invalid_command(self) -> None:
        """Test that CLI handles unknown commands gracefully."""
        handler = CLICommandHandler(FakeUserDirectoryPort())

        with patch("builtins.input", side_effect=["invalid_command {}", "exit"]):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        assert "error" in _printed(mock_print).lower()

    async def test_cli_reports_bad_user_id(self) -> None:
        handler = CLICommandHandler(FakeUserDirectoryPort())

        with patch("builtins.input", side_effect=['delete {"user_id": "abc"}', "exit"]):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        assert '"status": "error"' in _printed(mock_print)

    async def test_cli_survives_out_of_range_user_id(self) -> None:
        """An id that JSON decodes to infinity is reported and the loop keeps reading."""
        directory = FakeUserDirectoryPort()
        directory.add(User.of(1, "Ivan", "123"))
        handler = CLICommandHandler(directory)

        commands = ['delete {"user_id": 1e400}', "list {}", "exit"]

        with patch("builtins.input", side_effect=commands):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        output = _printed(mock_print)
        assert "user_id must be an integer" in output
        assert '"operation": "list"' in output
        assert directory.delete_calls == []

    async def test_cli_does_not_truncate_float_user_id(self) -> None:
        store = FakeUserStorePort()
        store.will_return(1, True)
        registry = UserRegistry(store=store)
        registry.add(User.of(1, "Ivan", "123"))
        handler = CLICommandHandler(registry)

        with patch("builtins.input", side_effect=['delete {"user_id": 1.9}', "exit"]):
            with patch("builtins.print"):
                await _run_cli_interactive(handler)

        assert store.delete_calls == []
        assert registry.get_all() == [User.of(1, "Ivan", "123")]

    async def test_cli_rejects_null_credentials_on_add(self) -> None:
        registry = UserRegistry()
        handler = CLICommandHandler(registry)

        commands = ['add {"id": 1, "username": null, "password": null}', "exit"]

        with patch("builtins.input", side_effect=commands):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        assert registry.get_all() == []
        assert "username must be a string" in _printed(mock_print)
