"""CLI command implementations for Roster.

Provides human-initiated actions through command-line interface.

This adapter maps CLI commands (add, list, by-id, login, delete) to
UserDirectoryPort operations. It handles CLI-specific formatting and error
reporting. Passwords are never echoed back.
"""

import logging
from typing import Any

from roster.core.models import User
from roster.core.ports import UserDirectoryPort

logger = logging.getLogger(__name__)


def _user_to_dict(user: User) -> dict[str, Any]:
    return {"id": user.id, "username": user.username}


def _parse_user_id(value: Any, name: str) -> int:
    """Coerce a JSON argument to a user ID.

    Accepts ints and digit strings only; bools and floats are rejected.

    Raises:
        ValueError: If the value is not an integer.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    raise ValueError(f"{name} must be an integer")


def _parse_credential(value: Any, name: str, allow_empty: bool = True) -> str:
    """Check a username/password argument is a string.

    Raises:
        ValueError: If the value is not a string, or is empty when
            allow_empty is False.
    """
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    if not allow_empty and not value:
        raise ValueError(f"{name} must be a non-empty string")
    return value


class CLICommandHandler:
    """Handles CLI commands by delegating to UserDirectoryPort."""

    def __init__(self, directory: UserDirectoryPort):
        """Initialize the CLI command handler.

        Args:
            directory: UserDirectoryPort implementation to execute commands.
        """
        self.directory = directory

    def add_user(
        self, user_id: int, username: str, password: str, verbose: bool = False
    ) -> dict[str, Any]:
        """Register a user via CLI.

        Args:
            user_id: ID of the new user.
            username: Username of the new user.
            password: Plaintext password of the new user.
            verbose: If True, log additional information.

        Returns:
            Dictionary with status and the added user.
        """
        user = User.of(user_id, username, password)
        self.directory.add(user)

        if verbose:
            logger.info(f"Added user {user_id}", extra={"verbose": True})

        return {
            "status": "success",
            "operation": "add",
            "data": _user_to_dict(user),
            "message": f"User {user_id} added",
        }

    def list_users(self, output_format: str = "json") -> dict[str, Any]:
        """List users in insertion order.

        Args:
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with the user listing or status/message on error.
        """
        users = self.directory.get_all()

        if output_format == "json":
            return {
                "status": "success",
                "operation": "list",
                "count": len(users),
                "data": [_user_to_dict(user) for user in users],
            }

        elif output_format == "text":
            return {
                "status": "success",
                "operation": "list",
                "count": len(users),
                "data": self._format_users_as_text(users),
            }

        else:
            return {
                "status": "error",
                "operation": "list",
                "message": f"Unsupported format: {output_format}",
            }

    def users_by_id(self) -> dict[str, Any]:
        """Return users keyed by ID."""
        users = self.directory.get_all_converted_by_id()
        return {
            "status": "success",
            "operation": "by_id",
            "count": len(users),
            "data": {user_id: _user_to_dict(user) for user_id, user in users.items()},
        }

    def login(
        self, username: str | None, password: str | None
    ) -> dict[str, Any]:
        """Check credentials via CLI.

        Args:
            username: Username to authenticate.
            password: Password to authenticate.

        Returns:
            Dictionary with the authentication outcome. A missing username
            or password is reported as an error.
        """
        try:
            user = self.directory.login(username, password)
        except ValueError as e:
            logger.error(f"Failed to log in: {e}")
            return {
                "status": "error",
                "operation": "login",
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "login",
            "data": {
                "authenticated": user is not None,
                "user": _user_to_dict(user) if user is not None else None,
            },
        }

    def delete_user(self, user_id: int, verbose: bool = False) -> dict[str, Any]:
        """Delete a user via CLI.

        Args:
            user_id: ID of the user to delete.
            verbose: If True, log additional information.

        Returns:
            Dictionary with the store's deletion result.
        """
        deleted = self.directory.delete(user_id)

        if verbose:
            logger.info(
                f"Delete requested for user {user_id}",
                extra={"deleted": deleted, "verbose": True},
            )

        return {
            "status": "success",
            "operation": "delete",
            "user_id": user_id,
            "data": {"deleted": deleted},
            "message": (
                f"User {user_id} deleted"
                if deleted
                else f"User {user_id} was not deleted"
            ),
        }

    def _format_users_as_text(self, users: list[User]) -> str:
        """Format users as a human-readable table.

        Args:
            users: Users in display order.

        Returns:
            Formatted text string.
        """
        if not users:
            return "No users registered."

        lines = [f"{'ID':>6}  Username", f"{'-' * 6}  {'-' * 20}"]
        for user in users:
            lines.append(f"{user.id:>6}  {user.username}")

        return "\n".join(lines)


def run_command(
    handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        handler: CLICommandHandler bound to a directory.
        command: Command name ('add', 'list', 'by-id', 'login', 'delete').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized, or a required parameter
            is missing or has the wrong type.
    """
    if command == "add":
        for name in ("id", "username", "password"):
            if name not in args:
                raise ValueError(f"Missing required parameter: {name}")
        return handler.add_user(
            _parse_user_id(args["id"], "id"),
            _parse_credential(args["username"], "username", allow_empty=False),
            _parse_credential(args["password"], "password"),
            args.get("verbose", False),
        )

    elif command == "list":
        return handler.list_users(args.get("format", "json"))

    elif command == "by-id":
        return handler.users_by_id()

    elif command == "login":
        return handler.login(args.get("username"), args.get("password"))

    elif command == "delete":
        if "user_id" not in args:
            raise ValueError("Missing required parameter: user_id")
        return handler.delete_user(
            _parse_user_id(args["user_id"], "user_id"),
            args.get("verbose", False),
        )

    else:
        raise ValueError(
            f"Unknown command: {command}. Use 'help' for available commands."
        )
