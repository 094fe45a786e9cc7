"""Composition root for the Roster user registry.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization and seeding
- Interactive CLI loop
"""

import asyncio
import json
import logging
import sys
from typing import Any

from roster.adapters.cli.commands import CLICommandHandler, run_command
from roster.adapters.store.memory import InMemoryUserStore, NullUserStore
from roster.config import Settings, load_settings
from roster.core.models import User
from roster.core.ports import UserStorePort
from roster.core.registry import UserRegistry

logger = logging.getLogger(__name__)


PROMPT = "roster> "


def _parse_command_line(command_line: str) -> tuple[str, dict[str, Any]]:
    """Split a REPL line into a command name and its JSON object arguments.

    Raises:
        ValueError: If the arguments are not a JSON object.
    """
    command, _, args_str = command_line.partition(" ")
    args_str = args_str.strip()
    if not args_str:
        return command.lower(), {}

    try:
        args = json.loads(args_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON arguments: {e.msg}") from e
    if not isinstance(args, dict):
        raise ValueError("Arguments must be a JSON object")
    return command.lower(), args


def _dispatch_line(cli_handler: CLICommandHandler, command_line: str) -> dict[str, Any]:
    """Run one REPL line, turning bad input into an error result."""
    try:
        command, args = _parse_command_line(command_line)
        return run_command(cli_handler, command, args)
    except (ValueError, TypeError) as e:
        logger.error(f"Command rejected: {e}")
        return {"status": "error", "message": str(e)}


async def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run the interactive CLI until 'exit' or EOF.

    Reads one '<command> <json-object>' line at a time. Ctrl+C abandons
    the current line only.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")
    loop = asyncio.get_running_loop()

    while True:
        try:
            command_line = (await loop.run_in_executor(None, input, PROMPT)).strip()
        except EOFError:
            logger.info("EOF received, exiting CLI")
            return
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue

        if not command_line:
            continue
        if command_line.lower() == "exit":
            logger.info("Exiting CLI")
            return
        if command_line.lower() == "help":
            _print_cli_help()
            continue

        result = _dispatch_line(cli_handler, command_line)
        print(json.dumps(result, indent=2, default=str))


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  add
    Register a user.
    Required: id, username, password

    Example: add {"id": 1, "username": "Ivan", "password": "123"}

  list
    List all users in the order they were added.
    Format options: json, text

    Example: list {"format": "text"}

  by-id
    Show users keyed by ID. The most recently added user wins
    when IDs repeat.

    Example: by-id

  login
    Check a username and password.
    Required: username, password

    Example: login {"username": "Ivan", "password": "123"}

  delete
    Delete a user through the user store.
    Required: user_id

    Example: delete {"user_id": 1}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_store(settings: Settings) -> UserStorePort:
    """Instantiate the user store selected by configuration.

    Raises:
        ValueError: If the configured backend is unknown.
    """
    if settings.store_backend == "null":
        return NullUserStore()
    elif settings.store_backend == "memory":
        return InMemoryUserStore(
            answers=settings.store_answers,
            default=settings.store_default_answer,
        )
    raise ValueError(f"Unknown store backend: {settings.store_backend}")


def build_registry(settings: Settings) -> UserRegistry:
    """Create a registry wired to the configured store and seeded with users."""
    registry = UserRegistry(store=build_store(settings))
    registry.add(
        *(User.of(seed.id, seed.username, seed.password) for seed in settings.seed_users)
    )
    return registry


async def bootstrap() -> None:
    """Load configuration, wire adapters, and start the application.

    This is the composition root: the single place where all components
    are instantiated and wired together.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate the user store and registry
    4. Run the interactive CLI
    """
    settings = load_settings()

    log_level = "DEBUG" if settings.debug else settings.log_level
    configure_logging(log_level, settings.log_format)
    logger.info("Loading Roster user registry...")

    registry = build_registry(settings)
    logger.info(
        f"User store: {settings.store_backend}; seeded {len(registry)} user(s)"
    )

    cli_handler = CLICommandHandler(registry)
    await _run_cli_interactive(cli_handler)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
