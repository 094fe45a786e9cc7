"""Port interfaces for the Roster user registry.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - UserStorePort: Confirm removal of users from the backing store

2. **Driving Ports** (adapters/external systems call into core)
   - UserDirectoryPort: Add, list, authenticate and delete users
"""

from abc import ABC, abstractmethod

from .models import User


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class UserStorePort(ABC):
    """Port for the persistence boundary behind the registry.

    The core only needs deletion from the backing store. Adapters may
    delete from a database, call a remote service or do nothing at all;
    the registry consumes the boolean result and nothing else.
    """

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Delete a user from the backing store.

        Args:
            user_id: ID of the user to delete.

        Returns:
            True if the store confirmed the deletion, False if nothing
            was deleted (including unknown IDs).

        Raises:
            Exception: Only if the backing store itself fails.
                Unknown IDs must be reported as False, not raised.
        """


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class UserDirectoryPort(ABC):
    """Port for directory queries and credential checks.

    Driving port: the CLI invokes these methods on behalf of a human
    operator. The implementation lives in the core (registry.py).
    """

    @abstractmethod
    def add(self, *users: User) -> None:
        """Append one or more users, preserving call order."""

    @abstractmethod
    def get_all(self) -> list[User]:
        """Return every stored user in insertion order.

        Returns:
            A new list; empty if no users were added.
        """

    @abstractmethod
    def get_all_converted_by_id(self) -> dict[int, User]:
        """Return a fresh mapping of user ID to user.

        When several users share an ID, the most recently added one wins.
        """

    @abstractmethod
    def login(self, username: str | None, password: str | None) -> User | None:
        """Authenticate a user by exact username and password.

        Args:
            username: Username to match (case-sensitive).
            password: Password to match (case-sensitive).

        Returns:
            The first matching user, or None if no user matches.

        Raises:
            ValueError: If username or password is None.
        """

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Delete a user through the backing store.

        Args:
            user_id: ID of the user to delete.

        Returns:
            Whatever the backing store reports for the ID.
        """
