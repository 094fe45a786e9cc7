"""User registry: implements UserDirectoryPort over an in-memory sequence.

The registry keeps users in insertion order, answers lookups and
credential checks, and delegates deletion to a UserStorePort. The store
is the source of truth for deletion: the in-memory sequence only drops
a user once the store has confirmed it.
"""

import logging

from .models import User
from .ports import UserDirectoryPort, UserStorePort

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Username or password is null"


class UserRegistry(UserDirectoryPort):
    """Core implementation of UserDirectoryPort.

    Not safe for unsynchronized use from several threads.
    """

    def __init__(self, store: UserStorePort | None = None):
        """Initialize the registry.

        Args:
            store: UserStorePort implementation used by delete(). When
                omitted, delete() reports False for every ID.
        """
        self.store = store
        self.users: list[User] = []

    def __len__(self) -> int:
        return len(self.users)

    def __contains__(self, user: object) -> bool:
        return user in self.users

    def add(self, *users: User) -> None:
        """Append users in the order given."""
        self.users.extend(users)
        logger.debug(
            f"Added {len(users)} user(s)",
            extra={"user_ids": [user.id for user in users], "size": len(self.users)},
        )

    def get_all(self) -> list[User]:
        """Return all users in insertion order."""
        return list(self.users)

    def get_all_converted_by_id(self) -> dict[int, User]:
        """Return users keyed by ID; later insertions win on duplicate IDs."""
        return {user.id: user for user in self.users}

    def login(self, username: str | None, password: str | None) -> User | None:
        """Return the first user matching both credentials, else None.

        Raises:
            ValueError: If username or password is None.
        """
        if username is None or password is None:
            raise ValueError(INVALID_CREDENTIALS_MESSAGE)

        for user in self.users:
            if user.username == username and user.password == password:
                logger.debug(f"Login succeeded for {username}")
                return user

        logger.debug(f"Login failed for {username}")
        return None

    def delete(self, user_id: int) -> bool:
        """Ask the store to delete a user and mirror a confirmed deletion.

        Returns:
            The boolean reported by the store.
        """
        deleted = self.store.delete(user_id) if self.store is not None else False

        if deleted:
            before = len(self.users)
            self.users = [user for user in self.users if user.id != user_id]
            logger.info(
                f"User {user_id} deleted",
                extra={"user_id": user_id, "removed": before - len(self.users)},
            )
        else:
            logger.info(
                f"User {user_id} not deleted by store",
                extra={"user_id": user_id},
            )

        return deleted
