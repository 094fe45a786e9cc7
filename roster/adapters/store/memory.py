"""In-process user store adapters.

Implements UserStorePort without any backing database. Answers live for
the lifetime of the process only.
"""

import logging
from collections.abc import Mapping

from roster.core.ports import UserStorePort

logger = logging.getLogger(__name__)


class NullUserStore(UserStorePort):
    """User store that never confirms a deletion."""

    def delete(self, user_id: int) -> bool:
        logger.debug(f"Null store ignoring delete of user {user_id}")
        return False


class InMemoryUserStore(UserStorePort):
    """User store answering deletions from a per-ID table.

    IDs without a configured answer fall back to ``default``.
    """

    def __init__(
        self,
        answers: Mapping[int, bool] | None = None,
        default: bool = False,
    ):
        """Initialize the store.

        Args:
            answers: Initial deletion result per user ID.
            default: Result for IDs missing from the table.
        """
        self.answers: dict[int, bool] = dict(answers or {})
        self.default = default
        self.deleted_ids: list[int] = []

    def set_answer(self, user_id: int, result: bool) -> None:
        """Configure the deletion result for a user ID."""
        self.answers[user_id] = result

    def delete(self, user_id: int) -> bool:
        """Report the configured result and record confirmed deletions."""
        result = self.answers.get(user_id, self.default)
        if result:
            self.deleted_ids.append(user_id)
        logger.debug(
            f"Store delete for user {user_id}: {result}",
            extra={"user_id": user_id, "deleted": result},
        )
        return result
