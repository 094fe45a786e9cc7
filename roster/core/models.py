"""Domain models for the Roster user registry.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """A registered user.

    Immutable value object: two users with identical fields compare equal.
    Credentials are stored as given (plaintext).
    """

    id: int
    username: str
    password: str = field(repr=False)

    @classmethod
    def of(cls, user_id: int, username: str, password: str) -> "User":
        """Build a user from its id, username and password."""
        return cls(id=user_id, username=username, password=password)
