"""Core domain logic for the Roster user registry.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import User
from .ports import UserDirectoryPort, UserStorePort
from .registry import UserRegistry

__all__ = [
    "User",
    "UserDirectoryPort",
    "UserRegistry",
    "UserStorePort",
]
