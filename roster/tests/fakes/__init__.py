"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic and adapters
to be tested without external dependencies:

- FakeUserStorePort: Stubbed deletion answers with call tracking
- FakeUserDirectoryPort: Captured directory operations for assertion
"""

from .directory import FakeUserDirectoryPort
from .store import FakeUserStorePort

__all__ = [
    "FakeUserDirectoryPort",
    "FakeUserStorePort",
]
