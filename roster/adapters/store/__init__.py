"""User store adapters for confirming deletions.

Implementations:
- NullUserStore (never confirms a deletion)
- InMemoryUserStore (per-ID answer table, process lifetime only)
"""

from .memory import InMemoryUserStore, NullUserStore

__all__ = ["InMemoryUserStore", "NullUserStore"]
