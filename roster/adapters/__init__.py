"""External adapters for the Roster user registry.

This package provides implementations of the core port interfaces
and the outer surfaces that drive the registry.

Adapter Organization:

- store/: Adapters for the user store behind deletion (null, in-memory)
- cli/: Command-line interface and directory commands
"""
