"""Command-line interface adapters.

Provides CLI commands for operating the Roster registry:
- add: Register a user
- list: Show users in insertion order
- by-id: Show users keyed by ID
- login: Check credentials
- delete: Remove a user through the user store
"""
