"""Roster: in-memory user registry and authenticator."""
