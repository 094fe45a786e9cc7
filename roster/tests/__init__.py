"""Test suite for the Roster user registry.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Validates store answers and logging

3. fakes/: Port implementations for testing
   - In-memory implementations of UserStorePort and UserDirectoryPort
   - Used by core and CLI tests
"""
