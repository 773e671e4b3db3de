"""Store interfaces (repository pattern).

Stores must be swappable. The event list and the theme flag are persisted
as plain strings under fixed keys, so the only contract a backend has to
honour is string get/set.
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Interface for persistent string key-value storage."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...
