"""Abstract base class for cache service providers.

Used to remember streaming lookups per ``(title, country)`` so that
repeated searches returning the same titles do not hit the streaming
service again.  Implementations may use an in-memory dict, Redis, or any
other storage backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ICacheProvider(ABC):
    """Async key-value store for streaming lookups.

    Keys are ``streaming:<country>:<casefolded title>``; values are lists of
    service names.  An empty list is a valid cached value, so callers test
    for ``None`` rather than truthiness.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Retrieve the value stored under *key*.

        Returns
        -------
        Any or None
            The cached value if present and not expired; ``None`` otherwise.
        """

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store *value* under *key* with an optional time-to-live in seconds."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove the entry stored under *key* (no-op if absent)."""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Return ``True`` if *key* is present in the cache and not expired."""
