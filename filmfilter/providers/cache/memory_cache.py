"""In-memory cache provider using cachetools.TTLCache.

Suitable for the single-process CLI and for tests.  Can be swapped for a
shared backend via the ICacheProvider interface.
"""

from __future__ import annotations

from typing import Any

import structlog
from cachetools import TTLCache

from filmfilter.interfaces.cache_provider import ICacheProvider

logger = structlog.get_logger(logger_name=__name__)


class MemoryCacheProvider(ICacheProvider):
    """In-memory TTL cache backed by ``cachetools.TTLCache``.

    Parameters
    ----------
    max_size:
        Maximum number of entries before the least-recently-used entry
        is evicted.
    ttl:
        Time-to-live in seconds applied to every entry.
    """

    def __init__(self, max_size: int = 1000, ttl: int = 3600) -> None:
        self._cache: TTLCache[str, Any] = TTLCache(maxsize=max_size, ttl=ttl)
        self._hits = 0
        self._misses = 0

    @property
    def stats(self) -> dict[str, int]:
        return {"hits": self._hits, "misses": self._misses, "size": len(self._cache)}

    async def get(self, key: str) -> Any | None:
        value = self._cache.get(key)
        if value is None:
            self._misses += 1
        else:
            self._hits += 1
        logger.debug("cache_lookup", key=key, hit=value is not None)
        return value

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store *value* under *key*.

        TTLCache applies one TTL to every entry, so a per-item *ttl* is
        ignored.
        """
        self._cache[key] = value

    async def delete(self, key: str) -> None:
        self._cache.pop(key, None)

    async def exists(self, key: str) -> bool:
        return key in self._cache

    def clear(self) -> None:
        self._cache.clear()
