"""Cache provider implementations (cachetools-backed in-memory TTL cache)."""

from filmfilter.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
