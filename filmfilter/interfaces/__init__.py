"""Public interface definitions for the remote services filmfilter talks to.

Business logic depends only on these abstract classes; concrete adapters
live in ``filmfilter/providers/`` and are injected by the caller, so tests
can pass mocks instead of real HTTP clients.

    Interface             →  Concrete implementation
    ──────────────────────────────────────────────────
    ICatalogProvider      →  HttpCatalogProvider
    IStreamingProvider    →  HttpStreamingProvider
    ICacheProvider        →  MemoryCacheProvider
"""

from filmfilter.interfaces.cache_provider import ICacheProvider
from filmfilter.interfaces.catalog_provider import ICatalogProvider
from filmfilter.interfaces.streaming_provider import IStreamingProvider

__all__ = [
    "ICacheProvider",
    "ICatalogProvider",
    "IStreamingProvider",
]
