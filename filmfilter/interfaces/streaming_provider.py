"""Abstract base class for streaming-availability lookups.

One lookup per title and country; the result is the list of streaming
service names offering that title.  Callers treat a failed lookup as
"no providers" for that one title.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IStreamingProvider(ABC):
    """Contract for the per-title streaming enrichment service.

    Concrete implementation: HttpStreamingProvider (filmfilter/providers/streaming/).
    """

    @abstractmethod
    async def lookup_services(self, title: str, country: str) -> list[str]:
        """Return the streaming services offering *title* in *country*.

        A malformed ``services`` field yields an empty list rather than an
        error.

        Raises
        ------
        filmfilter.utils.errors.StreamingLookupError
            On transport errors, timeouts or non-success statuses.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier used in logs and error prefixes."""
