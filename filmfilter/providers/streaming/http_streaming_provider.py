"""HTTP streaming-availability provider implementing IStreamingProvider.

    GET {api_base_url}/streaming?title=<title>&country=<slug>
        → {"services": ["Netflix", ...]}

A missing or non-list ``services`` field means "no services".  Successful
lookups are cached per (country, title) through an optional ICacheProvider.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from filmfilter.config.settings import Settings
from filmfilter.interfaces.cache_provider import ICacheProvider
from filmfilter.interfaces.streaming_provider import IStreamingProvider
from filmfilter.utils.errors import StreamingLookupError

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Cache-Control": "no-store",
}


def parse_services(payload: Any) -> list[str]:
    """Extract the ``services`` list; malformed payloads yield ``[]``."""
    if not isinstance(payload, dict):
        return []
    services = payload.get("services")
    if not isinstance(services, list):
        return []
    return [s for s in services if isinstance(s, str)]


class HttpStreamingProvider(IStreamingProvider):
    """Streaming-availability client with an optional result cache.

    Parameters
    ----------
    settings:
        Supplies the base URL, ``streaming_path`` and request timeout.
    cache:
        Optional cache for successful lookups.
    http_client:
        Optional shared client; created and owned by the provider if omitted.
    """

    def __init__(
        self,
        settings: Settings,
        cache: ICacheProvider | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._cache = cache
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
            headers=_DEFAULT_HEADERS,
            follow_redirects=True,
        )

    @staticmethod
    def _cache_key(title: str, country: str) -> str:
        return f"streaming:{country}:{title.casefold()}"

    async def lookup_services(self, title: str, country: str) -> list[str]:
        country = country.lower()
        key = self._cache_key(title, country)
        if self._cache is not None:
            cached = await self._cache.get(key)
            if cached is not None:
                return list(cached)

        try:
            response = await self._client.get(
                self._settings.endpoint(self._settings.streaming_path),
                params={"title": title, "country": country},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise StreamingLookupError(
                message=f"HTTP {exc.response.status_code} looking up '{title}' ({country})",
                provider_name=self.get_provider_name(),
            ) from exc
        except httpx.HTTPError as exc:
            raise StreamingLookupError(
                message=f"Lookup failed for '{title}' ({country}): {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        except ValueError as exc:
            raise StreamingLookupError(
                message=f"Invalid JSON for '{title}' ({country})",
                provider_name=self.get_provider_name(),
            ) from exc

        services = parse_services(payload)
        logger.debug("streaming_lookup_complete", title=title, country=country, services=services)

        if self._cache is not None:
            await self._cache.set(key, services)
        return services

    def get_provider_name(self) -> str:
        return "streaming"

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()
