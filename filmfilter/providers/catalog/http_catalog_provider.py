"""HTTP catalog provider implementing ICatalogProvider.

Talks to the catalog backend with httpx:

    GET {api_base_url}/movies?tconst=…&genres=…&limit=…
        → JSON array of movies, or ``{"movies": [...]}``
    GET {api_base_url}/genres
        → JSON array of genre names

Every failure is translated into :class:`CatalogRequestError` so the
search controller has a single exception type to turn into the
user-visible error state.
"""

from __future__ import annotations

from typing import Any, Sequence

import httpx
import structlog
from pydantic import ValidationError

from filmfilter.config.settings import Settings
from filmfilter.interfaces.catalog_provider import ICatalogProvider
from filmfilter.models.movie import Movie
from filmfilter.utils.errors import CatalogRequestError

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Cache-Control": "no-store",
}


def parse_movie_payload(payload: Any) -> list[Movie]:
    """Accept a bare list or an object with a ``movies`` list.

    Anything else yields an empty list.  Entries that do not validate as
    :class:`Movie` are skipped and logged.
    """
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict) and isinstance(payload.get("movies"), list):
        items = payload["movies"]
    else:
        return []

    movies: list[Movie] = []
    for index, item in enumerate(items):
        try:
            movies.append(Movie.model_validate(item))
        except ValidationError as exc:
            logger.warning(
                "catalog_item_skipped",
                index=index,
                error_count=exc.error_count(),
            )
    return movies


class HttpCatalogProvider(ICatalogProvider):
    """Catalog backend client.

    Parameters
    ----------
    settings:
        Supplies the base URL, endpoint paths and request timeout.
    http_client:
        Optional shared client.  When omitted the provider creates and
        owns one, closed by :meth:`aclose`.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
            headers=_DEFAULT_HEADERS,
            follow_redirects=True,
        )

    async def _get_json(self, path: str, params: Sequence[tuple[str, str]] | None = None) -> Any:
        url = self._settings.endpoint(path)
        try:
            response = await self._client.get(url, params=list(params or []))
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise CatalogRequestError(
                message=f"Request timed out after {self._settings.request_timeout:g}s",
                provider_name=self.get_provider_name(),
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise CatalogRequestError(
                message=f"HTTP {exc.response.status_code}",
                provider_name=self.get_provider_name(),
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogRequestError(
                message=f"Request failed: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise CatalogRequestError(
                message="Response body is not valid JSON",
                provider_name=self.get_provider_name(),
                status_code=response.status_code,
            ) from exc

    # ------------------------------------------------------------------
    # ICatalogProvider implementation
    # ------------------------------------------------------------------

    async def search_movies(self, params: Sequence[tuple[str, str]]) -> list[Movie]:
        payload = await self._get_json(self._settings.movies_path, params)
        movies = parse_movie_payload(payload)
        logger.debug("catalog_search_complete", result_count=len(movies))
        return movies

    async def fetch_genres(self) -> list[str]:
        payload = await self._get_json(self._settings.genres_path)
        if not isinstance(payload, list) or not all(isinstance(g, str) for g in payload):
            raise CatalogRequestError(
                message="Genre payload is not a list of strings",
                provider_name=self.get_provider_name(),
            )
        return [g for g in payload if g.strip()]

    def get_provider_name(self) -> str:
        return "catalog"

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()
