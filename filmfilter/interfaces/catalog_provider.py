"""Abstract base class for the movie catalog service.

The catalog is an opaque backend: it receives the serialized filter
parameters and returns matching movies, and it publishes the genre
vocabulary used by the genre selector.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from filmfilter.models.movie import Movie


class ICatalogProvider(ABC):
    """Contract for the catalog search backend.

    Concrete implementation: HttpCatalogProvider (filmfilter/providers/catalog/).
    """

    @abstractmethod
    async def search_movies(self, params: Sequence[tuple[str, str]]) -> list[Movie]:
        """Run one catalog search.

        Parameters
        ----------
        params:
            Ordered query parameters as produced by
            :func:`filmfilter.services.query_serializer.build_query_params`.

        Returns
        -------
        list[Movie]
            Matching movies in backend order, not yet enriched.

        Raises
        ------
        filmfilter.utils.errors.CatalogRequestError
            On transport errors, timeouts, non-success statuses or an
            undecodable body.
        """

    @abstractmethod
    async def fetch_genres(self) -> list[str]:
        """Return the genre vocabulary.

        Raises
        ------
        filmfilter.utils.errors.CatalogRequestError
            If the request fails or the payload is not a list of strings.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier used in logs and error prefixes."""
