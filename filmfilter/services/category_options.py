"""Genre vocabulary for the genre selector.

Starts from a static fallback list and replaces it with the catalog's own
list once that has been fetched.  Fetch failures are logged and otherwise
ignored: the selector keeps working with whatever list it already had.

After :meth:`CategoryOptionsProvider.close` a late response is dropped
without touching the options.
"""

from __future__ import annotations

import asyncio
from typing import Sequence

import structlog

from filmfilter.interfaces.catalog_provider import ICatalogProvider
from filmfilter.utils.errors import FilmFilterError
from filmfilter.utils.logging import get_logger

GENRE_FALLBACK: tuple[str, ...] = (
    "Action", "Adventure", "Animation", "Biography", "Comedy", "Crime",
    "Documentary", "Drama", "Family", "Fantasy", "Film-Noir", "History",
    "Horror", "Music", "Musical", "Mystery", "Romance", "Sci-Fi", "Sport",
    "Thriller", "War", "Western",
)


class CategoryOptionsProvider:
    """Holds the genre options and refreshes them once from the catalog.

    Parameters
    ----------
    catalog:
        Source of the authoritative genre list.
    fallback:
        Options used until (and unless) the fetch succeeds.
    """

    def __init__(
        self,
        catalog: ICatalogProvider,
        fallback: Sequence[str] = GENRE_FALLBACK,
    ) -> None:
        self._catalog = catalog
        self._options: tuple[str, ...] = tuple(fallback)
        self._closed = False
        self._task: asyncio.Task | None = None
        self._logger: structlog.BoundLogger = get_logger(__name__)

    @property
    def options(self) -> tuple[str, ...]:
        return self._options

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self) -> asyncio.Task:
        """Schedule the one-off fetch on the running loop.

        Calling ``start`` again returns the same task.
        """
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self.load())
        return self._task

    async def load(self) -> bool:
        """Fetch the genre list; return ``True`` if the options changed."""
        if self._closed:
            return False

        try:
            genres = await self._catalog.fetch_genres()
        except FilmFilterError as exc:
            self._logger.warning("genre_fetch_failed", error=str(exc))
            return False
        except Exception as exc:
            self._logger.warning("genre_fetch_failed", error=str(exc), exc_info=True)
            return False

        if self._closed:
            self._logger.debug("genre_fetch_ignored_after_close")
            return False
        if not genres:
            self._logger.info("genre_fetch_empty", kept=len(self._options))
            return False

        self._options = tuple(genres)
        self._logger.info("genre_options_loaded", count=len(self._options))
        return True

    def close(self) -> None:
        """Stop accepting the fetch result and cancel it if still pending."""
        self._closed = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
