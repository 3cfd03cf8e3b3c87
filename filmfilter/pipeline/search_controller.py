"""Search controller -- submit filters, enrich results, publish one outcome.

State machine (re-entrant, no terminal state):

    IDLE ──submit()──→ LOADING ──→ RESULTS
                         │   └───→ ERROR
    RESULTS / ERROR ──submit()──→ LOADING
    any ──reset()──→ IDLE

A submission runs in three steps:

    1. catalog search with the serialized filters
    2. one streaming lookup per returned movie, all concurrent; a failed
       lookup gives that movie ``providers=[]`` and nothing else
    3. merge and publish RESULTS

Network responses arrive in any order, so every submission captures a
generation number.  Before each state write after an ``await`` the
controller compares it with the latest generation and drops the
response if a newer submission (or a reset) happened in between.
In-flight requests are not aborted, only ignored.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Iterable, Sequence

import structlog

from filmfilter.interfaces.catalog_provider import ICatalogProvider
from filmfilter.interfaces.streaming_provider import IStreamingProvider
from filmfilter.models.countries import is_supported_country
from filmfilter.models.filters import FilterSnapshot, FilterState, Number, RangeState
from filmfilter.models.movie import Movie
from filmfilter.models.outcome import SearchOutcome
from filmfilter.services.query_serializer import build_query_params, build_query_string
from filmfilter.utils.concurrency import settle_all
from filmfilter.utils.errors import CatalogRequestError, InvalidFilterError
from filmfilter.utils.logging import get_logger

OutcomeListener = Callable[[SearchOutcome], object]


class SearchController:
    """Owns the filter state and the current search outcome.

    Parameters
    ----------
    catalog:
        Primary search backend.
    streaming:
        Per-title streaming lookup used for enrichment.
    filters:
        Initial filter state; defaults to a fresh :class:`FilterState`.
    country:
        Streaming locale slug sent with every lookup.
    enrichment_concurrency:
        Maximum lookups in flight at once for one submission; ``None`` or
        ``0`` means unbounded.
    """

    def __init__(
        self,
        catalog: ICatalogProvider,
        streaming: IStreamingProvider,
        filters: FilterState | None = None,
        country: str = "dk",
        enrichment_concurrency: int | None = None,
    ) -> None:
        self._catalog = catalog
        self._streaming = streaming
        self._filters = filters or FilterState()
        self._country = self._validate_country(country)
        self._enrichment_concurrency = enrichment_concurrency or None
        self._generation = 0
        self._outcome = SearchOutcome.idle()
        self._listeners: list[OutcomeListener] = []
        self._logger: structlog.BoundLogger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def outcome(self) -> SearchOutcome:
        return self._outcome

    @property
    def filters(self) -> FilterSnapshot:
        return self._filters.snapshot()

    @property
    def country(self) -> str:
        return self._country

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def query_string(self) -> str:
        return build_query_string(self._filters)

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    # ------------------------------------------------------------------
    # Filter edits
    # ------------------------------------------------------------------

    def set_id_filter(self, value: str) -> None:
        self._filters.set_id_filter(value)

    def set_title_contains(self, value: str) -> None:
        self._filters.set_title_contains(value)

    def set_categories(self, categories: Iterable[str]) -> None:
        self._filters.set_categories(categories)

    def set_require_all_categories(self, value: bool) -> None:
        self._filters.set_require_all_categories(value)

    def toggle_require_all_categories(self) -> None:
        self._filters.toggle_require_all_categories()

    def set_year_range(self, low: Number | None = None, high: Number | None = None) -> None:
        _apply_range(self._filters.year_range, low, high)

    def set_runtime_range(self, low: Number | None = None, high: Number | None = None) -> None:
        _apply_range(self._filters.runtime_range, low, high)

    def set_rating_range(self, low: Number | None = None, high: Number | None = None) -> None:
        _apply_range(self._filters.rating_range, low, high)

    def set_min_popularity(self, value: Number) -> None:
        self._filters.set_min_popularity(value)

    def set_limit(self, value: int) -> None:
        self._filters.set_limit(value)

    def set_country(self, country: str) -> None:
        self._country = self._validate_country(country)

    @staticmethod
    def _validate_country(country: str) -> str:
        if not is_supported_country(country):
            raise InvalidFilterError(f"Unsupported streaming country: {country!r}")
        return country.strip().lower()

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def register_listener(self, callback: OutcomeListener) -> None:
        """Register a sync or async callable receiving every new outcome."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unregister_listener(self, callback: OutcomeListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    async def _publish(self, outcome: SearchOutcome) -> None:
        self._outcome = outcome
        for callback in list(self._listeners):
            try:
                result = callback(outcome)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as exc:
                self._logger.warning(
                    "outcome_listener_error",
                    error=str(exc),
                    callback=getattr(callback, "__name__", repr(callback)),
                )

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    async def submit(self) -> SearchOutcome | None:
        """Run one search and publish its outcome.

        Returns
        -------
        SearchOutcome or None
            The RESULTS or ERROR outcome this submission published, or
            ``None`` when a newer submission or a reset superseded it.
        """
        self._generation += 1
        generation = self._generation
        country = self._country
        params = build_query_params(self._filters)
        log = self._logger.bind(generation=generation)

        await self._publish(SearchOutcome.loading(generation))
        log.info("search_submitted", params=dict(params), country=country)

        try:
            movies = await self._catalog.search_movies(params)
        except CatalogRequestError as exc:
            return await self._fail(generation, exc.message, log, error=str(exc))
        except Exception as exc:
            log.error("search_unexpected_error", error=str(exc), exc_info=True)
            return await self._fail(generation, str(exc) or "Unknown error", log, error=repr(exc))

        if not self._is_current(generation):
            log.info("search_superseded", stage="catalog", latest=self._generation)
            return None

        enriched = await self._enrich(movies, country, log)

        if not self._is_current(generation):
            log.info("search_superseded", stage="enrichment", latest=self._generation)
            return None

        outcome = SearchOutcome.succeeded(enriched, generation)
        await self._publish(outcome)
        log.info("search_complete", result_count=len(enriched))
        return outcome

    async def _fail(
        self,
        generation: int,
        message: str,
        log: structlog.BoundLogger,
        error: str,
    ) -> SearchOutcome | None:
        if not self._is_current(generation):
            log.info("search_superseded", stage="catalog_error", latest=self._generation)
            return None
        log.warning("search_failed", error=error)
        outcome = SearchOutcome.failed(message, generation)
        await self._publish(outcome)
        return outcome

    async def _enrich(
        self,
        movies: Sequence[Movie],
        country: str,
        log: structlog.BoundLogger,
    ) -> list[Movie]:
        """Look up providers for every movie; failures become ``[]``."""
        if not movies:
            return []

        # One semaphore per submission: a superseded search holds no slots of a newer one.
        semaphore = (
            asyncio.Semaphore(self._enrichment_concurrency)
            if self._enrichment_concurrency
            else None
        )
        settled = await settle_all(
            [self._streaming.lookup_services(movie.title, country) for movie in movies],
            semaphore=semaphore,
        )

        merged: list[Movie] = []
        failures = 0
        for movie, result in zip(movies, settled):
            if not result.ok:
                failures += 1
                log.warning(
                    "enrichment_failed",
                    tconst=movie.id,
                    title=movie.title,
                    error=str(result.error),
                )
            merged.append(movie.with_providers(result.value_or([])))

        log.debug("enrichment_complete", total=len(movies), failed=failures)
        return merged

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    async def reset(self) -> None:
        """Restore default filters and clear results and errors.

        No request is issued.  Any submission still in flight is
        superseded, so its late response cannot repopulate the panel.
        """
        self._filters.reset()
        self._generation += 1
        await self._publish(SearchOutcome.idle(self._generation))
        self._logger.info("search_reset", generation=self._generation)


def _apply_range(range_state: RangeState, low: Number | None, high: Number | None) -> None:
    if low is not None:
        range_state.set_min(low)
    if high is not None:
        range_state.set_max(high)
