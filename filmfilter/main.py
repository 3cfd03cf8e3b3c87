"""Wiring for a filter panel: providers, vocabulary, selector, controller.

``build_panel`` is the one place where concrete providers are created.
Everything it returns talks to the others only through the interfaces in
``filmfilter.interfaces``, so tests can build the same objects around mocks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
import structlog
import yaml
from pydantic import ValidationError

from filmfilter.config.loader import load_config
from filmfilter.config.settings import Settings
from filmfilter.models.countries import is_supported_country
from filmfilter.models.filters import FilterDefaults, FilterState
from filmfilter.pipeline.search_controller import SearchController
from filmfilter.providers.cache.memory_cache import MemoryCacheProvider
from filmfilter.providers.catalog.http_catalog_provider import HttpCatalogProvider
from filmfilter.providers.streaming.http_streaming_provider import HttpStreamingProvider
from filmfilter.services.category_options import CategoryOptionsProvider
from filmfilter.services.category_selector import CategorySelector
from filmfilter.utils.errors import ConfigurationError
from filmfilter.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


@dataclass
class FilterPanel:
    """All collaborators of one filter panel session."""

    settings: Settings
    catalog: HttpCatalogProvider
    streaming: HttpStreamingProvider
    cache: MemoryCacheProvider
    options: CategoryOptionsProvider
    selector: CategorySelector
    controller: SearchController
    http_client: httpx.AsyncClient
    owns_client: bool = field(default=True)

    async def load_options(self) -> bool:
        """Fetch the genre vocabulary; the fallback list stays on failure."""
        return await self.options.start()

    async def reset(self) -> None:
        """Reset filters and outcome, and bring the selector back in line."""
        await self.controller.reset()
        self.selector.replace(self.controller.filters.categories)

    async def aclose(self) -> None:
        self.options.close()
        if self.owns_client:
            await self.http_client.aclose()
        _logger.debug("panel_closed")


def _check_settings(settings: Settings) -> None:
    if not settings.api_base_url.startswith(("http://", "https://")):
        raise ConfigurationError(f"API_BASE_URL must be an http(s) URL, got {settings.api_base_url!r}")
    if settings.request_timeout <= 0:
        raise ConfigurationError("REQUEST_TIMEOUT must be positive")
    if settings.enrichment_concurrency < 0:
        raise ConfigurationError("ENRICHMENT_CONCURRENCY must be zero (unbounded) or positive")
    if not is_supported_country(settings.default_country):
        raise ConfigurationError(f"Unsupported DEFAULT_COUNTRY {settings.default_country!r}")


def _load_panel_config(settings: Settings) -> dict[str, Any]:
    try:
        return load_config(settings.config_path, settings=settings)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Cannot read {settings.config_path}: {exc}") from exc


def _filter_defaults(config: dict[str, Any]) -> FilterDefaults:
    """Build :class:`FilterDefaults` from the ``filters`` section of *config*."""
    section = config.get("filters") or {}
    if not isinstance(section, dict):
        raise ConfigurationError("The filters section of the config must be a mapping")
    try:
        return FilterDefaults(**section)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid filters section: {exc.error_count()} error(s)") from exc


def build_panel(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FilterPanel:
    """Create a :class:`FilterPanel` from settings.

    Parameters
    ----------
    settings:
        Application settings; read from the environment when omitted.
    http_client:
        Optional shared client.  When omitted one client is created for
        both providers and closed by :meth:`FilterPanel.aclose`.
    """
    settings = settings or Settings()
    _check_settings(settings)
    config = _load_panel_config(settings)
    filters = FilterState(_filter_defaults(config))
    owns_client = http_client is None
    client = http_client or httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout),
        headers={"Accept": "application/json", "Cache-Control": "no-store"},
        follow_redirects=True,
    )

    cache = MemoryCacheProvider(
        max_size=settings.streaming_cache_size,
        ttl=settings.streaming_cache_ttl,
    )
    catalog = HttpCatalogProvider(settings=settings, http_client=client)
    streaming = HttpStreamingProvider(settings=settings, cache=cache, http_client=client)
    options = CategoryOptionsProvider(catalog)
    controller = SearchController(
        catalog=catalog,
        streaming=streaming,
        filters=filters,
        country=settings.default_country,
        enrichment_concurrency=settings.enrichment_concurrency,
    )
    selector = CategorySelector(options, selected=controller.filters.categories)
    selector.register_listener(controller.set_categories)

    _logger.info(
        "panel_built",
        api_base_url=settings.api_base_url,
        country=controller.country,
        request_timeout=settings.request_timeout,
    )
    return FilterPanel(
        settings=settings,
        catalog=catalog,
        streaming=streaming,
        cache=cache,
        options=options,
        selector=selector,
        controller=controller,
        http_client=client,
        owns_client=owns_client,
    )
