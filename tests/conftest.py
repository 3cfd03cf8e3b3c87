"""Shared pytest fixtures for the filmfilter test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from filmfilter.config.settings import Settings
from filmfilter.interfaces.catalog_provider import ICatalogProvider
from filmfilter.interfaces.streaming_provider import IStreamingProvider
from filmfilter.models.filters import FilterDefaults, FilterState
from filmfilter.models.movie import Movie

BASE_URL = "http://catalog.test"
REPO_CONFIG = Path(__file__).resolve().parents[1] / "config" / "config.yaml"


def make_response(
    status_code: int = 200,
    json_body: Any = None,
    content: bytes | None = None,
    url: str = f"{BASE_URL}/movies",
) -> httpx.Response:
    """Build a real httpx.Response bound to a request so raise_for_status works."""
    request = httpx.Request("GET", url)
    if content is not None:
        return httpx.Response(status_code, content=content, request=request)
    return httpx.Response(status_code, json=json_body, request=request)


# ---------------------------------------------------------------------------
# Settings and filter state
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake backend, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        api_base_url=BASE_URL,
        request_timeout=2.5,
        enrichment_concurrency=4,
        default_country="dk",
        config_path=str(REPO_CONFIG),
    )


@pytest.fixture
def filter_defaults() -> FilterDefaults:
    """Defaults pinned to a fixed current year so assertions are stable."""
    return FilterDefaults(current_year=2026)


@pytest.fixture
def filter_state(filter_defaults: FilterDefaults) -> FilterState:
    return FilterState(filter_defaults)


# ---------------------------------------------------------------------------
# Catalog payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def catalog_rows() -> list[dict[str, Any]]:
    """Two movies as the catalog backend returns them."""
    return [
        {
            "tconst": "tt1",
            "primary_title": "A",
            "start_year": 1994,
            "runtime_minutes": 142,
            "genres": "Drama",
            "average_rating": 9.3,
            "num_votes": 2900000,
        },
        {
            "tconst": "tt2",
            "primary_title": "B",
            "start_year": 1972,
            "runtime_minutes": 175,
            "genres": "Crime,Drama",
            "average_rating": 9.2,
            "num_votes": 2000000,
        },
    ]


@pytest.fixture
def sample_movies(catalog_rows: list[dict[str, Any]]) -> list[Movie]:
    return [Movie.model_validate(row) for row in catalog_rows]


# ---------------------------------------------------------------------------
# Mock provider fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_catalog_provider(sample_movies: list[Movie]) -> ICatalogProvider:
    """Mock ICatalogProvider returning the two sample movies and a short genre list.

    Override with ``mock_catalog_provider.search_movies.side_effect = ...``
    for specific tests.
    """
    mock = MagicMock(spec=ICatalogProvider)
    mock.get_provider_name.return_value = "mock-catalog"
    mock.search_movies = AsyncMock(return_value=sample_movies)
    mock.fetch_genres = AsyncMock(return_value=["Drama", "Crime", "Sci-Fi"])
    return mock


@pytest.fixture
def mock_streaming_provider() -> IStreamingProvider:
    """Mock IStreamingProvider answering every title with one service."""
    mock = MagicMock(spec=IStreamingProvider)
    mock.get_provider_name.return_value = "mock-streaming"
    mock.lookup_services = AsyncMock(return_value=["Netflix"])
    return mock


@pytest.fixture
def mock_http_client() -> MagicMock:
    """Stand-in for httpx.AsyncClient; set ``get.return_value`` / ``side_effect``."""
    client = MagicMock(spec=httpx.AsyncClient)
    client.get = AsyncMock()
    client.aclose = AsyncMock()
    return client
