"""Countries supported for streaming-availability lookups.

Each country has a slug sent as the ``country`` query parameter and the
path segment the streaming guide uses for film pages in that market.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StreamingCountry:
    slug: str
    label: str
    path: str  # "movie" or "film"


STREAMING_COUNTRIES: tuple[StreamingCountry, ...] = (
    StreamingCountry("dk", "Denmark", "movie"),
    StreamingCountry("uk", "United Kingdom", "movie"),
    StreamingCountry("us", "United States", "movie"),
    StreamingCountry("se", "Sweden", "movie"),
    StreamingCountry("no", "Norway", "movie"),
    StreamingCountry("fr", "France", "film"),
)

_BY_SLUG = {c.slug: c for c in STREAMING_COUNTRIES}


def find_country(country: str) -> StreamingCountry | None:
    return _BY_SLUG.get(country.strip().lower())


def is_supported_country(country: str) -> bool:
    return find_country(country) is not None


def get_streaming_path(country: str) -> str:
    """Return the film path segment for *country*, ``"movie"`` when unknown."""
    match = find_country(country)
    return match.path if match else "movie"
