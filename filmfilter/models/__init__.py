"""filmfilter domain models -- re-exports all public model classes.

    - filters.py -- RangeState, FilterState and their frozen snapshots
    - movie.py   -- the catalog result item
    - outcome.py -- the search state machine's visible outcome
    - countries.py -- countries supported for streaming lookups
"""

from __future__ import annotations

from filmfilter.models.filters import (
    LIMIT_OPTIONS,
    FilterDefaults,
    FilterSnapshot,
    FilterState,
    RangeSnapshot,
    RangeState,
)
from filmfilter.models.countries import (
    STREAMING_COUNTRIES,
    StreamingCountry,
    get_streaming_path,
    is_supported_country,
)
from filmfilter.models.movie import Movie
from filmfilter.models.outcome import SearchOutcome, SearchStatus

__all__ = [
    "LIMIT_OPTIONS",
    "STREAMING_COUNTRIES",
    "FilterDefaults",
    "FilterSnapshot",
    "FilterState",
    "Movie",
    "RangeSnapshot",
    "RangeState",
    "SearchOutcome",
    "SearchStatus",
    "StreamingCountry",
    "get_streaming_path",
    "is_supported_country",
]
