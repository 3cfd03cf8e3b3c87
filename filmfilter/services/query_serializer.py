"""Filter state → catalog query parameters.

Pure functions, no I/O.  Rules:

- a key is omitted when its value is ``""`` or ``None``; ``0`` and
  ``False`` are real filter values and are always sent
- the genre set is sent once, comma-joined, under ``genres``
- booleans are sent as ``1`` / ``0``
- each range becomes two keys, ``<field>_min`` / ``<field>_max``
  (years use ``start_year`` / ``end_year``)
- integral floats are sent without a decimal point (``7.0`` → ``7``)

Parameters come out in the fixed order of ``_FIELDS`` so the same state
always serializes to the same bytes.
"""

from __future__ import annotations

from typing import Any, Callable, Union
from urllib.parse import urlencode

from filmfilter.models.filters import FilterSnapshot, FilterState

QueryParams = list[tuple[str, str]]

_FIELDS: tuple[tuple[str, Callable[[FilterSnapshot], Any]], ...] = (
    ("tconst", lambda f: f.id_filter),
    ("primary_title", lambda f: f.title_contains),
    ("genres", lambda f: ",".join(f.categories)),
    ("apply_all_genres", lambda f: f.require_all_categories),
    ("start_year", lambda f: f.year_range.min),
    ("end_year", lambda f: f.year_range.max),
    ("average_rating_min", lambda f: f.rating_range.min),
    ("average_rating_max", lambda f: f.rating_range.max),
    ("runtime_minutes_min", lambda f: f.runtime_range.min),
    ("runtime_minutes_max", lambda f: f.runtime_range.max),
    ("num_votes", lambda f: f.min_popularity),
    ("limit", lambda f: f.limit),
)


def format_param(value: Any) -> str | None:
    """Render one parameter value, or ``None`` when it must be omitted."""
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def build_query_params(filters: Union[FilterState, FilterSnapshot]) -> QueryParams:
    """Return the ordered ``(key, value)`` pairs for a catalog search."""
    snapshot = filters.snapshot() if isinstance(filters, FilterState) else filters
    params: QueryParams = []
    for key, getter in _FIELDS:
        rendered = format_param(getter(snapshot))
        if rendered is not None:
            params.append((key, rendered))
    return params


def build_query_string(filters: Union[FilterState, FilterSnapshot]) -> str:
    """Return ``?k=v&…`` for *filters*, or ``""`` if nothing is sent."""
    encoded = urlencode(build_query_params(filters))
    return f"?{encoded}" if encoded else ""
