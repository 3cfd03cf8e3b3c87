"""Filter state for the catalog search panel.

Two layers:

- :class:`RangeState` keeps one ``[min, max]`` pair inside fixed bounds.
  Slider drags can report values outside the bounds or past the other
  thumb; those are clamped, never rejected, so the pair is always valid.
- :class:`FilterState` aggregates every filter field.  It is mutated only
  through its named ``set_*`` operations and can be frozen into a
  :class:`FilterSnapshot` for serialization and logging.

Invariant maintained by RangeState after every call:
    lower_bound <= min <= max <= upper_bound
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Union

from pydantic import BaseModel, ConfigDict, Field

from filmfilter.utils.errors import InvalidFilterError

Number = Union[int, float]

# ---------------------------------------------------------------------------
# Defaults of the catalog page.
# ---------------------------------------------------------------------------
YEAR_FLOOR = 1900
DEFAULT_START_YEAR = 1985
RUNTIME_BOUNDS: tuple[int, int] = (30, 300)
DEFAULT_RUNTIME: tuple[int, int] = (60, 180)
RATING_BOUNDS: tuple[int, int] = (0, 10)
DEFAULT_RATING: tuple[int, int] = (7, 10)
MAX_POPULARITY = 500_000
POPULARITY_STEP = 5_000
DEFAULT_MIN_POPULARITY = 100_000
LIMIT_OPTIONS: tuple[int, ...] = (3, 5, 10, 15, 20)
DEFAULT_LIMIT = 5


def clamp(value: Number, low: Number, high: Number) -> Number:
    """Return *value* limited to ``[low, high]``."""
    return min(high, max(low, value))


class RangeState:
    """One clamped ``[min, max]`` pair against immutable global bounds.

    Parameters
    ----------
    initial:
        The ``(min, max)`` pair restored by :meth:`reset`.  It is clamped
        into *bounds* once, at construction.
    bounds:
        ``(lower_bound, upper_bound)``; must satisfy ``lower <= upper``.
    """

    def __init__(self, initial: tuple[Number, Number], bounds: tuple[Number, Number]) -> None:
        lower, upper = bounds
        if lower > upper:
            raise InvalidFilterError(f"Range bounds are inverted: {lower} > {upper}")
        self._lower = lower
        self._upper = upper

        start = clamp(initial[0], lower, upper)
        end = clamp(initial[1], start, upper)
        self._initial: tuple[Number, Number] = (start, end)
        self._min, self._max = self._initial

    @property
    def min(self) -> Number:
        return self._min

    @property
    def max(self) -> Number:
        return self._max

    @property
    def lower_bound(self) -> Number:
        return self._lower

    @property
    def upper_bound(self) -> Number:
        return self._upper

    @property
    def initial(self) -> tuple[Number, Number]:
        return self._initial

    def set_min(self, value: Number) -> None:
        """Move the lower thumb; it never passes the current max."""
        self._min = clamp(value, self._lower, min(self._max, self._upper))

    def set_max(self, value: Number) -> None:
        """Move the upper thumb; it never passes the current min."""
        self._max = clamp(value, max(self._min, self._lower), self._upper)

    def set_range(self, low: Number, high: Number) -> None:
        """Apply a dual-slider change: lower thumb first, then upper."""
        self.set_min(low)
        self.set_max(high)

    def reset(self) -> None:
        """Restore the construction pair regardless of current values."""
        self._min, self._max = self._initial

    def as_tuple(self) -> tuple[Number, Number]:
        return (self._min, self._max)

    def __repr__(self) -> str:
        return (
            f"RangeState(min={self._min!r}, max={self._max!r}, "
            f"bounds=({self._lower!r}, {self._upper!r}))"
        )


# ---------------------------------------------------------------------------
# Immutable value structs.
# ---------------------------------------------------------------------------
class RangeSnapshot(BaseModel):
    """Frozen ``(min, max)`` pair taken from a :class:`RangeState`."""

    model_config = ConfigDict(frozen=True)

    min: Number
    max: Number


class FilterSnapshot(BaseModel):
    """Frozen copy of every filter field at one point in time.

    This is what the query serializer consumes, so a submission works on
    the values the user had when they pressed search, not on later edits.
    """

    model_config = ConfigDict(frozen=True)

    id_filter: str = ""
    title_contains: str = ""
    categories: tuple[str, ...] = ()
    require_all_categories: bool = False
    year_range: RangeSnapshot
    runtime_range: RangeSnapshot
    rating_range: RangeSnapshot
    min_popularity: int = DEFAULT_MIN_POPULARITY
    limit: int = DEFAULT_LIMIT


class FilterDefaults(BaseModel):
    """The values :meth:`FilterState.reset` restores."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id_filter: str = ""
    title_contains: str = ""
    categories: tuple[str, ...] = ()
    require_all_categories: bool = False
    start_year: int = DEFAULT_START_YEAR
    min_popularity: int = DEFAULT_MIN_POPULARITY
    limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    current_year: int = Field(default_factory=lambda: date.today().year)


def _unique(categories: Iterable[str]) -> tuple[str, ...]:
    """Drop blanks and duplicates, keeping first-seen order."""
    seen: dict[str, None] = {}
    for category in categories:
        if category and category not in seen:
            seen[category] = None
    return tuple(seen)


def _clamp_votes(value: Number) -> int:
    """Round to a whole vote count inside ``[0, MAX_POPULARITY]``."""
    return int(clamp(round(value), 0, MAX_POPULARITY))


def _validate_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidFilterError(f"limit must be a positive integer, got {limit!r}")
    return limit


# ---------------------------------------------------------------------------
# FilterState -- the mutable aggregate.
# ---------------------------------------------------------------------------
class FilterState:
    """All search filters, edited through named operations.

    The three ranges are exposed as :class:`RangeState` objects so slider
    handlers can call ``set_min`` / ``set_max`` on them directly; every
    other field has a ``set_*`` method.
    """

    def __init__(self, defaults: FilterDefaults | None = None) -> None:
        self._defaults = defaults or FilterDefaults()
        self._apply_defaults()

    def _apply_defaults(self) -> None:
        d = self._defaults
        # Built completely before assignment so a reset never leaves a
        # mixture of old and new fields behind.
        year_range = RangeState((d.start_year, d.current_year), (YEAR_FLOOR, d.current_year))
        runtime_range = RangeState(DEFAULT_RUNTIME, RUNTIME_BOUNDS)
        rating_range = RangeState(DEFAULT_RATING, RATING_BOUNDS)
        fields = {
            "_id_filter": d.id_filter,
            "_title_contains": d.title_contains,
            "_categories": _unique(d.categories),
            "_require_all_categories": d.require_all_categories,
            "_year_range": year_range,
            "_runtime_range": runtime_range,
            "_rating_range": rating_range,
            "_min_popularity": _clamp_votes(d.min_popularity),
            "_limit": _validate_limit(d.limit),
        }
        self.__dict__.update(fields)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def defaults(self) -> FilterDefaults:
        return self._defaults

    @property
    def id_filter(self) -> str:
        return self._id_filter

    @property
    def title_contains(self) -> str:
        return self._title_contains

    @property
    def categories(self) -> tuple[str, ...]:
        return self._categories

    @property
    def require_all_categories(self) -> bool:
        return self._require_all_categories

    @property
    def year_range(self) -> RangeState:
        return self._year_range

    @property
    def runtime_range(self) -> RangeState:
        return self._runtime_range

    @property
    def rating_range(self) -> RangeState:
        return self._rating_range

    @property
    def min_popularity(self) -> int:
        return self._min_popularity

    @property
    def limit(self) -> int:
        return self._limit

    # ------------------------------------------------------------------
    # Named mutations
    # ------------------------------------------------------------------

    def set_id_filter(self, value: str) -> None:
        self._id_filter = value.strip()

    def set_title_contains(self, value: str) -> None:
        self._title_contains = value

    def set_categories(self, categories: Iterable[str]) -> None:
        self._categories = _unique(categories)

    def set_require_all_categories(self, value: bool) -> None:
        self._require_all_categories = bool(value)

    def toggle_require_all_categories(self) -> None:
        self._require_all_categories = not self._require_all_categories

    def set_min_popularity(self, value: Number) -> None:
        """Set the minimum vote count, rounded and clamped to ``[0, MAX_POPULARITY]``."""
        self._min_popularity = _clamp_votes(value)

    def set_limit(self, value: int) -> None:
        """Set the result limit.

        Raises
        ------
        InvalidFilterError
            If *value* is not a positive integer.
        """
        self._limit = _validate_limit(value)

    def reset(self) -> None:
        """Restore every field to its default in one step."""
        self._apply_defaults()

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> FilterSnapshot:
        return FilterSnapshot(
            id_filter=self._id_filter,
            title_contains=self._title_contains,
            categories=self._categories,
            require_all_categories=self._require_all_categories,
            year_range=RangeSnapshot(min=self._year_range.min, max=self._year_range.max),
            runtime_range=RangeSnapshot(
                min=self._runtime_range.min, max=self._runtime_range.max
            ),
            rating_range=RangeSnapshot(min=self._rating_range.min, max=self._rating_range.max),
            min_popularity=self._min_popularity,
            limit=self._limit,
        )

    def __repr__(self) -> str:
        return f"FilterState({self.snapshot()!r})"
