"""Search outcome -- the single visible result of the latest submission.

Exactly one of four states is current at a time:

    IDLE → LOADING → (RESULTS | ERROR) → LOADING → …

Outcomes are frozen; the controller publishes a new instance on every
transition instead of mutating the old one.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from filmfilter.models.movie import Movie


class SearchStatus(str, Enum):  # noqa: UP042
    """States of the search state machine."""

    IDLE = "IDLE"          # Nothing submitted yet, or reset
    LOADING = "LOADING"    # A submission is in flight
    ERROR = "ERROR"        # The primary catalog request failed
    RESULTS = "RESULTS"    # Merged, enriched results are available


class SearchOutcome(BaseModel):
    """Immutable snapshot of the current search outcome.

    ``generation`` records which submission produced the outcome
    (0 for the initial idle state).
    """

    model_config = ConfigDict(frozen=True)

    status: SearchStatus = SearchStatus.IDLE
    error: str | None = None
    results: tuple[Movie, ...] = ()
    generation: int = 0

    @classmethod
    def idle(cls, generation: int = 0) -> SearchOutcome:
        return cls(status=SearchStatus.IDLE, generation=generation)

    @classmethod
    def loading(cls, generation: int) -> SearchOutcome:
        return cls(status=SearchStatus.LOADING, generation=generation)

    @classmethod
    def failed(cls, message: str, generation: int = 0) -> SearchOutcome:
        return cls(status=SearchStatus.ERROR, error=message, generation=generation)

    @classmethod
    def succeeded(cls, results: Iterable[Movie], generation: int = 0) -> SearchOutcome:
        return cls(status=SearchStatus.RESULTS, results=tuple(results), generation=generation)

    @property
    def is_loading(self) -> bool:
        return self.status is SearchStatus.LOADING
