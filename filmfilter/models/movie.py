"""Result item returned by the catalog search.

Attribute names are the readable ones (``id``, ``title``, ``year`` …);
the catalog service speaks IMDb column names (``tconst``,
``primary_title``, ``start_year`` …), which are accepted as aliases on
input and used again on output.

``providers`` has three states:
    - not set       -> enrichment has not run (``is_enriched`` is False)
    - ``[]``/None   -> enrichment ran and found nothing
    - ``["X", …]``  -> streaming services offering the title
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """One catalog entry, optionally enriched with streaming providers."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="tconst")
    title: str = Field(default="", alias="primary_title")
    year: int | None = Field(default=None, alias="start_year")
    runtime_minutes: int | None = None
    genres: str | None = None
    rating: float | None = Field(default=None, alias="average_rating")
    popularity: int | None = Field(default=None, alias="num_votes")
    providers: list[str] | None = None

    @property
    def is_enriched(self) -> bool:
        """True once ``providers`` has been set, even to an empty list."""
        return "providers" in self.model_fields_set

    @property
    def genre_list(self) -> list[str]:
        if not self.genres:
            return []
        return [g.strip() for g in self.genres.split(",") if g.strip()]

    def with_providers(self, providers: Iterable[str] | None) -> Movie:
        """Return a copy carrying the enrichment result."""
        value = None if providers is None else list(providers)
        return self.model_copy(update={"providers": value})

    def to_wire(self) -> dict[str, Any]:
        """Dump with catalog field names; ``providers`` only once enriched."""
        data = self.model_dump(by_alias=True)
        if not self.is_enriched:
            data.pop("providers", None)
        return data
