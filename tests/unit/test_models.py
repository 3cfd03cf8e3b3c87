"""Unit tests for the Movie, SearchOutcome and streaming-country models."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from filmfilter.models.countries import (
    STREAMING_COUNTRIES,
    find_country,
    get_streaming_path,
    is_supported_country,
)
from filmfilter.models.movie import Movie
from filmfilter.models.outcome import SearchOutcome, SearchStatus


class TestMovie:
    def test_accepts_catalog_field_names(self, catalog_rows: list[dict[str, Any]]) -> None:
        movie = Movie.model_validate(catalog_rows[0])
        assert movie.id == "tt1"
        assert movie.title == "A"
        assert movie.year == 1994
        assert movie.runtime_minutes == 142
        assert movie.rating == 9.3
        assert movie.popularity == 2900000

    def test_accepts_attribute_names(self) -> None:
        movie = Movie(id="tt9", title="Z", year=None)
        assert movie.id == "tt9"
        assert movie.year is None

    def test_missing_identifier_is_invalid(self) -> None:
        with pytest.raises(ValidationError):
            Movie.model_validate({"primary_title": "No id"})

    def test_nullable_columns(self) -> None:
        movie = Movie.model_validate(
            {"tconst": "tt3", "primary_title": "C", "start_year": None, "genres": None}
        )
        assert movie.year is None
        assert movie.genre_list == []

    def test_genre_list(self, sample_movies: list[Movie]) -> None:
        assert sample_movies[1].genre_list == ["Crime", "Drama"]

    def test_not_enriched_until_providers_set(self, sample_movies: list[Movie]) -> None:
        movie = sample_movies[0]
        assert movie.is_enriched is False
        assert movie.providers is None

    def test_empty_providers_counts_as_enriched(self, sample_movies: list[Movie]) -> None:
        enriched = sample_movies[0].with_providers([])
        assert enriched.is_enriched is True
        assert enriched.providers == []
        assert sample_movies[0].is_enriched is False

    def test_to_wire_omits_providers_until_enriched(self, sample_movies: list[Movie]) -> None:
        wire = sample_movies[0].to_wire()
        assert wire["tconst"] == "tt1"
        assert wire["primary_title"] == "A"
        assert "providers" not in wire

        enriched = sample_movies[0].with_providers(["Netflix"]).to_wire()
        assert enriched["providers"] == ["Netflix"]

    def test_frozen(self, sample_movies: list[Movie]) -> None:
        with pytest.raises(ValidationError):
            sample_movies[0].title = "Other"  # type: ignore[misc]


class TestSearchOutcome:
    def test_idle_default(self) -> None:
        outcome = SearchOutcome()
        assert outcome.status is SearchStatus.IDLE
        assert outcome.error is None
        assert outcome.results == ()

    def test_constructors(self, sample_movies: list[Movie]) -> None:
        assert SearchOutcome.loading(3).is_loading
        failed = SearchOutcome.failed("HTTP 500", 4)
        assert failed.status is SearchStatus.ERROR
        assert failed.error == "HTTP 500"
        assert failed.results == ()
        done = SearchOutcome.succeeded(sample_movies, 5)
        assert done.status is SearchStatus.RESULTS
        assert [m.id for m in done.results] == ["tt1", "tt2"]
        assert done.generation == 5

    def test_status_serializes_as_string(self) -> None:
        assert SearchOutcome.loading(1).model_dump(mode="json")["status"] == "LOADING"


class TestStreamingCountries:
    def test_six_countries(self) -> None:
        assert [c.slug for c in STREAMING_COUNTRIES] == ["dk", "uk", "us", "se", "no", "fr"]

    def test_path_lookup_is_case_insensitive(self) -> None:
        assert get_streaming_path("FR") == "film"
        assert get_streaming_path("dk") == "movie"

    def test_unknown_country_defaults_to_movie(self) -> None:
        assert get_streaming_path("jp") == "movie"
        assert is_supported_country("jp") is False

    def test_find_country(self) -> None:
        country = find_country(" UK ")
        assert country is not None
        assert country.label == "United Kingdom"
