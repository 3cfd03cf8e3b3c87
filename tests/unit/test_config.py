"""Unit tests for Settings and the YAML config loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from filmfilter.config.loader import _deep_merge, load_config
from filmfilter.config.settings import Settings
from filmfilter.models.filters import DEFAULT_LIMIT, DEFAULT_MIN_POPULARITY, DEFAULT_START_YEAR


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("API_BASE_URL", "REQUEST_TIMEOUT", "DEFAULT_COUNTRY"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.api_base_url == "http://localhost:8000"
        assert settings.request_timeout == 10.0
        assert settings.default_country == "dk"
        assert settings.enrichment_concurrency == 8

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_BASE_URL", "http://backend:9000")
        monkeypatch.setenv("REQUEST_TIMEOUT", "3")
        settings = Settings(_env_file=None)

        assert settings.api_base_url == "http://backend:9000"
        assert settings.request_timeout == 3.0

    @pytest.mark.parametrize(
        ("base", "path"),
        [
            ("http://api.test", "/movies"),
            ("http://api.test/", "/movies"),
            ("http://api.test/", "movies"),
        ],
    )
    def test_endpoint_join(self, base: str, path: str) -> None:
        settings = Settings(_env_file=None, api_base_url=base)
        assert settings.endpoint(path) == "http://api.test/movies"


class TestLoadConfig:
    def test_yaml_merged_with_settings(self, tmp_path: Path, settings: Settings) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "app:\n  name: filmfilter\n"
            "filters:\n  limit_options: [3, 5, 10]\n"
            "api:\n  base_url: http://ignored\n  extra: kept\n",
            encoding="utf-8",
        )

        config = load_config(str(config_file), settings=settings)

        assert config["app"]["name"] == "filmfilter"
        assert config["app"]["env"] == settings.app_env
        assert config["filters"]["limit_options"] == [3, 5, 10]
        assert config["api"]["base_url"] == "http://catalog.test"
        assert config["api"]["extra"] == "kept"
        assert config["streaming"]["enrichment_concurrency"] == 4

    def test_missing_file_uses_settings_only(self, tmp_path: Path, settings: Settings) -> None:
        config = load_config(str(tmp_path / "absent.yaml"), settings=settings)

        assert config["api"]["request_timeout"] == 2.5
        assert "filters" not in config

    def test_repository_config_loads(self, settings: Settings) -> None:
        path = Path(__file__).resolve().parents[2] / "config" / "config.yaml"
        config = load_config(str(path), settings=settings)
        assert config["filters"] == {
            "start_year": DEFAULT_START_YEAR,
            "min_popularity": DEFAULT_MIN_POPULARITY,
            "limit": DEFAULT_LIMIT,
        }


def test_deep_merge_replaces_non_dict_values() -> None:
    base = {"a": {"b": 1, "c": 2}, "d": [1]}
    _deep_merge(base, {"a": {"b": 9}, "d": [2, 3]})
    assert base == {"a": {"b": 9, "c": 2}, "d": [2, 3]}
