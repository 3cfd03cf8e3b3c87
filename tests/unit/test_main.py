"""Unit tests for build_panel wiring."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from filmfilter.config.settings import Settings
from filmfilter.main import build_panel
from filmfilter.models.outcome import SearchStatus
from filmfilter.services.category_options import GENRE_FALLBACK
from filmfilter.utils.errors import ConfigurationError
from tests.conftest import make_response


class TestBuildPanel:
    def test_components_share_one_client(self, settings: Settings, mock_http_client: MagicMock) -> None:
        panel = build_panel(settings, http_client=mock_http_client)

        assert panel.http_client is mock_http_client
        assert panel.owns_client is False
        assert panel.controller.country == "dk"
        assert panel.selector.vocabulary == GENRE_FALLBACK
        assert panel.cache.stats["size"] == 0

    def test_selector_drives_controller_categories(
        self, settings: Settings, mock_http_client: MagicMock
    ) -> None:
        panel = build_panel(settings, http_client=mock_http_client)

        panel.selector.toggle("Drama")
        panel.selector.toggle("Crime")
        panel.selector.toggle("Drama")

        assert panel.controller.filters.categories == ("Crime",)

    @pytest.mark.asyncio
    async def test_load_options_replaces_vocabulary(
        self, settings: Settings, mock_http_client: MagicMock
    ) -> None:
        mock_http_client.get.return_value = make_response(json_body=["Noir", "Drama"])
        panel = build_panel(settings, http_client=mock_http_client)

        assert await panel.load_options() is True
        assert panel.selector.vocabulary == ("Noir", "Drama")

    @pytest.mark.asyncio
    async def test_load_options_failure_keeps_fallback(
        self, settings: Settings, mock_http_client: MagicMock
    ) -> None:
        mock_http_client.get.return_value = make_response(503, json_body={})
        panel = build_panel(settings, http_client=mock_http_client)

        assert await panel.load_options() is False
        assert panel.selector.vocabulary == GENRE_FALLBACK

    @pytest.mark.asyncio
    async def test_reset_clears_selector_and_outcome(
        self, settings: Settings, mock_http_client: MagicMock
    ) -> None:
        panel = build_panel(settings, http_client=mock_http_client)
        panel.selector.toggle("Drama")
        panel.controller.set_title_contains("heat")

        await panel.reset()

        assert panel.selector.selected == ()
        assert panel.controller.filters.categories == ()
        assert panel.controller.filters.title_contains == ""
        assert panel.controller.outcome.status is SearchStatus.IDLE

    @pytest.mark.asyncio
    async def test_aclose_leaves_injected_client_open(
        self, settings: Settings, mock_http_client: MagicMock
    ) -> None:
        panel = build_panel(settings, http_client=mock_http_client)
        await panel.aclose()

        assert panel.options.closed is True
        mock_http_client.aclose.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_aclose_closes_owned_client(self, settings: Settings) -> None:
        with patch("filmfilter.main.httpx.AsyncClient") as client_cls:
            client_cls.return_value.aclose = AsyncMock()
            panel = build_panel(settings)
            await panel.aclose()

        assert panel.owns_client is True
        client_cls.return_value.aclose.assert_awaited_once()


class TestSettingsChecks:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"api_base_url": "catalog.test"},
            {"request_timeout": 0},
            {"enrichment_concurrency": -1},
            {"default_country": "jp"},
        ],
    )
    def test_unusable_settings_raise(
        self, settings: Settings, mock_http_client: MagicMock, overrides: dict
    ) -> None:
        with pytest.raises(ConfigurationError):
            build_panel(settings.model_copy(update=overrides), http_client=mock_http_client)

    def test_zero_concurrency_means_unbounded(
        self, settings: Settings, mock_http_client: MagicMock
    ) -> None:
        panel = build_panel(
            settings.model_copy(update={"enrichment_concurrency": 0}), http_client=mock_http_client
        )
        assert panel.controller.country == "dk"


class TestPanelConfig:
    def _write(self, tmp_path: Path, text: str) -> str:
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    @pytest.mark.asyncio
    async def test_filters_section_sets_panel_defaults(
        self, settings: Settings, mock_http_client: MagicMock, tmp_path: Path
    ) -> None:
        config_path = self._write(
            tmp_path, "filters:\n  start_year: 2000\n  min_popularity: 5000\n  limit: 10\n"
        )
        panel = build_panel(
            settings.model_copy(update={"config_path": config_path}), http_client=mock_http_client
        )

        filters = panel.controller.filters
        assert filters.year_range.min == 2000
        assert filters.min_popularity == 5000
        assert filters.limit == 10

        panel.controller.set_limit(3)
        await panel.reset()
        assert panel.controller.filters.limit == 10

    def test_missing_file_uses_built_in_defaults(
        self, settings: Settings, mock_http_client: MagicMock, tmp_path: Path
    ) -> None:
        panel = build_panel(
            settings.model_copy(update={"config_path": str(tmp_path / "absent.yaml")}),
            http_client=mock_http_client,
        )
        assert panel.controller.filters.limit == 5
        assert panel.controller.filters.year_range.min == 1985

    @pytest.mark.parametrize(
        "text",
        [
            "filters:\n  limit: 0\n",
            "filters:\n  max_results: 5\n",
            "filters: [1, 2]\n",
            "filters: {limit: [\n",
        ],
    )
    def test_unusable_filters_section_raises(
        self, settings: Settings, mock_http_client: MagicMock, tmp_path: Path, text: str
    ) -> None:
        config_path = self._write(tmp_path, text)
        with pytest.raises(ConfigurationError):
            build_panel(
                settings.model_copy(update={"config_path": config_path}),
                http_client=mock_http_client,
            )
