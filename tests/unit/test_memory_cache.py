"""Unit tests for MemoryCacheProvider."""

from __future__ import annotations

import pytest

from filmfilter.providers.cache.memory_cache import MemoryCacheProvider


class TestMemoryCacheProvider:
    @pytest.fixture()
    def cache(self) -> MemoryCacheProvider:
        return MemoryCacheProvider(max_size=2, ttl=3600)

    @pytest.mark.asyncio
    async def test_get_missing_key_returns_none(self, cache: MemoryCacheProvider) -> None:
        assert await cache.get("streaming:dk:heat") is None

    @pytest.mark.asyncio
    async def test_set_get_and_overwrite(self, cache: MemoryCacheProvider) -> None:
        await cache.set("streaming:dk:heat", ["Netflix"])
        await cache.set("streaming:dk:heat", ["Max"])
        assert await cache.get("streaming:dk:heat") == ["Max"]

    @pytest.mark.asyncio
    async def test_empty_list_is_a_hit(self, cache: MemoryCacheProvider) -> None:
        await cache.set("streaming:dk:heat", [])
        assert await cache.get("streaming:dk:heat") == []
        assert cache.stats["hits"] == 1

    @pytest.mark.asyncio
    async def test_delete_and_exists(self, cache: MemoryCacheProvider) -> None:
        await cache.set("k", ["v"])
        assert await cache.exists("k") is True
        await cache.delete("k")
        await cache.delete("k")
        assert await cache.exists("k") is False

    @pytest.mark.asyncio
    async def test_max_size_evicts(self, cache: MemoryCacheProvider) -> None:
        for key in ("a", "b", "c"):
            await cache.set(key, [key])
        assert cache.stats["size"] == 2

    @pytest.mark.asyncio
    async def test_stats_and_clear(self, cache: MemoryCacheProvider) -> None:
        await cache.set("k", ["v"])
        await cache.get("k")
        await cache.get("missing")

        assert cache.stats == {"hits": 1, "misses": 1, "size": 1}
        cache.clear()
        assert cache.stats["size"] == 0
