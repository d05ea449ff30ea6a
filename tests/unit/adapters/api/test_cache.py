"""
Tests unitaires pour APICache.

Ces tests verifient:
- Stockage et recuperation des recherches
- Cle canonique (parametres tries)
- TTL configurable des recherches
- Persistance entre deux instances sur le meme repertoire
- Nettoyage du cache
"""

import time
from pathlib import Path

import pytest

from reelscan.adapters.api.cache import APICache


class TestSearchKey:
    def test_parameters_are_sorted(self) -> None:
        key = APICache.search_key(
            "tmdb", "/search/movie", {"query": "Inception", "page": 1, "language": "en-US"}
        )

        assert key == "tmdb:search/movie:language=en-US&page=1&query=Inception"

    def test_same_search_same_key(self) -> None:
        first = APICache.search_key("tmdb", "search/tv", {"a": 1, "b": 2})
        second = APICache.search_key("tmdb", "/search/tv/", {"b": 2, "a": 1})

        assert first == second


class TestAPICache:
    """Tests pour la classe APICache."""

    @pytest.fixture
    def cache(self, tmp_path: Path) -> APICache:
        """Cree un cache dans un repertoire temporaire."""
        cache = APICache(cache_dir=tmp_path / "api")
        yield cache
        cache.close()

    @pytest.mark.asyncio
    async def test_get_returns_none_for_missing_key(self, cache: APICache) -> None:
        assert await cache.get("tmdb:search/movie:query=absent") is None

    @pytest.mark.asyncio
    async def test_set_search_then_get(self, cache: APICache) -> None:
        key = "tmdb:search/movie:language=en-US&query=Inception"
        results = [{"id": 27205, "title": "Inception"}]

        await cache.set_search(key, results)

        assert await cache.get(key) == results
        assert len(cache) == 1

    def test_default_search_ttl_is_24_hours(self) -> None:
        assert APICache.SEARCH_TTL == 86400

    @pytest.mark.asyncio
    async def test_configured_ttl_expires_entries(self, tmp_path: Path) -> None:
        cache = APICache(cache_dir=tmp_path / "api", search_ttl=0)
        try:
            await cache.set_search("tmdb:search/tv:query=gone", [{"id": 1}])
            time.sleep(0.01)

            assert await cache.get("tmdb:search/tv:query=gone") is None
        finally:
            cache.close()

    @pytest.mark.asyncio
    async def test_empty_result_list_is_cached(self, cache: APICache) -> None:
        """Une recherche sans resultat est mise en cache (liste vide, pas None)."""
        await cache.set_search("tmdb:search/tv:query=nothing", [])

        assert await cache.get("tmdb:search/tv:query=nothing") == []

    @pytest.mark.asyncio
    async def test_values_survive_reopening(self, tmp_path: Path) -> None:
        first = APICache(cache_dir=tmp_path / "api")
        await first.set("key", {"id": 1}, ttl=3600)
        first.close()

        second = APICache(cache_dir=tmp_path / "api")
        try:
            assert await second.get("key") == {"id": 1}
        finally:
            second.close()

    @pytest.mark.asyncio
    async def test_clear_removes_all_entries(self, cache: APICache) -> None:
        await cache.set("key1", "value1", ttl=3600)
        await cache.set("key2", "value2", ttl=3600)

        assert await cache.clear() == 2

        assert await cache.get("key1") is None
        assert len(cache) == 0
