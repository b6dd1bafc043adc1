"""Tests for the TTL cache."""

from datetime import UTC, datetime, timedelta

from food_advisor.services.cache import InMemoryCache


class _Clock:
    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


def test_cache_returns_value_until_ttl_expires() -> None:
    clock = _Clock()
    cache = InMemoryCache(clock=clock)
    cache.set("recipedb:recipe:samosa", {"title": "Samosa"}, ttl_seconds=60)

    clock.advance(59)
    assert cache.get("recipedb:recipe:samosa") == {"title": "Samosa"}
    assert cache.has_fresh("recipedb:recipe:samosa")

    clock.advance(1)
    assert cache.get("recipedb:recipe:samosa") is None
    assert not cache.has_fresh("recipedb:recipe:samosa")


def test_cache_set_overwrites_entry_and_ttl() -> None:
    clock = _Clock()
    cache = InMemoryCache(clock=clock)
    cache.set("key", "old", ttl_seconds=10)
    clock.advance(5)
    cache.set("key", "new", ttl_seconds=10)
    clock.advance(8)

    assert cache.get("key") == "new"


def test_cache_clear() -> None:
    cache = InMemoryCache()
    cache.set("key", 1, ttl_seconds=60)

    cache.clear()

    assert cache.get("key") is None
