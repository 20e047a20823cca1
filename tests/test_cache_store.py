"""
Tests for the response cache backends.
"""

import json
from unittest.mock import MagicMock

import redis

from movie_gateway.protocols import CacheStore
from movie_gateway.repositories import InMemoryCacheRepository, RedisCacheRepository

TTL = 86400
EPSILON = 0.001


def test_memory_repository_satisfies_protocol(cache):
    assert isinstance(cache, CacheStore)


def test_get_missing_key_returns_none(cache):
    assert cache.get("nope") is None
    assert cache.has("nope") is False


def test_entry_present_just_before_ttl(cache, clock):
    cache.set("genres", [{"id": 28, "name": "Action"}])
    clock.advance(TTL - EPSILON)

    assert cache.has("genres")
    assert cache.get("genres") == [{"id": 28, "name": "Action"}]


def test_entry_absent_just_after_ttl(cache, clock):
    cache.set("genres", [{"id": 28}])
    clock.advance(TTL + EPSILON)

    assert cache.get("genres") is None
    assert cache.has("genres") is False


def test_entry_absent_exactly_at_ttl(cache, clock):
    cache.set("k", {"a": 1})
    clock.advance(TTL)

    assert cache.get("k") is None


def test_set_overwrites_and_resets_ttl(cache, clock):
    cache.set("k", {"v": 1})
    clock.advance(TTL - 10)
    cache.set("k", {"v": 2})
    clock.advance(20)

    assert cache.get("k") == {"v": 2}


def test_falsy_values_are_hits(cache):
    cache.set("empty", [])

    assert cache.has("empty")
    assert cache.get("empty") == []


def test_null_value_is_stored(cache):
    cache.set("nothing", None)

    assert cache.has("nothing")
    assert cache.delete("nothing") is True
    assert cache.has("nothing") is False


def test_count_ignores_expired_entries(cache, clock):
    cache.set("old", 1)
    clock.advance(TTL / 2)
    cache.set("new", 2)
    clock.advance(TTL / 2 + 1)

    assert cache.count() == 1


def test_delete_and_clear(cache):
    cache.set("a", 1)
    cache.set("b", 2)

    assert cache.delete("a") is True
    assert cache.delete("a") is False
    assert cache.clear() == 1
    assert cache.count() == 0


def test_memory_stats(cache):
    cache.set("a", 1)
    stats = cache.get_stats()

    assert stats == {"backend": "memory", "total_entries": 1, "ttl": TTL}


def test_memory_ttl_defaults_from_settings():
    from movie_gateway.config import settings

    assert InMemoryCacheRepository.create().ttl == settings.cache_ttl


def test_redis_set_uses_native_expiry():
    client = MagicMock()
    repo = RedisCacheRepository(redis_client=client, ttl=TTL)

    repo.set("movie_550", {"id": 550, "title": "Fight Club"})

    client.set.assert_called_once_with(
        "movie_gateway:movie_550",
        json.dumps({"id": 550, "title": "Fight Club"}),
        ex=TTL,
    )


def test_redis_get_decodes_json():
    client = MagicMock()
    client.get.return_value = json.dumps({"results": []})
    repo = RedisCacheRepository(redis_client=client, ttl=TTL)

    assert repo.get("discover_{}") == {"results": []}
    client.get.assert_called_once_with("movie_gateway:discover_{}")


def test_redis_get_missing_returns_none():
    client = MagicMock()
    client.get.return_value = None
    repo = RedisCacheRepository(redis_client=client, ttl=TTL)

    assert repo.get("genres") is None


def test_redis_clear_only_touches_prefix():
    client = MagicMock()
    client.scan_iter.return_value = iter(["movie_gateway:a", "movie_gateway:b"])
    client.delete.return_value = 2
    repo = RedisCacheRepository(redis_client=client, ttl=TTL)

    assert repo.clear() == 2
    client.scan_iter.assert_called_once_with(match="movie_gateway:*")
    client.delete.assert_called_once_with("movie_gateway:a", "movie_gateway:b")


def test_redis_health_check_handles_connection_error():
    client = MagicMock()
    client.ping.side_effect = redis.ConnectionError("refused")
    repo = RedisCacheRepository(redis_client=client, ttl=TTL)

    assert repo.health_check() is False
