"""
Tests for the catalog cache, using an in-memory stand-in for the Redis client.
"""

import fnmatch

import pytest
from httpx import AsyncClient

from app.services import cache_service


class FakeRedis:
    def __init__(self):
        self.store = {}
        self.ttls = {}

    async def get(self, key):
        return self.store.get(key)

    async def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl

    async def delete(self, key):
        self.store.pop(key, None)

    async def scan_iter(self, match="*", count=None):
        for key in list(self.store):
            if fnmatch.fnmatch(key, match):
                yield key

    async def info(self, section=None):
        return {"keyspace_hits": 3, "keyspace_misses": 1}


class BrokenRedis(FakeRedis):
    async def get(self, key):
        raise ConnectionError("redis went away")

    async def setex(self, key, ttl, value):
        raise ConnectionError("redis went away")


@pytest.fixture
def fake_redis(monkeypatch):
    fake = FakeRedis()

    async def _get_redis():
        return fake

    monkeypatch.setattr(cache_service, "get_redis", _get_redis)
    return fake


@pytest.mark.asyncio
async def test_ticket_types_served_from_cache(client: AsyncClient, auth_headers, create_ticket_type, fake_redis):
    await create_ticket_type()

    first = await client.get("/tickets/types", headers=auth_headers)
    assert len(first.json()) == 1
    assert cache_service.TICKET_TYPES_KEY in fake_redis.store
    assert fake_redis.ttls[cache_service.TICKET_TYPES_KEY] == cache_service.settings.REDIS_CACHE_TTL

    await create_ticket_type()
    second = await client.get("/tickets/types", headers=auth_headers)
    assert second.json() == first.json()


@pytest.mark.asyncio
async def test_invalidate_catalog_cache(client: AsyncClient, auth_headers, create_ticket_type, fake_redis):
    await create_ticket_type()
    await client.get("/tickets/types", headers=auth_headers)
    fake_redis.store["unrelated"] = "kept"

    assert await cache_service.invalidate_catalog_cache() == 1
    assert "unrelated" in fake_redis.store

    await create_ticket_type()
    response = await client.get("/tickets/types", headers=auth_headers)
    assert len(response.json()) == 2


@pytest.mark.asyncio
async def test_hotel_gating_runs_before_cache(
    client: AsyncClient, auth_headers, hotel_ticket, create_hotel, fake_redis, create_user, generate_token,
):
    """A warm hotel cache never lets an attendee without access through."""
    hotel = await create_hotel()
    warm = await client.get("/hotels", headers=auth_headers)
    assert [h["id"] for h in warm.json()] == [hotel.id]
    assert cache_service.HOTELS_KEY in fake_redis.store

    outsider = await create_user()
    token = await generate_token(outsider)
    response = await client.get("/hotels", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_cache_errors_fall_back_to_database(client: AsyncClient, auth_headers, create_ticket_type, monkeypatch):
    broken = BrokenRedis()

    async def _get_redis():
        return broken

    monkeypatch.setattr(cache_service, "get_redis", _get_redis)
    await create_ticket_type()

    response = await client.get("/tickets/types", headers=auth_headers)
    assert response.status_code == 200
    assert len(response.json()) == 1


@pytest.mark.asyncio
async def test_cache_disabled(client: AsyncClient):
    """With REDIS_ENABLED off every lookup is a miss and health reports it."""
    assert await cache_service.get_cached_catalog(cache_service.HOTELS_KEY) is None
    assert await cache_service.invalidate_catalog_cache() == 0

    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["cache"] == {"status": "disabled"}


@pytest.mark.asyncio
async def test_cache_stats(fake_redis):
    stats = await cache_service.get_cache_stats()
    assert stats["status"] == "connected"
    assert stats["hit_rate"] == 75.0


@pytest.mark.asyncio
async def test_event_served_from_cache(client: AsyncClient, create_event, fake_redis):
    event = await create_event()

    first = await client.get("/event")
    assert first.json()["id"] == event.id
    assert cache_service.EVENT_KEY in fake_redis.store

    await create_event()
    second = await client.get("/event")
    assert second.json() == first.json()


@pytest.mark.asyncio
async def test_missing_event_not_cached(client: AsyncClient, fake_redis):
    response = await client.get("/event")
    assert response.status_code == 404
    assert cache_service.EVENT_KEY not in fake_redis.store
