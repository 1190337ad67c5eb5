"""
Redis caching service for read-mostly catalogs.

CACHING STRATEGY
================

What we cache:
  - The ticket type list            key: "catalog:ticket_types"
  - The hotel list (without rooms)  key: "catalog:hotels"
  - The public event record         key: "catalog:event"

All are global records that nothing in this API writes; they change only
when an operator edits the catalog. Entries expire after REDIS_CACHE_TTL,
and invalidate_catalog_cache() drops them all for operator tooling.

What we never cache:
  - Anything user-specific (tickets, bookings, payments)
  - Hotel rooms: room availability is decided from live booking rows

Access gating for hotels always runs against the database before a cached
hotel list is returned.

Redis is advisory: if it is disabled or failing, every call degrades to a
miss and the caller reads the database.
"""

import json
from typing import Optional, Union

import redis.asyncio as redis
from app.core.config import get_settings
from app.core.logging import get_logger
from app.core.metrics import record_cache_operation

logger = get_logger(__name__)
settings = get_settings()

CATALOG_PREFIX = "catalog:"
TICKET_TYPES_KEY = CATALOG_PREFIX + "ticket_types"
HOTELS_KEY = CATALOG_PREFIX + "hotels"
EVENT_KEY = CATALOG_PREFIX + "event"

_redis_client: Optional[redis.Redis] = None


async def get_redis() -> Optional[redis.Redis]:
    """Get or create Redis connection. Returns None if Redis is disabled or down."""
    global _redis_client

    if not settings.REDIS_ENABLED:
        return None

    if _redis_client is None:
        try:
            _redis_client = redis.from_url(
                settings.REDIS_URL,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                retry_on_timeout=True,
            )
            await _redis_client.ping()
            logger.info("redis_connected", url=settings.REDIS_URL)
        except Exception as e:
            logger.error("redis_connection_failed", error=str(e))
            _redis_client = None
            return None

    return _redis_client


async def close_redis() -> None:
    global _redis_client
    if _redis_client:
        await _redis_client.aclose()
        _redis_client = None


async def get_cached_catalog(key: str) -> Optional[Union[list, dict]]:
    client = await get_redis()
    if not client:
        return None

    try:
        data = await client.get(key)
        if data:
            record_cache_operation("get", "hit")
            logger.debug("cache_hit", key=key)
            return json.loads(data)
        record_cache_operation("get", "miss")
        logger.debug("cache_miss", key=key)
    except Exception as e:
        record_cache_operation("get", "error")
        logger.error("cache_get_error", key=key, error=str(e))

    return None


async def set_cached_catalog(key: str, data: Union[list, dict]) -> None:
    client = await get_redis()
    if not client:
        return

    try:
        await client.setex(key, settings.REDIS_CACHE_TTL, json.dumps(data, default=str))
        record_cache_operation("set", "ok")
        logger.debug("cache_set", key=key, ttl=settings.REDIS_CACHE_TTL)
    except Exception as e:
        record_cache_operation("set", "error")
        logger.error("cache_set_error", key=key, error=str(e))


async def invalidate_catalog_cache() -> int:
    """Delete every catalog key. Returns how many keys were removed."""
    client = await get_redis()
    if not client:
        return 0

    deleted = 0
    try:
        async for key in client.scan_iter(match=CATALOG_PREFIX + "*", count=100):
            await client.delete(key)
            deleted += 1
        logger.info("cache_invalidated", keys_deleted=deleted)
    except Exception as e:
        logger.error("cache_invalidation_error", error=str(e))
    return deleted


async def get_cache_stats() -> dict:
    """Get Redis cache statistics for the health endpoint."""
    client = await get_redis()
    if not client:
        return {"status": "disabled"}

    try:
        info = await client.info("stats")
        hits = info.get("keyspace_hits", 0)
        misses = info.get("keyspace_misses", 0)
        return {
            "status": "connected",
            "hits": hits,
            "misses": misses,
            "hit_rate": round(hits / max(hits + misses, 1) * 100, 2),
        }
    except Exception as e:
        return {"status": "error", "error": str(e)}
