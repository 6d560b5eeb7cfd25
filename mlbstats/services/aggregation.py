"""Cache-aside orchestration shared by every endpoint.

    cache lookup -> hit: return cached payload
                 -> miss: run fetcher ladder -> populate cache -> return

Cached payloads are the serialized JSON the route returns, so a hit is
served verbatim. Mock data is cached for TTL_FALLBACK minutes only and never
replaces an existing entry.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from mlbstats.cache import CacheBackend
from mlbstats.cache.policy import TTL_FALLBACK
from mlbstats.core import DataTier, FetchResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_or_fetch(
    cache: CacheBackend,
    key: str,
    ttl_minutes: int,
    fetch: Callable[[], FetchResult[T]],
    serialize: Callable[[T], Any],
) -> FetchResult[Any]:
    """Return the cached payload for key, or fetch, serialize and cache it.

    Args:
        cache: Cache backend
        key: Deterministic cache key
        ttl_minutes: TTL applied when populating
        fetch: Fallback ladder for the category; must always return data
        serialize: Converts fetched data to the JSON payload

    Returns:
        FetchResult whose data is the JSON payload and whose tier records
        where it came from (cache, live, scraped or mock)
    """
    cached = cache.get(key)
    if cached is not None:
        logger.debug("[CACHE] Hit for %s", key)
        return FetchResult.success(cached, DataTier.CACHE)

    logger.debug("[CACHE] Miss for %s", key)
    return refresh_cached(cache, key, ttl_minutes, fetch, serialize)


def refresh_cached(
    cache: CacheBackend,
    key: str,
    ttl_minutes: int,
    fetch: Callable[[], FetchResult[T]],
    serialize: Callable[[T], Any],
) -> FetchResult[Any]:
    """Fetch unconditionally and overwrite the cache entry (used for pre-warm).

    Mock data only fills an empty slot, with a TTL of at most TTL_FALLBACK.
    """
    result = fetch()
    payload = serialize(result.data)

    if result.tier == DataTier.MOCK:
        if cache.get(key) is not None:
            logger.info("[CACHE] Keeping cached %s over mock data", key)
            return FetchResult(data=payload, tier=result.tier, errors=list(result.errors))
        ttl_minutes = min(ttl_minutes, TTL_FALLBACK)

    cache.set(key, payload, ttl_minutes)
    logger.debug("[CACHE] Stored %s (%s) for %d min", key, result.tier.value, ttl_minutes)

    return FetchResult(data=payload, tier=result.tier, errors=list(result.errors))
