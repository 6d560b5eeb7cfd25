"""Cache layer: backends, keys and TTL policy."""

import logging

from mlbstats.cache.backends import (
    CacheBackend,
    FileCacheBackend,
    MemoryCacheBackend,
    RedisCacheBackend,
)
from mlbstats.config import Settings

logger = logging.getLogger(__name__)

__all__ = [
    "CacheBackend",
    "FileCacheBackend",
    "MemoryCacheBackend",
    "RedisCacheBackend",
    "create_cache_backend",
]


def create_cache_backend(settings: Settings) -> CacheBackend:
    """Pick the backend for the configured environment.

    Redis only for a configured non-local host; otherwise the in-memory or
    file fallback selected by CACHE_BACKEND.
    """
    if settings.use_redis:
        return RedisCacheBackend.from_settings(settings)

    if settings.cache_backend == "file":
        logger.info("[CACHE] No Redis configured, using file cache at %s", settings.cache_dir)
        return FileCacheBackend(settings.cache_dir)

    logger.info("[CACHE] No Redis configured, using in-memory cache")
    return MemoryCacheBackend()
