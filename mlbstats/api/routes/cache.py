"""Cache management API endpoints.

Provides endpoints for cache management:
- GET /cache/status - Backend, cached keys and last pre-warm run
- POST /cache/refresh - Trigger a pre-warm run in the background
- DELETE /cache/{key} - Drop one cached entry
- POST /cache/clear - Drop every cached entry
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends

from mlbstats.api.dependencies import get_cache, get_scheduler
from mlbstats.api.models import CacheActionResponse, CacheStatusResponse, SchedulerStatus
from mlbstats.cache import CacheBackend
from mlbstats.consumers import CacheWarmScheduler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cache")


@router.get("/status", response_model=CacheStatusResponse)
def get_cache_status(
    cache: CacheBackend = Depends(get_cache),
    scheduler: CacheWarmScheduler = Depends(get_scheduler),
) -> CacheStatusResponse:
    """Get cache statistics and status."""
    keys = sorted(cache.keys())
    return CacheStatusResponse(
        cache_type=cache.cache_type,
        connected=cache.ping(),
        keys=keys,
        key_count=len(keys),
        scheduler=SchedulerStatus(
            running=scheduler.is_running,
            interval_minutes=scheduler.interval_minutes,
            last_run=scheduler.last_run.isoformat() if scheduler.last_run else None,
            last_results=scheduler.last_results,
        ),
    )


@router.post("/refresh", response_model=CacheActionResponse)
def trigger_refresh(
    background_tasks: BackgroundTasks,
    scheduler: CacheWarmScheduler = Depends(get_scheduler),
) -> CacheActionResponse:
    """Re-fetch games, standings, teams and trends into the cache.

    This runs in the background. Check /cache/status for the results.
    """

    def run_refresh():
        results = scheduler.run_once()
        logger.info("[CACHE] Manual refresh completed at %s", results["completed_at"])

    background_tasks.add_task(run_refresh)

    return CacheActionResponse(status="started", message="Cache refresh started in background")


@router.delete("/{key:path}", response_model=CacheActionResponse)
def clear_key(key: str, cache: CacheBackend = Depends(get_cache)) -> CacheActionResponse:
    """Remove one cached entry (key without the 'cache:' prefix)."""
    cache.clear(key)
    logger.info("[CACHE] Cleared key %s", key)
    return CacheActionResponse(status="cleared", message=f"Cleared {key}")


@router.post("/clear", response_model=CacheActionResponse)
def clear_all(cache: CacheBackend = Depends(get_cache)) -> CacheActionResponse:
    """Remove every cached entry."""
    removed = cache.clear_all()
    logger.info("[CACHE] Cleared %d keys", removed)
    return CacheActionResponse(status="cleared", message=f"Cleared {removed} keys")
