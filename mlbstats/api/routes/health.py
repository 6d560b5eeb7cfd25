"""Health check endpoints.

- GET /health - Service status with cache backend details
- GET /health/redis - Cache backend connectivity only (503 when down)
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from mlbstats.api.dependencies import get_cache, get_settings
from mlbstats.api.models import CacheHealth, HealthResponse, RedisConfig, RedisHealthResponse
from mlbstats.cache import CacheBackend
from mlbstats.config import Settings
from mlbstats.utilities.tz import now_utc

router = APIRouter(prefix="/health")


@router.get("", response_model=HealthResponse)
def health(
    settings: Settings = Depends(get_settings),
    cache: CacheBackend = Depends(get_cache),
) -> HealthResponse:
    """Service status. Always 200 while the process is up."""
    connected = cache.ping()
    return HealthResponse(
        timestamp=now_utc().isoformat(),
        environment=settings.environment,
        redis=CacheHealth(
            status="connected" if connected else "disconnected",
            cache_type=cache.cache_type,
            configured=settings.use_redis,
            config=RedisConfig(
                host=settings.redis_host or "not set",
                port=settings.redis_port,
                tls=settings.redis_uses_tls,
                auth_mode=settings.redis_auth_mode,
                password_configured=bool(settings.redis_auth_password),
            ),
        ),
    )


@router.get("/redis", response_model=RedisHealthResponse)
def redis_health(cache: CacheBackend = Depends(get_cache)):
    """Ping the cache backend."""
    body = RedisHealthResponse(
        redis="connected" if cache.ping() else "disconnected",
        cache_type=cache.cache_type,
    )
    if body.redis == "connected":
        return body
    return JSONResponse(status_code=503, content=body.model_dump(by_alias=True))
