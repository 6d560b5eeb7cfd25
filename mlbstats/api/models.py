"""Pydantic models for API responses."""

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Health
# =============================================================================


class RedisConfig(BaseModel):
    """Non-secret Redis configuration."""

    model_config = ConfigDict(populate_by_name=True)

    host: str
    port: int
    tls: bool
    auth_mode: str = Field(alias="authMode")
    password_configured: bool = Field(alias="passwordConfigured")


class CacheHealth(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str  # connected | disconnected
    cache_type: str = Field(alias="cacheType")
    configured: bool
    config: RedisConfig


class HealthResponse(BaseModel):
    """Response body for GET /api/health."""

    status: str = "ok"
    timestamp: str
    environment: str
    redis: CacheHealth


class RedisHealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    redis: str
    cache_type: str = Field(alias="cacheType")


# =============================================================================
# Cache management
# =============================================================================


class SchedulerStatus(BaseModel):
    running: bool
    interval_minutes: int
    last_run: str | None = None
    last_results: dict | None = None


class CacheStatusResponse(BaseModel):
    """Response body for GET /api/cache/status."""

    cache_type: str
    connected: bool
    keys: list[str]
    key_count: int
    scheduler: SchedulerStatus | None = None


class CacheActionResponse(BaseModel):
    status: str
    message: str
