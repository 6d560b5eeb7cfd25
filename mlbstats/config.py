"""Application configuration.

All settings come from environment variables:
    REDIS_HOST: Redis host (unset, localhost or 127.0.0.1 selects the fallback cache)
    REDIS_PORT: Redis port (default: 6380)
    REDIS_PASSWORD: Redis access key
    REDIS_TLS: "true" to connect over TLS (always on in production)
    REDIS_AUTH_MODE: "key" (default) or "aad"
    REDIS_AAD_TOKEN: Azure AD token used as the password in "aad" mode
    CACHE_BACKEND: Fallback cache, "memory" (default) or "file"
    CACHE_DIR: Directory for the file cache (default: ./data/cache)
    NODE_ENV: "development" (default) or "production"
    PORT: HTTP port (default: 3000)
    ALLOWED_ORIGINS: Extra comma-separated CORS origins
    MLB_TIMEOUT: Upstream request timeout in seconds (default: 10)
    MLB_RETRY_COUNT: Upstream retry attempts (default: 3)
    MLB_RETRY_DELAY: Initial retry delay in seconds (default: 1.0)
    REFRESH_INTERVAL_MINUTES: Cache pre-warm interval (default: 60)
    SCHEDULER_ENABLED: "false" disables the pre-warm thread
    LOG_LEVEL: Root log level (default: INFO)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

LOCAL_REDIS_HOSTS = ("localhost", "127.0.0.1")

# Front-end dev servers (React/Vite, Flutter web)
DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
    "http://localhost:3001",
    "http://127.0.0.1:3001",
]


def _env_bool(value: str | None, default: bool = False) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Runtime settings resolved from the environment."""

    redis_host: str | None = None
    redis_port: int = 6380
    redis_password: str | None = None
    redis_tls: bool = False
    redis_auth_mode: str = "key"
    redis_aad_token: str | None = None
    cache_backend: str = "memory"
    cache_dir: Path = Path("./data/cache")
    environment: str = "development"
    port: int = 3000
    allowed_origins: list[str] = field(default_factory=list)
    mlb_timeout: float = 10.0
    mlb_retry_count: int = 3
    mlb_retry_delay: float = 1.0
    refresh_interval_minutes: int = 60
    scheduler_enabled: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables (os.environ by default)."""
        env = os.environ if environ is None else environ

        origins = [o.strip() for o in env.get("ALLOWED_ORIGINS", "").split(",") if o.strip()]

        return cls(
            redis_host=env.get("REDIS_HOST") or None,
            redis_port=int(env.get("REDIS_PORT") or 6380),
            redis_password=env.get("REDIS_PASSWORD") or None,
            redis_tls=_env_bool(env.get("REDIS_TLS")),
            redis_auth_mode=(env.get("REDIS_AUTH_MODE") or "key").lower(),
            redis_aad_token=env.get("REDIS_AAD_TOKEN") or None,
            cache_backend=(env.get("CACHE_BACKEND") or "memory").lower(),
            cache_dir=Path(env.get("CACHE_DIR") or "./data/cache"),
            environment=env.get("NODE_ENV") or "development",
            port=int(env.get("PORT") or 3000),
            allowed_origins=origins,
            mlb_timeout=float(env.get("MLB_TIMEOUT") or 10.0),
            mlb_retry_count=int(env.get("MLB_RETRY_COUNT") or 3),
            mlb_retry_delay=float(env.get("MLB_RETRY_DELAY") or 1.0),
            refresh_interval_minutes=int(env.get("REFRESH_INTERVAL_MINUTES") or 60),
            scheduler_enabled=_env_bool(env.get("SCHEDULER_ENABLED"), default=True),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def use_redis(self) -> bool:
        """Redis is used only for a configured, non-local host."""
        return bool(self.redis_host) and self.redis_host not in LOCAL_REDIS_HOSTS

    @property
    def redis_uses_tls(self) -> bool:
        return self.redis_tls or self.is_production

    @property
    def redis_auth_password(self) -> str | None:
        """Password sent to Redis for the configured auth mode."""
        if self.redis_auth_mode == "aad":
            return self.redis_aad_token
        return self.redis_password

    @property
    def cache_type(self) -> str:
        if self.use_redis:
            return "redis"
        return "file" if self.cache_backend == "file" else "in-memory"

    @property
    def cors_origins(self) -> list[str]:
        return DEFAULT_ALLOWED_ORIGINS + self.allowed_origins
