"""Cache backends.

Stores JSON-serializable values under string keys with a TTL in minutes.

- RedisCacheBackend: JSON string with native Redis expiry
- MemoryCacheBackend: in-process dict, expiry checked on every get
- FileCacheBackend: one JSON file per key, expiry checked on every get

Caching is best-effort. Backend errors on get are treated as a miss, errors
on set/clear are logged and swallowed. Nothing here raises into a request.
"""

import hashlib
import json
import logging
import tempfile
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import Any

import redis

from mlbstats.cache.keys import KEY_PREFIX

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class CacheBackend(ABC):
    """Key/value cache with per-entry TTL."""

    #: Reported by /api/health ('redis', 'in-memory', 'file')
    cache_type: str = "unknown"

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if missing or expired."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl_minutes: int) -> None:
        """Store value for ttl_minutes."""

    @abstractmethod
    def clear(self, key: str) -> None:
        """Remove a single entry."""

    @abstractmethod
    def clear_all(self) -> int:
        """Remove every cache entry. Returns the number removed."""

    @abstractmethod
    def keys(self) -> list[str]:
        """List live keys (without the storage prefix)."""

    @abstractmethod
    def ping(self) -> bool:
        """Check backend health."""

    def close(self) -> None:  # noqa: B027
        """Release backend resources."""

    @staticmethod
    def _full_key(key: str) -> str:
        return f"{KEY_PREFIX}{key}"

    @staticmethod
    def _strip_prefix(full_key: str) -> str:
        return full_key[len(KEY_PREFIX) :] if full_key.startswith(KEY_PREFIX) else full_key


class MemoryCacheBackend(CacheBackend):
    """In-process cache.

    Values are stored JSON-encoded so reads return fresh copies and
    non-serializable values are rejected at write time, matching Redis.
    """

    cache_type = "in-memory"

    def __init__(self, clock: Clock = time.time):
        self._clock = clock
        self._entries: dict[str, tuple[float, str]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        full_key = self._full_key(key)
        with self._lock:
            entry = self._entries.get(full_key)
            if entry is None:
                return None
            expires_at, raw = entry
            if self._clock() >= expires_at:
                del self._entries[full_key]
                return None
        return json.loads(raw)

    def set(self, key: str, value: Any, ttl_minutes: int) -> None:
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.error("[CACHE] Cannot serialize value for %s: %s", key, e)
            return
        expires_at = self._clock() + ttl_minutes * 60
        with self._lock:
            self._entries[self._full_key(key)] = (expires_at, raw)

    def clear(self, key: str) -> None:
        with self._lock:
            self._entries.pop(self._full_key(key), None)

    def clear_all(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        return count

    def keys(self) -> list[str]:
        now = self._clock()
        with self._lock:
            return sorted(
                self._strip_prefix(k) for k, (expires_at, _) in self._entries.items() if now < expires_at
            )

    def ping(self) -> bool:
        return True


class FileCacheBackend(CacheBackend):
    """File-based cache, one JSON file per key.

    Each file holds ``{"key": ..., "created": ..., "expires": ..., "data": ...}``.
    File names are SHA-256 digests of the key, so any key is filesystem-safe.
    """

    cache_type = "file"

    def __init__(self, root_dir: str | Path, clock: Clock = time.time):
        self._root = Path(root_dir)
        self._clock = clock

    @property
    def root_dir(self) -> Path:
        return self._root

    def _path_for(self, key: str) -> Path:
        digest = hashlib.sha256(self._full_key(key).encode()).hexdigest()
        return self._root / f"{digest}.json"

    def _read(self, path: Path) -> dict | None:
        try:
            with open(path) as f:
                return json.load(f)
        except FileNotFoundError:
            return None
        except (json.JSONDecodeError, OSError) as e:
            # Corrupted entry - treat as miss and clean up
            logger.warning("[CACHE] Unreadable cache file %s: %s", path.name, e)
            path.unlink(missing_ok=True)
            return None

    def get(self, key: str) -> Any | None:
        path = self._path_for(key)
        entry = self._read(path)
        if entry is None:
            return None
        if self._clock() >= entry.get("expires", 0):
            logger.debug("[CACHE] Expired entry for %s", key)
            path.unlink(missing_ok=True)
            return None
        return entry.get("data")

    def set(self, key: str, value: Any, ttl_minutes: int) -> None:
        path = self._path_for(key)
        now = self._clock()
        entry = {
            "key": key,
            "created": now,
            "expires": now + ttl_minutes * 60,
            "data": value,
        }
        tmp_path = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Unique temp file per write; concurrent writers of one key never share it
            with tempfile.NamedTemporaryFile(
                "w", dir=path.parent, prefix=path.stem, suffix=".tmp", delete=False
            ) as f:
                tmp_path = Path(f.name)
                json.dump(entry, f, separators=(",", ":"))
            tmp_path.replace(path)
        except (OSError, TypeError, ValueError) as e:
            logger.error("[CACHE] Failed to write cache entry for %s: %s", key, e)
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)

    def clear(self, key: str) -> None:
        try:
            self._path_for(key).unlink(missing_ok=True)
        except OSError as e:
            logger.error("[CACHE] Failed to clear %s: %s", key, e)

    def clear_all(self) -> int:
        if not self._root.exists():
            return 0
        count = 0
        for path in self._root.glob("*.json"):
            try:
                path.unlink()
                count += 1
            except OSError as e:
                logger.error("[CACHE] Failed to remove %s: %s", path.name, e)
        return count

    def keys(self) -> list[str]:
        if not self._root.exists():
            return []
        now = self._clock()
        live = []
        for path in self._root.glob("*.json"):
            entry = self._read(path)
            if entry and now < entry.get("expires", 0) and "key" in entry:
                live.append(entry["key"])
        return sorted(live)

    def ping(self) -> bool:
        return True


class RedisCacheBackend(CacheBackend):
    """Redis-backed cache using native key expiry.

    Usage:
        backend = RedisCacheBackend.from_settings(settings)
        backend.set("standings", payload, ttl_minutes=120)
        backend.get("standings")
    """

    cache_type = "redis"

    def __init__(self, client: redis.Redis):
        self._client = client

    @classmethod
    def from_settings(cls, settings) -> "RedisCacheBackend":
        """Create a client from Settings. Connection is lazy (first command)."""
        logger.info(
            "[REDIS] Configuring client host=%s port=%s tls=%s auth_mode=%s password=%s",
            settings.redis_host,
            settings.redis_port,
            settings.redis_uses_tls,
            settings.redis_auth_mode,
            "set" if settings.redis_auth_password else "not set",
        )
        client = redis.Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            password=settings.redis_auth_password,
            ssl=settings.redis_uses_tls,
            decode_responses=True,
            socket_timeout=5,
            socket_connect_timeout=5,
            retry_on_timeout=True,
        )
        return cls(client)

    def get(self, key: str) -> Any | None:
        full_key = self._full_key(key)
        try:
            raw = self._client.get(full_key)
        except redis.RedisError as e:
            logger.error("[REDIS] Error reading %s: %s", full_key, e)
            return None
        if raw is None:
            logger.debug("[REDIS] Cache miss for %s", full_key)
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.error("[REDIS] Error parsing data for %s: %s", full_key, e)
            return None

    def set(self, key: str, value: Any, ttl_minutes: int) -> None:
        full_key = self._full_key(key)
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.error("[REDIS] Cannot serialize value for %s: %s", full_key, e)
            return
        try:
            self._client.set(full_key, raw, ex=int(ttl_minutes * 60))
        except redis.RedisError as e:
            logger.error("[REDIS] Error caching data for %s: %s", full_key, e)

    def clear(self, key: str) -> None:
        try:
            self._client.delete(self._full_key(key))
        except redis.RedisError as e:
            logger.error("[REDIS] Error clearing %s: %s", key, e)

    def clear_all(self) -> int:
        try:
            full_keys = list(self._client.scan_iter(match=f"{KEY_PREFIX}*"))
            if not full_keys:
                return 0
            return int(self._client.delete(*full_keys))
        except redis.RedisError as e:
            logger.error("[REDIS] Error clearing all cache keys: %s", e)
            return 0

    def keys(self) -> list[str]:
        try:
            return sorted(self._strip_prefix(k) for k in self._client.scan_iter(match=f"{KEY_PREFIX}*"))
        except redis.RedisError as e:
            logger.error("[REDIS] Error listing keys: %s", e)
            return []

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning("[REDIS] Ping failed: %s", e)
            return False

    def close(self) -> None:
        try:
            self._client.close()
        except redis.RedisError as e:
            logger.debug("[REDIS] Error closing client: %s", e)
