"""Cache stores and the fail-open cache service built on top of them.

Stores implement a small key/value contract:
- get(key): value or None on miss
- set(key, value, ttl_minutes): store with expiry
- set_forever(key, value): store without expiry
- delete(key): remove a single key (no wildcard support is assumed)

Stores raise CacheUnavailableError when the backend fails. CacheService
turns those failures into cache misses so callers always fall back to
computing the value.
"""

from collections.abc import Callable
import copy
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
import json
import threading
from typing import Any, Protocol, TypeVar

import redis

from translation_service.core.config import Settings
from translation_service.core.exceptions import CacheUnavailableError
from translation_service.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class CacheStore(Protocol):
    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any, ttl_minutes: int) -> None: ...

    def set_forever(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...


@dataclass
class CachedValue:
    """A value with optional expiration time (None means forever)."""

    value: Any
    expires_at: datetime | None


@dataclass
class InMemoryCacheStore:
    """Process-local TTL cache.

    Thread-safe for read/write operations. Expired entries are removed
    on access or by cleanup_expired().
    """

    _cache: dict[str, CachedValue] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def get(self, key: str) -> Any | None:
        with self._lock:
            cached = self._cache.get(key)
            if cached is None:
                return None
            if cached.expires_at is not None and datetime.now(UTC) > cached.expires_at:
                del self._cache[key]
                logger.debug("cache_entry_expired", key=key)
                return None
            return copy.deepcopy(cached.value)

    def set(self, key: str, value: Any, ttl_minutes: int) -> None:
        expires_at = datetime.now(UTC) + timedelta(minutes=ttl_minutes)
        with self._lock:
            self._cache[key] = CachedValue(copy.deepcopy(value), expires_at)

    def set_forever(self, key: str, value: Any) -> None:
        with self._lock:
            self._cache[key] = CachedValue(copy.deepcopy(value), None)

    def delete(self, key: str) -> None:
        with self._lock:
            self._cache.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def cleanup_expired(self) -> int:
        """Remove all expired entries. Returns count of removed entries."""
        now = datetime.now(UTC)
        with self._lock:
            expired_keys = [
                k
                for k, v in self._cache.items()
                if v.expires_at is not None and now > v.expires_at
            ]
            for key in expired_keys:
                del self._cache[key]
        if expired_keys:
            logger.debug("cache_cleanup", removed=len(expired_keys))
        return len(expired_keys)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._cache)


class RedisCacheStore:
    """Redis-backed store. Values are serialized as JSON."""

    def __init__(self, client: redis.Redis):
        self._client = client

    @classmethod
    def from_url(cls, url: str, timeout_seconds: float) -> "RedisCacheStore":
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=timeout_seconds,
            socket_connect_timeout=timeout_seconds,
        )
        return cls(client)

    def get(self, key: str) -> Any | None:
        try:
            raw = self._client.get(key)
        except redis.RedisError as e:
            raise CacheUnavailableError("get", key, str(e)) from e
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            raise CacheUnavailableError("get", key, f"unreadable value: {e}") from e

    def set(self, key: str, value: Any, ttl_minutes: int) -> None:
        try:
            self._client.setex(key, timedelta(minutes=ttl_minutes), json.dumps(value))
        except redis.RedisError as e:
            raise CacheUnavailableError("set", key, str(e)) from e

    def set_forever(self, key: str, value: Any) -> None:
        try:
            self._client.set(key, json.dumps(value))
        except redis.RedisError as e:
            raise CacheUnavailableError("set", key, str(e)) from e

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except redis.RedisError as e:
            raise CacheUnavailableError("delete", key, str(e)) from e


def build_cache_store(settings: Settings) -> CacheStore:
    """Create the configured cache store. Redis when REDIS_URL is set."""
    if settings.REDIS_URL:
        logger.info("cache_store_configured", backend="redis")
        return RedisCacheStore.from_url(
            settings.REDIS_URL, timeout_seconds=settings.CACHE_TIMEOUT_SECONDS
        )
    logger.info("cache_store_configured", backend="memory")
    return InMemoryCacheStore()


class CacheService:
    """Fail-open wrapper around a CacheStore.

    Every key is namespaced with the configured prefix. Store failures are
    logged and treated as misses (reads) or skipped (writes/deletes).
    """

    def __init__(self, store: CacheStore, prefix: str = ""):
        self._store = store
        self._prefix = f"{prefix}:" if prefix else ""

    @property
    def store(self) -> CacheStore:
        return self._store

    def key(self, *parts: str) -> str:
        return self._prefix + ":".join(parts)

    def get(self, key: str) -> Any | None:
        try:
            return self._store.get(key)
        except CacheUnavailableError as e:
            logger.warning("cache_unavailable", operation="get", key=key, error=str(e))
            return None

    def put(self, key: str, value: Any, ttl_minutes: int | None) -> None:
        try:
            if ttl_minutes is None:
                self._store.set_forever(key, value)
            else:
                self._store.set(key, value, ttl_minutes)
        except CacheUnavailableError as e:
            logger.warning("cache_unavailable", operation="set", key=key, error=str(e))

    def remember(
        self, key: str, ttl_minutes: int | None, callback: Callable[[], T]
    ) -> T:
        """Return the cached value for key, computing and storing it on a miss.

        ttl_minutes=None stores the value forever.
        """
        cached = self.get(key)
        if cached is not None:
            logger.debug("cache_hit", key=key)
            return cached

        value = callback()
        logger.debug("cache_miss", key=key)
        self.put(key, value, ttl_minutes)
        return value

    def remember_forever(self, key: str, callback: Callable[[], T]) -> T:
        return self.remember(key, None, callback)

    def forget(self, *keys: str) -> bool:
        """Delete keys. Returns False if any delete failed."""
        ok = True
        for key in keys:
            try:
                self._store.delete(key)
            except CacheUnavailableError as e:
                ok = False
                logger.warning(
                    "cache_unavailable", operation="delete", key=key, error=str(e)
                )
        return ok
