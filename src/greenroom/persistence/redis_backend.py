"""Redis cache backend implementing ICacheBackend.

Keys are namespaced with ``key_prefix`` so several environments can share
one Redis database; callers always pass unprefixed keys.
"""

from __future__ import annotations

from typing import Callable, TypeVar

import redis

from greenroom.core.config import RedisConfig
from greenroom.core.exceptions import CacheError

R = TypeVar("R")


class RedisCacheBackend:
    """Production ICacheBackend backed by Redis."""

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0,
                 *, decode_responses: bool = True, key_prefix: str = "") -> None:
        self.key_prefix = key_prefix
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=decode_responses,
        )

    @classmethod
    def from_config(cls, config: RedisConfig) -> RedisCacheBackend:
        return cls(
            host=config.host,
            port=config.port,
            db=config.db,
            decode_responses=config.decode_responses,
            key_prefix=config.key_prefix,
        )

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def _call(self, command: str, key: str | None, action: Callable[[], R]) -> R:
        try:
            return action()
        except Exception as exc:
            target = f" for key={key!r}" if key is not None else ""
            raise CacheError(f"Redis {command} failed{target}: {exc}") from exc

    def get(self, key: str) -> str | None:
        return self._call("GET", key, lambda: self._client.get(self._key(key)))

    def setex(self, key: str, ttl: int, value: str) -> None:
        if ttl <= 0:
            # Redis rejects non-positive expiries
            self.delete(key)
            return
        self._call("SETEX", key, lambda: self._client.setex(self._key(key), ttl, value))

    def delete(self, key: str) -> None:
        self._call("DELETE", key, lambda: self._client.delete(self._key(key)))

    def ping(self) -> bool:
        return bool(self._call("PING", None, lambda: self._client.ping()))
