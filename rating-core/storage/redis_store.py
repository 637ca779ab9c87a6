import json
import logging
from typing import Any

import redis

from storage.base import PreferenceStore

logger = logging.getLogger(__name__)


class RedisPreferenceStore(PreferenceStore):
    """One Redis hash per partition, values JSON-encoded.

    Writes go through an in-process cache that serves reads while Redis is
    unreachable.
    """

    def __init__(
        self,
        host: str = "redis",
        port: int = 6379,
        password: str | None = None,
        key_prefix: str = "rating",
        client: redis.Redis | None = None,
    ) -> None:
        self._client = client or redis.Redis(
            host=host,
            port=port,
            password=password or None,
            decode_responses=True,
        )
        self._key_prefix = key_prefix
        self._fallback_cache: dict[str, dict[str, Any]] = {}

    def _hash_name(self, partition: str) -> str:
        return f"{self._key_prefix}:{partition}"

    def _cache(self, partition: str) -> dict[str, Any]:
        return self._fallback_cache.setdefault(partition, {})

    def load(self, partition: str, key: str, default: Any = None) -> Any:
        cache = self._cache(partition)
        try:
            raw = self._client.hget(self._hash_name(partition), key)
        except redis.RedisError as exc:
            logger.warning("Redis read failed for %s/%s, serving cached value: %s", partition, key, exc)
            return cache.get(key, default)

        if raw is None:
            cache.pop(key, None)
            return default
        try:
            value = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Discarding undecodable value for %s/%s", partition, key)
            return default
        cache[key] = value
        return value

    def save(self, partition: str, key: str, value: Any) -> None:
        self._cache(partition)[key] = value
        try:
            self._client.hset(self._hash_name(partition), key, json.dumps(value))
        except redis.RedisError as exc:
            logger.warning("Redis write failed for %s/%s: %s", partition, key, exc)

    def delete(self, partition: str, key: str) -> None:
        self._cache(partition).pop(key, None)
        try:
            self._client.hdel(self._hash_name(partition), key)
        except redis.RedisError as exc:
            logger.warning("Redis delete failed for %s/%s: %s", partition, key, exc)

    def contains(self, partition: str, key: str) -> bool:
        try:
            return bool(self._client.hexists(self._hash_name(partition), key))
        except redis.RedisError as exc:
            logger.warning("Redis lookup failed for %s/%s: %s", partition, key, exc)
            return key in self._cache(partition)

    def clear(self, partition: str, prefix: str = "") -> int:
        cache = self._cache(partition)
        for key in [key for key in cache if key.startswith(prefix)]:
            del cache[key]
        try:
            keys = [key for key in self._client.hkeys(self._hash_name(partition)) if key.startswith(prefix)]
            if not keys:
                return 0
            return int(self._client.hdel(self._hash_name(partition), *keys))
        except redis.RedisError as exc:
            logger.warning("Redis clear failed for %s: %s", partition, exc)
            return 0
