from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

import redis

from config import AppConfig

logger = logging.getLogger(__name__)

DECISION_LOG_KEY = "rating:decision:logs"
DECISION_LOG_MAX_ENTRIES = 500


class DecisionLogger:
    """Record rating decisions/transitions for later inspection."""

    def __init__(self, redis_client: redis.Redis | None = None, enabled: bool = True) -> None:
        self._redis_client = redis_client
        self._enabled = enabled

    @classmethod
    def from_config(cls, config: AppConfig) -> DecisionLogger:
        if not config.decision_log_enabled:
            return cls(enabled=False)
        if config.store_backend != "redis":
            return cls()
        client = redis.Redis(
            host=config.redis_host,
            port=config.redis_port,
            password=config.redis_password or None,
            decode_responses=True,
        )
        return cls(redis_client=client)

    def log(
        self,
        event_type: str,
        summary: str,
        base_key: str = "",
        details: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        if not self._enabled:
            return None
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
            "summary": summary,
            "base_key": base_key,
            "details": details or {},
        }
        logger.info("[%s] %s %s", base_key, event_type, summary)
        self._write_redis(payload)
        return payload

    def recent(self, limit: int = 50) -> list[dict[str, Any]]:
        if self._redis_client is None:
            return []
        try:
            raw_items = self._redis_client.lrange(DECISION_LOG_KEY, 0, max(limit, 1) - 1)
        except redis.RedisError as exc:
            logger.debug("Decision log read failed: %s", exc)
            return []
        entries: list[dict[str, Any]] = []
        for raw in raw_items:
            try:
                entries.append(json.loads(raw))
            except (TypeError, ValueError):
                continue
        return entries

    def _write_redis(self, payload: dict[str, Any]) -> None:
        if self._redis_client is None:
            return
        try:
            self._redis_client.lpush(DECISION_LOG_KEY, json.dumps(payload))
            self._redis_client.ltrim(DECISION_LOG_KEY, 0, DECISION_LOG_MAX_ENTRIES - 1)
        except redis.RedisError as exc:
            logger.debug("Decision log Redis write failed: %s", exc)
