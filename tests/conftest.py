from __future__ import annotations

from typing import Any

import pytest
import redis

from rating.constants import MILLIS_PER_DAY
from storage import InMemoryPreferenceStore

START_MILLIS = 1_700_000_000_000


class FakeClock:
    def __init__(self, now: int = START_MILLIS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, days: float = 0, millis: int = 0) -> None:
        self.now += int(days * MILLIS_PER_DAY) + millis


class FakeRedis:
    """Subset of the redis-py client used by the store and decision log."""

    def __init__(self) -> None:
        self.hashes: dict[str, dict[str, str]] = {}
        self.lists: dict[str, list[str]] = {}
        self.fail = False

    def _check(self) -> None:
        if self.fail:
            raise redis.ConnectionError("redis unavailable")

    def hget(self, name: str, key: str) -> str | None:
        self._check()
        return self.hashes.get(name, {}).get(key)

    def hset(self, name: str, key: str, value: str) -> int:
        self._check()
        self.hashes.setdefault(name, {})[key] = value
        return 1

    def hdel(self, name: str, *keys: str) -> int:
        self._check()
        bucket = self.hashes.get(name, {})
        return sum(1 for key in keys if bucket.pop(key, None) is not None)

    def hexists(self, name: str, key: str) -> bool:
        self._check()
        return key in self.hashes.get(name, {})

    def hkeys(self, name: str) -> list[str]:
        self._check()
        return list(self.hashes.get(name, {}))

    def lpush(self, name: str, value: str) -> int:
        self._check()
        self.lists.setdefault(name, []).insert(0, value)
        return len(self.lists[name])

    def ltrim(self, name: str, start: int, end: int) -> bool:
        self._check()
        self.lists[name] = self.lists.get(name, [])[start : end + 1]
        return True

    def lrange(self, name: str, start: int, end: int) -> list[Any]:
        self._check()
        return self.lists.get(name, [])[start : end + 1]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()
