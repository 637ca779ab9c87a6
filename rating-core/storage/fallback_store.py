from __future__ import annotations

from collections import defaultdict
from typing import Any

from storage.base import PreferenceStore


class InMemoryPreferenceStore(PreferenceStore):
    """In-process store used when no durable backend is configured."""

    def __init__(self) -> None:
        self._partitions: dict[str, dict[str, Any]] = defaultdict(dict)

    def load(self, partition: str, key: str, default: Any = None) -> Any:
        return self._partitions.get(partition, {}).get(key, default)

    def save(self, partition: str, key: str, value: Any) -> None:
        self._partitions[partition][key] = value

    def delete(self, partition: str, key: str) -> None:
        self._partitions.get(partition, {}).pop(key, None)

    def contains(self, partition: str, key: str) -> bool:
        return key in self._partitions.get(partition, {})

    def clear(self, partition: str, prefix: str = "") -> int:
        items = self._partitions.get(partition, {})
        doomed = [key for key in items if key.startswith(prefix)]
        for key in doomed:
            del items[key]
        return len(doomed)

    def dump(self, partition: str) -> dict[str, Any]:
        return dict(self._partitions.get(partition, {}))
