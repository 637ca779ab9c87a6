"""Key-value persistence contract consumed by the rating tracker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class PreferenceStore(ABC):
    """Durable primitive-value store keyed by ``(partition, key)``.

    Values are ints, floats, bools or strings. A missing key always reads back
    as the caller-supplied default, so every reader has a well-defined value.
    """

    @abstractmethod
    def load(self, partition: str, key: str, default: Any = None) -> Any:
        """Return the stored value, or ``default`` if the key is absent."""

    @abstractmethod
    def save(self, partition: str, key: str, value: Any) -> None:
        """Create or overwrite a value."""

    @abstractmethod
    def delete(self, partition: str, key: str) -> None:
        """Delete a value. No-op if the key does not exist."""

    @abstractmethod
    def contains(self, partition: str, key: str) -> bool:
        """Return ``True`` if the key exists in the partition."""

    @abstractmethod
    def clear(self, partition: str, prefix: str = "") -> int:
        """Delete every key in the partition starting with ``prefix``.

        Returns how many keys were removed.
        """
