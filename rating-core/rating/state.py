from __future__ import annotations

from collections.abc import Callable
from dataclasses import asdict, dataclass
from typing import Any

from rating.constants import PREFS, Key, Value
from storage.base import PreferenceStore


@dataclass
class RatingSnapshot:
    base_key: str
    first_launch: int
    last_launch: int
    last_reminder: int
    launch_count: int
    is_request: bool
    last_reminder_set: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class RatingState:
    """Typed access to the persisted fields of one base key."""

    def __init__(
        self,
        store: PreferenceStore,
        key_for: Callable[[str], str],
        reminder_baseline: int,
    ) -> None:
        self._store = store
        self._key_for = key_for
        self._reminder_baseline = reminder_baseline

    @property
    def reminder_baseline(self) -> int:
        return self._reminder_baseline

    def _load(self, suffix: str, default: Any) -> Any:
        return self._store.load(PREFS, self._key_for(suffix), default)

    def _save(self, suffix: str, value: Any) -> None:
        self._store.save(PREFS, self._key_for(suffix), value)

    def _delete(self, suffix: str) -> None:
        self._store.delete(PREFS, self._key_for(suffix))

    def get_first_launch(self) -> int:
        return int(self._load(Key.FIRST_LAUNCH, Value.FIRST_LAUNCH))

    def set_first_launch(self, millis: int) -> None:
        self._save(Key.FIRST_LAUNCH, int(millis))

    def get_last_launch(self) -> int:
        return int(self._load(Key.LAST_LAUNCH, Value.LAST_LAUNCH))

    def set_last_launch(self, millis: int) -> None:
        self._save(Key.LAST_LAUNCH, int(millis))

    def get_last_reminder(self) -> int:
        return int(self._load(Key.LAST_REMINDER, self._reminder_baseline))

    def set_last_reminder(self, millis: int) -> None:
        self._save(Key.LAST_REMINDER, int(millis))

    def delete_last_reminder(self) -> None:
        self._delete(Key.LAST_REMINDER)

    def get_launch_count(self) -> int:
        return int(self._load(Key.LAUNCH_COUNT, Value.LAUNCH_COUNT))

    def set_launch_count(self, count: int) -> None:
        self._save(Key.LAUNCH_COUNT, int(count))

    def delete_launch_count(self) -> None:
        self._delete(Key.LAUNCH_COUNT)

    def is_request(self) -> bool:
        return bool(self._load(Key.IS_REQUEST, Value.IS_REQUEST))

    def set_request(self, request: bool) -> None:
        self._save(Key.IS_REQUEST, bool(request))

    def clear(self) -> None:
        for suffix in Key.ALL:
            self._delete(suffix)

    def snapshot(self) -> RatingSnapshot:
        return RatingSnapshot(
            base_key=self._key_for(""),
            first_launch=self.get_first_launch(),
            last_launch=self.get_last_launch(),
            last_reminder=self.get_last_reminder(),
            launch_count=self.get_launch_count(),
            is_request=self.is_request(),
            last_reminder_set=self._store.contains(PREFS, self._key_for(Key.LAST_REMINDER)),
        )
