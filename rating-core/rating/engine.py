from __future__ import annotations

from dataclasses import dataclass

from rating.constants import MILLIS_PER_DAY, Default
from rating.state import RatingState
from utils.clock import Clock, now_millis


def is_due_by_date(timestamp: int, threshold_days: int, now: int | None = None) -> bool:
    """Return ``True`` once ``threshold_days`` have elapsed since ``timestamp``.

    A timestamp in the future yields a negative elapsed time and is never due.
    """
    current = now_millis() if now is None else now
    return current - timestamp >= threshold_days * MILLIS_PER_DAY


def require_non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be >= 0")
    return int(value)


@dataclass
class RatingThresholds:
    rate_interval: int = Default.RATE_INTERVAL
    rate_count: int = Default.RATE_COUNT
    remind_interval: int = Default.REMIND_INTERVAL

    def __post_init__(self) -> None:
        self.rate_interval = require_non_negative("rate_interval", self.rate_interval)
        self.rate_count = require_non_negative("rate_count", self.rate_count)
        self.remind_interval = require_non_negative("remind_interval", self.remind_interval)


@dataclass
class EligibilityReport:
    is_request: bool
    due_rating: bool
    due_count: bool
    due_reminder: bool

    @property
    def should_prompt(self) -> bool:
        return self.is_request and self.due_rating and self.due_count and self.due_reminder

    def blocking_checks(self) -> list[str]:
        checks = {
            "is_request": self.is_request,
            "due_rating": self.due_rating,
            "due_count": self.due_count,
            "due_reminder": self.due_reminder,
        }
        return [name for name, passed in checks.items() if not passed]


class EligibilityEngine:
    """Read-only prompt decision over persisted rating state."""

    def __init__(self, state: RatingState, thresholds: RatingThresholds, clock: Clock = now_millis) -> None:
        self._state = state
        self._thresholds = thresholds
        self._clock = clock

    def is_due_by_date(self, timestamp: int, threshold_days: int) -> bool:
        return is_due_by_date(timestamp, threshold_days, self._clock())

    def is_due_rating(self) -> bool:
        return self.is_due_by_date(self._state.get_first_launch(), self._thresholds.rate_interval)

    def is_due_count(self) -> bool:
        return self._state.get_launch_count() >= self._thresholds.rate_count

    def is_due_reminder(self) -> bool:
        return self.is_due_by_date(self._state.get_last_reminder(), self._thresholds.remind_interval)

    def explain(self) -> EligibilityReport:
        return EligibilityReport(
            is_request=self._state.is_request(),
            due_rating=self.is_due_rating(),
            due_count=self.is_due_count(),
            due_reminder=self.is_due_reminder(),
        )

    def should_prompt(self) -> bool:
        return self.explain().should_prompt
