from __future__ import annotations

import logging

from rating.constants import Key
from rating.engine import EligibilityEngine, EligibilityReport, RatingThresholds, require_non_negative
from rating.errors import RatingInitializationError
from rating.listener import RatingListener, RatingOutcome, RatingPresenter
from rating.policies import RatingPolicy
from rating.state import RatingSnapshot, RatingState
from storage.base import PreferenceStore
from utils.clock import Clock, now_millis
from utils.decision_log import DecisionLogger

logger = logging.getLogger(__name__)


class DynamicRating:
    """Track app launches and user answers to decide when to ask for a rating.

    Call ``initialize()`` once per session, ask ``should_prompt()`` and report
    what the user did through ``record_response()``. All state lives in the
    supplied store under ``base_key``, so several trackers with different base
    keys can share one store.
    """

    def __init__(
        self,
        store: PreferenceStore | None,
        *,
        base_key: str | None = None,
        rate_interval: int | None = None,
        rate_count: int | None = None,
        remind_interval: int | None = None,
        clock: Clock | None = None,
        decision_logger: DecisionLogger | None = None,
    ) -> None:
        if store is None:
            raise RatingInitializationError("Preference store should not be None.")

        self._store = store
        self._base_key = base_key
        self._clock = clock or now_millis
        self._decision_logger = decision_logger or DecisionLogger()
        self._thresholds = RatingThresholds()
        if rate_interval is not None:
            self.set_rate_interval(rate_interval)
        if rate_count is not None:
            self.set_rate_count(rate_count)
        if remind_interval is not None:
            self.set_remind_interval(remind_interval)

        self._state = RatingState(store, self.get_key, reminder_baseline=self._clock())
        self._engine = EligibilityEngine(self._state, self._thresholds, self._clock)

    @classmethod
    def from_policy(
        cls,
        store: PreferenceStore | None,
        policy: RatingPolicy,
        clock: Clock | None = None,
        decision_logger: DecisionLogger | None = None,
    ) -> DynamicRating:
        return cls(
            store,
            base_key=policy.base_key,
            rate_interval=policy.rate_interval,
            rate_count=policy.rate_count,
            remind_interval=policy.remind_interval,
            clock=clock,
            decision_logger=decision_logger,
        )

    def initialize(self) -> DynamicRating:
        return self.on_session_start()

    def on_session_start(self) -> DynamicRating:
        """Record one app launch.

        Sets ``first_launch`` if unset, stamps ``last_launch`` and bumps
        ``launch_count`` while requesting, so a call makes up to three writes.
        ``last_launch`` is never read by the due checks.
        """
        now = self._clock()
        if self.is_first_launch():
            self._state.set_first_launch(now)
            logger.debug("Rating tracking started for %s", self.get_base_key())

        self._state.set_last_launch(now)

        if self._state.is_request():
            self._state.set_launch_count(self._state.get_launch_count() + 1)

        self._decision_logger.log(
            "session_start",
            "Session recorded",
            base_key=self.get_base_key(),
            details={"launch_count": self._state.get_launch_count()},
        )
        return self

    def get_base_key(self) -> str:
        return self._base_key if self._base_key is not None else Key.BASE

    def set_base_key(self, base_key: str | None) -> DynamicRating:
        self._base_key = base_key
        return self

    @property
    def rate_interval(self) -> int:
        return self._thresholds.rate_interval

    @property
    def rate_count(self) -> int:
        return self._thresholds.rate_count

    @property
    def remind_interval(self) -> int:
        return self._thresholds.remind_interval

    def set_rate_interval(self, interval: int) -> DynamicRating:
        self._thresholds.rate_interval = require_non_negative("rate_interval", interval)
        return self

    def set_rate_count(self, count: int) -> DynamicRating:
        self._thresholds.rate_count = require_non_negative("rate_count", count)
        return self

    def set_remind_interval(self, interval: int) -> DynamicRating:
        self._thresholds.remind_interval = require_non_negative("remind_interval", interval)
        return self

    def get_key(self, key: str) -> str:
        return self.get_base_key() + key

    def is_first_launch(self) -> bool:
        return self._state.get_first_launch() == 0

    def is_due_by_date(self, timestamp: int, threshold_days: int) -> bool:
        return self._engine.is_due_by_date(timestamp, threshold_days)

    def is_due_rating(self) -> bool:
        return self._engine.is_due_rating()

    def is_due_count(self) -> bool:
        return self._engine.is_due_count()

    def is_due_reminder(self) -> bool:
        return self._engine.is_due_reminder()

    def should_prompt(self) -> bool:
        return self._engine.should_prompt()

    def explain(self) -> EligibilityReport:
        return self._engine.explain()

    def snapshot(self) -> RatingSnapshot:
        return self._state.snapshot()

    def should_rate_dialog(
        self,
        listener: RatingListener | None,
        presenter: RatingPresenter | None,
    ) -> bool:
        """Show the rating prompt through ``presenter`` if it is due."""
        if listener is None or presenter is None or not self.should_prompt():
            return False

        return self.show_rate_dialog(listener, presenter)

    def show_rate_dialog(
        self,
        listener: RatingListener | None,
        presenter: RatingPresenter | None,
    ) -> bool:
        if listener is None or presenter is None:
            return False

        presenter.show(listener)
        self._decision_logger.log("prompt_shown", "Rating prompt presented", base_key=self.get_base_key())
        return True

    def record_response(self, remind: bool, outcome: RatingOutcome | None = None) -> None:
        """Persist the user's answer to a prompt.

        ``remind=True`` keeps requesting and restarts the reminder interval;
        ``remind=False`` stops requesting for this base key for good.
        """
        self._state.set_request(remind)
        self._state.set_last_reminder(self._clock())
        self._state.delete_launch_count()

        if not remind:
            self._state.delete_last_reminder()

        if outcome is None:
            outcome = RatingOutcome.REMIND_LATER if remind else RatingOutcome.DISMISSED
        self._decision_logger.log(
            "response_recorded",
            f"Rating response: {outcome.value}",
            base_key=self.get_base_key(),
            details={"remind": remind, "outcome": outcome.value},
        )

    def reset(self) -> None:
        """Delete all persisted state for this base key."""
        self._state.clear()
        self._decision_logger.log("state_reset", "Rating state cleared", base_key=self.get_base_key())
