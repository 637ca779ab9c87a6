"""Callbacks a rating UI uses to report what the user did."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from rating.constants import Value

if TYPE_CHECKING:
    from rating.tracker import DynamicRating


class RatingResponse(str, Enum):
    UNKNOWN = "unknown"
    NEGATIVE = "negative"
    POSITIVE = "positive"


class RatingOutcome(str, Enum):
    RATED = "rated"
    FEEDBACK = "feedback"
    REMIND_LATER = "remind_later"
    DISMISSED = "dismissed"


def classify_rating(rating: float, positive: float = Value.POSITIVE) -> RatingResponse:
    if rating <= 0:
        return RatingResponse.UNKNOWN
    if rating < positive:
        return RatingResponse.NEGATIVE
    return RatingResponse.POSITIVE


class RatingListener(ABC):
    """Capabilities the presentation layer relies on."""

    @abstractmethod
    def get_rating_title(self) -> str | None: ...

    @abstractmethod
    def get_rating_message(self) -> str | None: ...

    @abstractmethod
    def get_action_later(self) -> str | None: ...

    @abstractmethod
    def get_action_rate(self, rating: float) -> str | None: ...

    @abstractmethod
    def get_action_skip(self) -> str | None: ...

    @abstractmethod
    def is_rating_unknown(self, rating: float) -> bool: ...

    @abstractmethod
    def is_rating_negative(self, rating: float) -> bool: ...

    @abstractmethod
    def on_rating_selected(self, rating: float) -> bool: ...

    @abstractmethod
    def on_rating_skipped(self, remind: bool) -> bool: ...


class RatingPresenter(Protocol):
    def show(self, listener: RatingListener) -> None: ...


class DynamicRatingListener(RatingListener):
    """Default listener that routes user answers back to a ``DynamicRating``.

    Subclasses decide what rating and feedback mean for the host app through
    ``on_rate`` and ``on_feedback``.
    """

    title = "Contribute"
    message = "Please rate this app or send feedback to help us improve it."
    action_later = "Later"
    action_rate = "Rate"
    action_feedback = "Feedback"
    action_skip = "Skip"

    def __init__(self, dynamic_rating: DynamicRating | None, positive_threshold: float = Value.POSITIVE) -> None:
        self._dynamic_rating = dynamic_rating
        self._positive_threshold = positive_threshold

    @property
    def dynamic_rating(self) -> DynamicRating | None:
        return self._dynamic_rating

    @abstractmethod
    def on_rate(self, rating: float) -> None:
        """Positive rating chosen by the user."""

    @abstractmethod
    def on_feedback(self, rating: float) -> None:
        """Negative rating chosen by the user."""

    def get_rating_title(self) -> str | None:
        return self.title

    def get_rating_message(self) -> str | None:
        return self.message

    def get_action_later(self) -> str | None:
        return self.action_later

    def get_action_rate(self, rating: float) -> str | None:
        if self.is_rating_unknown(rating) or not self.is_rating_negative(rating):
            return self.action_rate
        return self.action_feedback

    def get_action_skip(self) -> str | None:
        return self.action_skip

    def is_rating_unknown(self, rating: float) -> bool:
        return classify_rating(rating, self._positive_threshold) is RatingResponse.UNKNOWN

    def is_rating_negative(self, rating: float) -> bool:
        return rating < self._positive_threshold

    def is_confirm_enabled(self, rating: float) -> bool:
        return not self.is_rating_unknown(rating)

    def on_rating_selected(self, rating: float) -> bool:
        if self.is_rating_unknown(rating):
            return False

        if self.is_rating_negative(rating):
            self.on_feedback(rating)
            outcome = RatingOutcome.FEEDBACK
        else:
            self.on_rate(rating)
            outcome = RatingOutcome.RATED

        if self._dynamic_rating is None:
            return False
        self._dynamic_rating.record_response(False, outcome=outcome)
        return True

    def on_rating_skipped(self, remind: bool) -> bool:
        if self._dynamic_rating is None:
            return False
        outcome = RatingOutcome.REMIND_LATER if remind else RatingOutcome.DISMISSED
        self._dynamic_rating.record_response(remind, outcome=outcome)
        return True
