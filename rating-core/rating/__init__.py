"""Rating prompt eligibility and response tracking."""

from rating.constants import PREFS, Default, Key, Value
from rating.engine import EligibilityEngine, EligibilityReport, RatingThresholds, is_due_by_date
from rating.errors import RatingInitializationError
from rating.listener import (
    DynamicRatingListener,
    RatingListener,
    RatingOutcome,
    RatingPresenter,
    RatingResponse,
    classify_rating,
)
from rating.policies import RatingPolicy, load_policies
from rating.state import RatingSnapshot, RatingState
from rating.tracker import DynamicRating

__all__ = [
    "PREFS",
    "Default",
    "DynamicRating",
    "DynamicRatingListener",
    "EligibilityEngine",
    "EligibilityReport",
    "Key",
    "RatingInitializationError",
    "RatingListener",
    "RatingOutcome",
    "RatingPolicy",
    "RatingPresenter",
    "RatingResponse",
    "RatingSnapshot",
    "RatingState",
    "RatingThresholds",
    "Value",
    "classify_rating",
    "is_due_by_date",
    "load_policies",
]
