import pytest

from rating import DynamicRating, DynamicRatingListener, RatingListener, RatingResponse, classify_rating
from rating.constants import PREFS


class RecordingListener(DynamicRatingListener):
    def __init__(self, dynamic_rating, positive_threshold: float = 4.0) -> None:
        super().__init__(dynamic_rating, positive_threshold)
        self.rated: list[float] = []
        self.feedback: list[float] = []

    def on_rate(self, rating: float) -> None:
        self.rated.append(rating)

    def on_feedback(self, rating: float) -> None:
        self.feedback.append(rating)


@pytest.mark.parametrize(
    ("rating", "expected"),
    [
        (-1.0, RatingResponse.UNKNOWN),
        (0.0, RatingResponse.UNKNOWN),
        (0.5, RatingResponse.NEGATIVE),
        (3.99, RatingResponse.NEGATIVE),
        (4.0, RatingResponse.POSITIVE),
        (5.0, RatingResponse.POSITIVE),
    ],
)
def test_classify_rating_boundaries(rating: float, expected: RatingResponse) -> None:
    assert classify_rating(rating) is expected


def test_classify_rating_honours_custom_threshold() -> None:
    assert classify_rating(4.0, positive=4.5) is RatingResponse.NEGATIVE
    assert classify_rating(4.5, positive=4.5) is RatingResponse.POSITIVE


def test_listener_is_a_rating_listener_and_abstract() -> None:
    assert issubclass(DynamicRatingListener, RatingListener)
    with pytest.raises(TypeError):
        DynamicRatingListener(None)  # type: ignore[abstract]


def test_action_labels_follow_rating() -> None:
    listener = RecordingListener(None)
    assert listener.get_action_rate(0) == "Rate"
    assert listener.get_action_rate(2.0) == "Feedback"
    assert listener.get_action_rate(4.0) == "Rate"
    assert listener.get_action_later() == "Later"
    assert listener.get_action_skip() == "Skip"
    assert listener.get_rating_title()
    assert listener.get_rating_message()
    assert not listener.is_confirm_enabled(0)
    assert listener.is_confirm_enabled(1.0)


def test_positive_rating_is_submitted_and_stops_requests(store, clock) -> None:
    tracker = DynamicRating(store, clock=clock).initialize()
    listener = RecordingListener(tracker)

    assert listener.on_rating_selected(5.0) is True
    assert listener.rated == [5.0]
    assert listener.feedback == []
    assert tracker.snapshot().is_request is False
    assert not store.contains(PREFS, "adr_key_last_reminder")


def test_negative_rating_becomes_feedback(store, clock) -> None:
    tracker = DynamicRating(store, clock=clock).initialize()
    listener = RecordingListener(tracker)

    assert listener.on_rating_selected(2.0) is True
    assert listener.feedback == [2.0]
    assert listener.rated == []
    assert tracker.snapshot().is_request is False


def test_unknown_rating_is_ignored(store, clock) -> None:
    tracker = DynamicRating(store, clock=clock).initialize()
    listener = RecordingListener(tracker)

    assert listener.on_rating_selected(0) is False
    assert listener.rated == [] and listener.feedback == []
    assert tracker.snapshot().is_request is True
    assert tracker.snapshot().launch_count == 1


def test_skip_with_remind_keeps_requesting(store, clock) -> None:
    tracker = DynamicRating(store, clock=clock).initialize()
    listener = RecordingListener(tracker)

    assert listener.on_rating_skipped(True) is True
    snapshot = tracker.snapshot()
    assert snapshot.is_request is True
    assert snapshot.launch_count == 0
    assert snapshot.last_reminder == clock()


def test_skip_permanently_stops_requests(store, clock) -> None:
    tracker = DynamicRating(store, clock=clock).initialize()
    listener = RecordingListener(tracker)

    assert listener.on_rating_skipped(False) is True
    assert tracker.snapshot().is_request is False


def test_listener_without_tracker_does_not_act() -> None:
    listener = RecordingListener(None)
    assert listener.on_rating_skipped(True) is False
    assert listener.on_rating_selected(5.0) is False
    assert listener.rated == [5.0]
