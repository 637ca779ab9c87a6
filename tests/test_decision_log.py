import json
import logging

from config import AppConfig
from rating import DynamicRating, RatingOutcome
from utils.decision_log import DECISION_LOG_KEY, DecisionLogger


def test_decision_logger_pushes_capped_json_entries(fake_redis) -> None:
    decision_logger = DecisionLogger(redis_client=fake_redis)
    for index in range(510):
        decision_logger.log("session_start", f"session {index}", base_key="adr_key_")

    assert len(fake_redis.lists[DECISION_LOG_KEY]) == 500
    latest = json.loads(fake_redis.lists[DECISION_LOG_KEY][0])
    assert latest["summary"] == "session 509"
    assert latest["base_key"] == "adr_key_"
    assert decision_logger.recent(limit=2)[1]["summary"] == "session 508"


def test_decision_logger_survives_redis_failures(fake_redis, caplog) -> None:
    fake_redis.fail = True
    decision_logger = DecisionLogger(redis_client=fake_redis)
    with caplog.at_level(logging.INFO, logger="utils.decision_log"):
        payload = decision_logger.log("state_reset", "cleared", base_key="a_")
    assert payload is not None and payload["event_type"] == "state_reset"
    assert decision_logger.recent() == []
    assert "state_reset" in caplog.text


def test_disabled_decision_logger_records_nothing(fake_redis) -> None:
    decision_logger = DecisionLogger(redis_client=fake_redis, enabled=False)
    assert decision_logger.log("session_start", "ignored") is None
    assert DECISION_LOG_KEY not in fake_redis.lists
    assert DecisionLogger.from_config(AppConfig(decision_log_enabled=False)).log("x", "y") is None


def test_tracker_logs_transitions(store, clock, fake_redis) -> None:
    decision_logger = DecisionLogger(redis_client=fake_redis)
    tracker = DynamicRating(store, clock=clock, decision_logger=decision_logger)
    tracker.initialize()
    tracker.record_response(False, outcome=RatingOutcome.RATED)
    tracker.reset()

    events = [entry["event_type"] for entry in decision_logger.recent()]
    assert events == ["state_reset", "response_recorded", "session_start"]
    response = decision_logger.recent()[1]
    assert response["details"] == {"remind": False, "outcome": "rated"}


def test_decision_logger_from_config_skips_redis_for_other_backends() -> None:
    decision_logger = DecisionLogger.from_config(AppConfig(store_backend="memory"))
    assert decision_logger.log("session_start", "kept in the application log") is not None
    assert decision_logger.recent() == []
