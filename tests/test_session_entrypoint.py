from pathlib import Path

from config import AppConfig
import main


def test_start_session_reports_each_policy(tmp_path, monkeypatch) -> None:
    (tmp_path / "rating_policies.yaml").write_text(
        "policies:\n"
        "  instant:\n"
        "    base_key: instant_\n"
        "    rate_interval_days: 0\n"
        "    rate_count: 0\n"
        "    remind_interval_days: 0\n"
        "  slow:\n"
        "    base_key: slow_\n"
    )
    monkeypatch.setenv("RATING_CONFIG_DIR", str(tmp_path))

    decisions = main.start_session(AppConfig(store_backend="memory", decision_log_enabled=False))
    assert decisions == {"instant": True, "slow": False}


def test_session_start_persists_last_launch_for_storage_compatibility() -> None:
    source = (Path(__file__).resolve().parents[1] / "rating-core" / "rating" / "tracker.py").read_text()
    assert "self._state.set_last_launch(now)" in source
    assert "def record_response(self, remind: bool" in source
