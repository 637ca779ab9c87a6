import logging

from config import AppConfig
from rating import DynamicRating, load_policies
from storage import build_store
from utils.decision_log import DecisionLogger

logger = logging.getLogger("rating-main")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def start_session(config: AppConfig) -> dict[str, bool]:
    """Record one launch for every configured policy and report which are due."""
    store = build_store(config)
    decision_logger = DecisionLogger.from_config(config)
    decisions: dict[str, bool] = {}

    for name, policy in load_policies(config=config).items():
        tracker = DynamicRating.from_policy(store, policy, decision_logger=decision_logger).initialize()
        report = tracker.explain()
        decisions[name] = report.should_prompt
        if report.should_prompt:
            logger.info("Policy '%s' (%s) is due for a rating prompt", name, policy.base_key)
        else:
            logger.info(
                "Policy '%s' (%s) not due: %s",
                name,
                policy.base_key,
                ", ".join(report.blocking_checks()),
            )
    return decisions


def main() -> None:
    config = AppConfig()
    configure_logging(config.log_level)
    logger.info("Starting rating session (backend=%s, env=%s)", config.store_backend, config.environment)
    start_session(config)


if __name__ == "__main__":
    main()
