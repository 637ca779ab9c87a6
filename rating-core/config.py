import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int, minimum: int | None = None) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    parsed = int(value.strip())
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {parsed}")
    return parsed


@dataclass
class AppConfig:
    rating_base_key: str = os.getenv("RATING_BASE_KEY", "adr_key_")
    rating_rate_interval_days: int = _env_int("RATING_RATE_INTERVAL_DAYS", 2, minimum=0)
    rating_rate_count: int = _env_int("RATING_RATE_COUNT", 5, minimum=0)
    rating_remind_interval_days: int = _env_int("RATING_REMIND_INTERVAL_DAYS", 2, minimum=0)
    rating_policies_file: str = os.getenv("RATING_POLICIES_FILE", "rating_policies.yaml")

    store_backend: str = os.getenv("RATING_STORE_BACKEND", "memory")
    redis_key_prefix: str = os.getenv("RATING_REDIS_PREFIX", "rating")

    redis_host: str = os.getenv("REDIS_HOST", "redis")
    redis_port: int = int(os.getenv("REDIS_PORT", "6379"))
    redis_password: str = os.getenv("REDIS_PASSWORD", "")

    postgres_user: str = os.getenv("POSTGRES_USER", "rating")
    postgres_password: str = os.getenv("POSTGRES_PASSWORD", "changeme123")
    postgres_db: str = os.getenv("POSTGRES_DB", "rating_state")
    postgres_host: str = os.getenv("POSTGRES_HOST", "postgres")
    postgres_port: int = int(os.getenv("POSTGRES_PORT", "5432"))

    decision_log_enabled: bool = _env_bool("RATING_DECISION_LOG_ENABLED", True)

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    environment: str = os.getenv("ENVIRONMENT", "development")

