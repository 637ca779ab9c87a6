from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from config import AppConfig
from rating.constants import Default, Key
from utils.config_paths import resolve_config_file

logger = logging.getLogger(__name__)


@dataclass
class RatingPolicy:
    name: str
    base_key: str = Key.BASE
    rate_interval: int = Default.RATE_INTERVAL
    rate_count: int = Default.RATE_COUNT
    remind_interval: int = Default.REMIND_INTERVAL

    @classmethod
    def from_config(cls, config: AppConfig, name: str = "default") -> RatingPolicy:
        return cls(
            name=name,
            base_key=config.rating_base_key,
            rate_interval=config.rating_rate_interval_days,
            rate_count=config.rating_rate_count,
            remind_interval=config.rating_remind_interval_days,
        )


def _non_negative_int(policy_name: str, field_name: str, raw: Any, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Policy '{policy_name}': {field_name} must be an integer") from exc
    if value < 0:
        raise ValueError(f"Policy '{policy_name}': {field_name} must be >= 0")
    return value


def parse_policies(data: Any) -> dict[str, RatingPolicy]:
    if not data:
        return {}
    if not isinstance(data, dict) or not isinstance(data.get("policies", {}), dict):
        raise ValueError("Rating policies must be a mapping under a 'policies' key")

    policies: dict[str, RatingPolicy] = {}
    for name, entry in (data.get("policies") or {}).items():
        entry = entry or {}
        if not isinstance(entry, dict):
            raise ValueError(f"Policy '{name}' must be a mapping")
        base_key = str(entry.get("base_key") or f"{name}_")
        policies[str(name)] = RatingPolicy(
            name=str(name),
            base_key=base_key,
            rate_interval=_non_negative_int(name, "rate_interval_days", entry.get("rate_interval_days"), Default.RATE_INTERVAL),
            rate_count=_non_negative_int(name, "rate_count", entry.get("rate_count"), Default.RATE_COUNT),
            remind_interval=_non_negative_int(
                name, "remind_interval_days", entry.get("remind_interval_days"), Default.REMIND_INTERVAL
            ),
        )

    base_keys = [policy.base_key for policy in policies.values()]
    duplicates = sorted({key for key in base_keys if base_keys.count(key) > 1})
    if duplicates:
        raise ValueError(f"Rating policies share base keys: {', '.join(duplicates)}")
    return policies


def load_policies(path: Path | str | None = None, config: AppConfig | None = None) -> dict[str, RatingPolicy]:
    """Load named policies from YAML, falling back to the env-configured default."""
    config = config or AppConfig()
    policy_path = Path(path) if path else resolve_config_file(config.rating_policies_file)
    if not policy_path.exists():
        logger.info("Rating policy file '%s' not found. Using default policy.", policy_path)
        return {"default": RatingPolicy.from_config(config)}

    data = yaml.safe_load(policy_path.read_text(encoding="utf-8"))
    policies = parse_policies(data)
    if not policies:
        logger.warning("Rating policy file '%s' is empty. Using default policy.", policy_path)
        return {"default": RatingPolicy.from_config(config)}
    logger.debug("Loaded %s rating policies from %s", len(policies), policy_path)
    return policies
