from config import AppConfig
from storage.base import PreferenceStore
from storage.fallback_store import InMemoryPreferenceStore
from storage.postgres_store import PostgresPreferenceStore, initialize_database
from storage.redis_store import RedisPreferenceStore


def build_store(config: AppConfig) -> PreferenceStore:
    backend = (config.store_backend or "memory").strip().lower()
    if backend == "memory":
        return InMemoryPreferenceStore()
    if backend == "redis":
        return RedisPreferenceStore(
            host=config.redis_host,
            port=config.redis_port,
            password=config.redis_password,
            key_prefix=config.redis_key_prefix,
        )
    if backend == "postgres":
        initialize_database(config)
        return PostgresPreferenceStore(config)
    raise ValueError(f"Unknown rating store backend: {config.store_backend!r}")


__all__ = [
    "InMemoryPreferenceStore",
    "PostgresPreferenceStore",
    "PreferenceStore",
    "RedisPreferenceStore",
    "build_store",
    "initialize_database",
]
