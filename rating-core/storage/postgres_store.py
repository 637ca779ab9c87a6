from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import psycopg2

from config import AppConfig
from storage.base import PreferenceStore
from utils.retry import with_retry

logger = logging.getLogger(__name__)


def initialize_database(config: AppConfig) -> None:
    schema_path = Path(__file__).with_name("schemas.sql")
    schema_sql = schema_path.read_text(encoding="utf-8")

    def _apply_schema() -> None:
        connection = psycopg2.connect(
            dbname=config.postgres_db,
            user=config.postgres_user,
            password=config.postgres_password,
            host=config.postgres_host,
            port=config.postgres_port,
        )
        try:
            with connection:
                with connection.cursor() as cursor:
                    cursor.execute(schema_sql)
        finally:
            connection.close()

    with_retry(
        _apply_schema,
        retry_on=(psycopg2.OperationalError,),
        description="Rating schema setup",
    )


class PostgresPreferenceStore(PreferenceStore):
    """Persist rating preferences as JSONB rows in ``rating_preferences``."""

    def __init__(self, config: AppConfig) -> None:
        self._config = config

    def _connect(self):
        return psycopg2.connect(
            dbname=self._config.postgres_db,
            user=self._config.postgres_user,
            password=self._config.postgres_password,
            host=self._config.postgres_host,
            port=self._config.postgres_port,
        )

    def load(self, partition: str, key: str, default: Any = None) -> Any:
        connection = None
        try:
            connection = self._connect()
            with connection, connection.cursor() as cursor:
                cursor.execute(
                    "SELECT value FROM rating_preferences WHERE partition = %s AND pref_key = %s",
                    (partition, key),
                )
                row = cursor.fetchone()
        except psycopg2.Error as exc:
            logger.warning("Preference lookup failed for %s/%s: %s", partition, key, exc)
            return default
        finally:
            if connection is not None:
                connection.close()

        if row is None:
            return default
        return row[0]

    def save(self, partition: str, key: str, value: Any) -> None:
        self._execute(
            """
            INSERT INTO rating_preferences (partition, pref_key, value, updated_at)
            VALUES (%s, %s, %s::jsonb, NOW())
            ON CONFLICT (partition, pref_key)
            DO UPDATE SET value = EXCLUDED.value, updated_at = NOW()
            """,
            (partition, key, json.dumps(value)),
        )

    def delete(self, partition: str, key: str) -> None:
        self._execute(
            "DELETE FROM rating_preferences WHERE partition = %s AND pref_key = %s",
            (partition, key),
        )

    def contains(self, partition: str, key: str) -> bool:
        marker = object()
        return self.load(partition, key, marker) is not marker

    def clear(self, partition: str, prefix: str = "") -> int:
        pattern = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_") + "%"
        return self._execute(
            "DELETE FROM rating_preferences WHERE partition = %s AND pref_key LIKE %s",
            (partition, pattern),
        )

    def _execute(self, statement: str, params: tuple[Any, ...]) -> int:
        connection = None
        try:
            connection = self._connect()
            with connection, connection.cursor() as cursor:
                cursor.execute(statement, params)
                return max(cursor.rowcount, 0)
        except psycopg2.Error as exc:
            logger.warning("Preference write failed: %s", exc)
            return 0
        finally:
            if connection is not None:
                connection.close()
