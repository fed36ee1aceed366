from __future__ import annotations

import logging
from typing import Optional

import mysql.connector

from ..core.exceptions import PersistenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import SnapshotStore

logger = logging.getLogger(__name__)


class MySQLSnapshotStore(SnapshotStore):
    """Snapshots kept in the ``kv_store`` table (see database/schema.sql)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_item(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT payload FROM kv_store WHERE store_key=%s", (key,))
                r = fetchone(cur)
                return r["payload"] if r else None
        except mysql.connector.Error as e:
            logger.error("Failed to read %s from MySQL: %s", key, e)
            raise PersistenceError(f"Cannot read snapshot {key!r}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO kv_store(store_key, payload)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE payload=VALUES(payload), updated_at=CURRENT_TIMESTAMP
                    """,
                    (key, value),
                )
        except mysql.connector.Error as e:
            logger.error("Failed to write %s to MySQL: %s", key, e)
            raise PersistenceError(f"Cannot save snapshot {key!r}: {e}") from e

    def remove_item(self, key: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM kv_store WHERE store_key=%s", (key,))
        except mysql.connector.Error as e:
            logger.error("Failed to remove %s from MySQL: %s", key, e)
            raise PersistenceError(f"Cannot remove snapshot {key!r}: {e}") from e
