"""
Durable key-value storage holding JSON-serialized blobs
"""
import json
import sqlite3
from typing import Any, Optional

import structlog

from core.exceptions import StorageError, StorageUnavailable
from .connection import DatabaseConnection

logger = structlog.get_logger(__name__)


class KeyValueStorage:
    # get/set/remove over the Storage table; values round-trip through JSON

    def __init__(self, db_connection: DatabaseConnection):
        self.db = db_connection

    def get_item(self, key: str) -> Optional[Any]:
        # Returns the decoded value or None when the key is absent
        try:
            with self.db.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT value FROM Storage WHERE storage_key = ?", (key,))
                row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.error("Storage read failed", key=key, error=str(e))
            raise StorageError(f"could not read '{key}': {e}") from e

        if row is None:
            return None

        try:
            return json.loads(row[0])
        except ValueError as e:
            logger.error("Stored value is not valid JSON", key=key)
            raise StorageError(f"corrupt value for '{key}'") from e

    def set_item(self, key: str, value: Any) -> None:
        # Insert or replace the whole blob
        payload = json.dumps(value, ensure_ascii=False)
        try:
            with self.db.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("""
                INSERT INTO Storage (storage_key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(storage_key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """, (key, payload))
                conn.commit()
        except sqlite3.Error as e:
            logger.error("Storage write failed", key=key, error=str(e))
            raise StorageUnavailable(f"could not write '{key}': {e}") from e

    def remove_item(self, key: str) -> None:
        try:
            with self.db.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("DELETE FROM Storage WHERE storage_key = ?", (key,))
                conn.commit()
        except sqlite3.Error as e:
            logger.error("Storage delete failed", key=key, error=str(e))
            raise StorageUnavailable(f"could not remove '{key}': {e}") from e
