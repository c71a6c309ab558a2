"""
Key-Value Stores

String-keyed, string-valued stores behind KeyValueResumeRepository.
SQLiteKeyValueStore is the durable implementation, the desktop counterpart
of browser local storage.
"""

import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from resume_builder.contexts.application.exceptions import (
    StorageUnavailableError,
    StorageWriteError,
)


class KeyValueStore(ABC):
    """Minimal local-storage style interface."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any existing value."""


class SQLiteKeyValueStore(KeyValueStore):
    """
    Key-value store persisted in a single SQLite table.

    A connection is opened per call, so a store object holds no open handles
    and several sessions can point at the same file.

    sqlite3 failures are reported as StorageUnavailableError (cannot open or
    read) or StorageWriteError (write refused).
    """

    def __init__(self, db_path: Path):
        """
        Args:
            db_path: SQLite database file (created with its parent directory on first write)
        """
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.db_path))
        except (sqlite3.Error, OSError) as e:
            raise StorageUnavailableError(f"Cannot open store {self.db_path}: {e}") from e

        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS items (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """
            )
        except sqlite3.Error as e:
            conn.close()
            raise StorageUnavailableError(f"Cannot open store {self.db_path}: {e}") from e
        return conn

    def get_item(self, key: str) -> Optional[str]:
        conn = self._connect()
        try:
            row = conn.execute("SELECT value FROM items WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Cannot read from store: {e}", key) from e
        finally:
            conn.close()
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    "INSERT INTO items (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, value),
                )
        except sqlite3.Error as e:
            raise StorageWriteError(f"Cannot write to store: {e}", key) from e
        finally:
            conn.close()
