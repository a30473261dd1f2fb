"""
worldclock/core/logs/logic/logger.py
====================================

Thread-safe singleton logger with a SQLite backend.

Every entry is also mirrored to the standard ``logging`` module under the
``worldclock`` logger so console handlers configured by the host see it.

- The database connection is opened lazily on the first write.
- One connection is reused for all operations, guarded by a lock.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from worldclock.core.common.db_interface import create_sqlite_connection
from worldclock.core.config.config_service import config_service
from worldclock.core.logs.models.log_entry import LogEntry

_std_logger = logging.getLogger("worldclock")

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


# --------------------------------------------------------------------------- #
#  Singleton class                                                            #
# --------------------------------------------------------------------------- #
class Logger:
    """Thread-safe singleton logger (feature/event entries)."""

    _instance: "Logger | None" = None
    _instance_lock = threading.Lock()

    def __new__(cls) -> "Logger":  # noqa: D401
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False  # type: ignore[attr-defined]
        return cls._instance  # type: ignore[return-value]

    def __init__(self) -> None:
        if getattr(self, "_initialized", False):
            return
        self._initialized = True

        self._lock = threading.Lock()
        self.db_path: Path = config_service.database.logging
        self._conn: sqlite3.Connection | None = None

    # ------------------------------------------------------------------ #
    #  Connection management (reuse single connection)                   #
    # ------------------------------------------------------------------ #
    def _get_connection(self) -> sqlite3.Connection:
        """Get or create the shared connection. Caller holds ``_lock``."""
        if self._conn is None:
            self._conn = create_sqlite_connection(self.db_path, check_same_thread=False)
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS logs (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    timestamp TEXT NOT NULL,
                    feature TEXT NOT NULL,
                    event TEXT NOT NULL,
                    reference_id TEXT,
                    message TEXT,
                    log_level TEXT NOT NULL DEFAULT 'INFO'
                )
                """
            )
            self._conn.commit()
        return self._conn

    def use_database(self, db_path: Path) -> None:
        """Switch to another log database (closes the current connection)."""
        self.close()
        with self._lock:
            self.db_path = Path(db_path)

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    # ------------------------------------------------------------------ #
    #  Public API: log                                                   #
    # ------------------------------------------------------------------ #
    def log(
        self,
        feature: str,
        event: str,
        *,
        level: str = "INFO",
        reference_id: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        """
        Persists a log entry and mirrors it to stdlib logging.

        A failing log database never breaks the caller, even when its folder
        cannot be created; the entry still reaches the stdlib logger.
        """
        entry = LogEntry(
            id=None,
            timestamp=datetime.now(timezone.utc),
            log_level=level,
            feature=feature,
            event=event,
            reference_id=reference_id,
            message=message,
        )

        _std_logger.log(
            _LEVELS.get(level.upper(), logging.INFO),
            "[%s] %s%s%s",
            feature,
            event,
            f" ({reference_id})" if reference_id else "",
            f": {message}" if message else "",
        )

        try:
            self._insert_log(entry)
        except (sqlite3.Error, OSError) as exc:
            _std_logger.warning("log database unavailable: %s", exc)

    # ------------------------------------------------------------------ #
    #  Fetch / Clear                                                     #
    # ------------------------------------------------------------------ #
    def fetch_logs(self, limit: int = 100, *, feature: Optional[str] = None) -> List[LogEntry]:
        query = "SELECT * FROM logs"
        params: list[object] = []
        if feature is not None:
            query += " WHERE feature = ?"
            params.append(feature)
        query += " ORDER BY id DESC LIMIT ?"
        params.append(limit)

        with self._lock:
            rows = self._get_connection().execute(query, params).fetchall()
        return [LogEntry.from_dict(dict(row)) for row in rows]

    def clear_logs(self) -> None:
        with self._lock:
            conn = self._get_connection()
            conn.execute("DELETE FROM logs")
            conn.commit()

    # ------------------------------------------------------------------ #
    #  Internal helpers                                                  #
    # ------------------------------------------------------------------ #
    def _insert_log(self, entry: LogEntry) -> None:
        with self._lock:
            conn = self._get_connection()
            conn.execute(
                """
                INSERT INTO logs
                    (timestamp, feature, event, reference_id, message, log_level)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    entry.timestamp.isoformat(),
                    entry.feature,
                    entry.event,
                    entry.reference_id,
                    entry.message,
                    entry.log_level,
                ),
            )
            conn.commit()


# --------------------------------------------------------------------------- #
#  Global instance                                                            #
# --------------------------------------------------------------------------- #
logger: Logger = Logger()
