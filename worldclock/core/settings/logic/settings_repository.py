from __future__ import annotations
import json, sqlite3
from pathlib import Path
from typing import Any, Mapping
from worldclock.core.common.db_interface import SQLiteRepository
from worldclock.core.logs.logic.logger import logger

def _to_json(v: Any) -> str:            # serialize
    try: return json.dumps(v)
    except TypeError: return json.dumps(str(v))

def _from_json(txt: str) -> Any:        # deserialize; raises on corrupt rows
    return json.loads(txt)

_UPSERT = """
    INSERT INTO settings (namespace,key,value)
    VALUES (?,?,?)
    ON CONFLICT(namespace,key) DO
    UPDATE SET value=excluded.value
"""

# ------------------------------------------------------------------ #
class SettingsRepository(SQLiteRepository):
    """SQLite table ``settings(namespace, key, value)`` with JSON values."""

    def __init__(self, db_path: Path) -> None:
        super().__init__(db_path, check_same_thread=False)

    # ------------------------- public API ---------------------------- #
    def get(self, ns: str, key: str, fb: Any = None) -> Any | None:
        row = self.conn.execute(
            "SELECT value FROM settings WHERE namespace=? AND key=?",
            (ns, key),
        ).fetchone()
        return _from_json(row["value"]) if row else fb

    def set(self, ns: str, key: str, val: Any) -> None:
        with self.conn:
            self.conn.execute(_UPSERT, (ns, key, _to_json(val)))

    def set_many(self, ns: str, values: Mapping[str, Any]) -> None:
        rows = [(ns, key, _to_json(val)) for key, val in values.items()]
        with self.conn:                 # one transaction
            self.conn.executemany(_UPSERT, rows)

    def delete(self, ns: str, key: str) -> None:
        with self.conn:
            self.conn.execute(
                "DELETE FROM settings WHERE namespace=? AND key=?",
                (ns, key),
            )

    # ------------------------- schema -------------------------------- #
    def _on_connect(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS settings(
                namespace TEXT NOT NULL,
                key       TEXT NOT NULL,
                value     TEXT NOT NULL,
                PRIMARY KEY(namespace,key)
            )
            """
        )
        conn.commit()
        logger.log("SettingsRepo", "Open", level="DEBUG", message=str(self.db_path))
