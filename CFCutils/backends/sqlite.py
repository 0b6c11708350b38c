"""SQLite backend implementation for a local config file store."""

from __future__ import annotations

import datetime
import logging
import sqlite3
import time
from functools import wraps
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from .base import ConfigStoreBackend
from ..exceptions import ConnectionError, DatabaseError, ValidationError
from ..schemas import CONFIG_FILE_SCHEMA
from ..schemas.validators import ConfigFileCreate
from ..settings import get_journal_mode

logger = logging.getLogger(__name__)

_COLUMNS = tuple(CONFIG_FILE_SCHEMA)
_UPDATABLE_FIELDS = {"name", "comment", "content", "provider_id"}


# -----------------------------------------------------------------------------
def get_connection(db_file, timeout=30.0):
    """
    Open sqlite3 in IMMEDIATE mode, set journal mode, and set a busy timeout.

    Journal mode defaults to WAL but can be overridden with the environment
    variable CFC_DB_JOURNAL. Acceptable values include WAL, DELETE, TRUNCATE,
    MEMORY, OFF. On some networked filesystems WAL may cause 'disk I/O error'.
    Set CFC_DB_JOURNAL=DELETE to improve compatibility.
    """
    conn = sqlite3.connect(db_file, timeout=timeout)
    conn.isolation_level = "IMMEDIATE"

    journal = get_journal_mode()
    try:
        conn.execute(f"PRAGMA journal_mode = {journal};")
    except sqlite3.OperationalError:
        logger.warning("Journal mode %s rejected, falling back to DELETE", journal)
        conn.execute("PRAGMA journal_mode = DELETE;")

    conn.execute("PRAGMA busy_timeout = 5000;")
    return conn


def retry_db(max_retries=3, retry_delay=1.0):
    """
    Decorator: retry on 'database is locked' errors, wrap the rest.
    """
    def deco(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            last = None
            for i in range(max_retries):
                try:
                    return fn(*args, **kwargs)
                except sqlite3.OperationalError as e:
                    last = e
                    if "locked" in str(e).lower() and i < max_retries - 1:
                        time.sleep(retry_delay)
                        continue
                    raise DatabaseError(str(e)) from e
                except sqlite3.Error as e:
                    raise DatabaseError(str(e)) from e
            raise DatabaseError(str(last)) from last
        return wrapper
    return deco


def _now():
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


class SQLiteBackend(ConfigStoreBackend):
    """Single-file SQLite implementation of the ConfigStoreBackend interface."""

    def __init__(self, connection_string: str):
        super().__init__(connection_string)
        if connection_string.startswith("sqlite:///"):
            self.db_file = connection_string[len("sqlite:///"):]
        else:
            self.db_file = connection_string
        try:
            self._init_schema()
        except (sqlite3.Error, OSError) as exc:
            raise ConnectionError(f"Cannot open SQLite store {self.db_file}: {exc}") from exc

    def _init_schema(self) -> None:
        """Create the config_files table if it does not exist yet."""
        Path(self.db_file).parent.mkdir(parents=True, exist_ok=True)
        conn = get_connection(self.db_file)
        try:
            conn.executescript("""
            CREATE TABLE IF NOT EXISTS config_files (
              config_id    TEXT PRIMARY KEY,
              name         TEXT,
              comment      TEXT,
              content      TEXT NOT NULL,
              provider_id  TEXT,
              created_at   TEXT NOT NULL,
              updated_at   TEXT NOT NULL
            );

            CREATE INDEX IF NOT EXISTS idx_config_provider ON config_files(provider_id);
            """)
            conn.commit()
        finally:
            conn.close()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    @retry_db()
    def get_config(self, config_id: str) -> Optional[Dict]:
        conn = get_connection(self.db_file)
        try:
            c = conn.cursor()
            c.execute(f"SELECT {','.join(_COLUMNS)} FROM config_files WHERE config_id=?", (config_id,))
            row = c.fetchone()
        finally:
            conn.close()
        if not row:
            return None
        return dict(zip(_COLUMNS, row))

    @retry_db()
    def list_configs(self, detailed: bool = False) -> List[Dict]:
        columns = _COLUMNS if detailed else tuple(col for col in _COLUMNS if col != "content")
        conn = get_connection(self.db_file)
        try:
            c = conn.cursor()
            c.execute(f"SELECT {','.join(columns)} FROM config_files ORDER BY config_id")
            rows = c.fetchall()
        finally:
            conn.close()
        return [dict(zip(columns, row)) for row in rows]

    # ------------------------------------------------------------------
    # Management
    # ------------------------------------------------------------------
    @retry_db()
    def add_config(
        self,
        config_id: str,
        content: str,
        name: Optional[str] = None,
        comment: Optional[str] = None,
        provider_id: Optional[str] = None,
    ) -> str:
        try:
            validated = ConfigFileCreate(
                config_id=config_id,
                content=content,
                name=name,
                comment=comment,
                provider_id=provider_id,
            )
        except PydanticValidationError as exc:
            raise ValidationError(str(exc)) from exc

        now = _now()
        conn = get_connection(self.db_file)
        try:
            conn.execute("""
              INSERT INTO config_files
                (config_id,name,comment,content,provider_id,created_at,updated_at)
              VALUES (?,?,?,?,?,?,?)
            """, (validated.config_id, validated.name, validated.comment,
                  validated.content, validated.provider_id, now, now))
            conn.commit()
        except sqlite3.IntegrityError as exc:
            raise ValidationError(f"Config file already exists: {config_id}") from exc
        finally:
            conn.close()

        logger.info("Added config file %s", config_id)
        return config_id

    @retry_db()
    def update_config(self, config_id: str, **updates) -> bool:
        unknown = set(updates) - _UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        if "content" in updates and not isinstance(updates["content"], str):
            raise ValidationError("content must be a string")

        parts = [f"{key}=?" for key in updates]
        vals = list(updates.values())
        parts.append("updated_at=?")
        vals.append(_now())
        vals.append(config_id)

        conn = get_connection(self.db_file)
        try:
            c = conn.cursor()
            c.execute(f"UPDATE config_files SET {','.join(parts)} WHERE config_id=?", vals)
            conn.commit()
            return c.rowcount > 0
        finally:
            conn.close()

    @retry_db()
    def delete_config(self, config_id: str) -> bool:
        conn = get_connection(self.db_file)
        try:
            c = conn.cursor()
            c.execute("DELETE FROM config_files WHERE config_id=?", (config_id,))
            conn.commit()
            return c.rowcount > 0
        finally:
            conn.close()
