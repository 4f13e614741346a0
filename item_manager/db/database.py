"""Core database connection with ACID transaction support."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Iterable, Optional

from item_manager.db.schema import SCHEMA_DDL, SEED_ITEM_NAMES

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"


class Database:
    """
    SQLite database wrapper with explicit ACID transaction support.

    Every mutation goes through ``transaction()``, which commits on success
    and rolls back on failure. Pass ``":memory:"`` as the path for a
    throwaway store.
    """

    def __init__(self, path: Optional[Path | str] = None):
        from item_manager.config import get_db_path
        if path is None:
            self.path: Path = get_db_path()
        elif isinstance(path, str):
            self.path = Path(path)
        else:
            self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    # -- connection lifecycle --------------------------------------------------

    @property
    def in_memory(self) -> bool:
        return str(self.path) == MEMORY_PATH

    def _ensure_dir(self) -> None:
        if not self.in_memory:
            self.path.parent.mkdir(parents=True, exist_ok=True)

    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._ensure_dir()
            self._conn = sqlite3.connect(str(self.path), check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None

    def init(self, seed_names: Optional[Iterable[str]] = None) -> None:
        """Create the items table and seed it when empty (idempotent)."""
        conn = self.connection()
        conn.executescript(SCHEMA_DDL)
        conn.commit()

        row = self.fetchone("SELECT COUNT(*) AS count FROM items")
        if row and row["count"] == 0:
            names = list(SEED_ITEM_NAMES if seed_names is None else seed_names)
            with self.transaction() as tx:
                tx.executemany(
                    "INSERT INTO items (name) VALUES (?)",
                    [(name,) for name in names],
                )
            logger.info(f"Seeded {len(names)} items into {self.path}")

    # -- transaction helpers ---------------------------------------------------

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """ACID transaction: commits on success, rolls back on exception."""
        conn = self.connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    # -- low-level query helpers -----------------------------------------------

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        return self.connection().execute(sql, params)

    def fetchone(self, sql: str, params: tuple = ()) -> Optional[dict[str, Any]]:
        row = self.connection().execute(sql, params).fetchone()
        return dict(row) if row else None

    def fetchall(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        rows = self.connection().execute(sql, params).fetchall()
        return [dict(r) for r in rows]


# -- module singleton ----------------------------------------------------------

_default_db: Optional[Database] = None


def get_db(path: Optional[Path | str] = None) -> Database:
    """Return (and lazily initialise) the process-wide Database."""
    global _default_db
    if _default_db is None:
        _default_db = Database(path)
        _default_db.init()
    return _default_db


def reset_db() -> None:
    """Close and discard the singleton (useful in tests)."""
    global _default_db
    if _default_db is not None:
        _default_db.close()
        _default_db = None
