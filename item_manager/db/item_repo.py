"""Repository for the ``items`` table: CRUD with ACID transactions."""

from __future__ import annotations

from typing import Optional

from item_manager.db.database import Database
from item_manager.models.item import Item


class ItemRepository:
    """Single-Responsibility repository for item persistence."""

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def create(self, name: str) -> Item:
        with self._db.transaction() as conn:
            cur = conn.execute("INSERT INTO items (name) VALUES (?)", (name,))
        return Item(id=cur.lastrowid, name=name)

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, item_id: int) -> Optional[Item]:
        row = self._db.fetchone("SELECT id, name FROM items WHERE id = ?", (item_id,))
        return Item.from_row(row) if row else None

    def list_all(self) -> list[Item]:
        rows = self._db.fetchall("SELECT id, name FROM items ORDER BY id")
        return [Item.from_row(r) for r in rows]

    def count(self) -> int:
        row = self._db.fetchone("SELECT COUNT(*) AS count FROM items")
        return row["count"] if row else 0

    def find_by_name(self, name: str, exclude_id: Optional[int] = None) -> list[Item]:
        """Case-insensitive exact match on name, optionally skipping one id."""
        if exclude_id is None:
            rows = self._db.fetchall(
                "SELECT id, name FROM items WHERE LOWER(name) = LOWER(?)",
                (name,),
            )
        else:
            rows = self._db.fetchall(
                "SELECT id, name FROM items WHERE LOWER(name) = LOWER(?) AND id != ?",
                (name, exclude_id),
            )
        return [Item.from_row(r) for r in rows]

    # -- Update ----------------------------------------------------------------

    def rename(self, item_id: int, name: str) -> bool:
        """Set a new name. Returns False when no row has ``item_id``."""
        with self._db.transaction() as conn:
            cur = conn.execute("UPDATE items SET name = ? WHERE id = ?", (name, item_id))
        return cur.rowcount > 0

    # -- Delete ----------------------------------------------------------------

    def delete(self, item_id: int) -> bool:
        """Remove a row. Returns False when nothing matched."""
        with self._db.transaction() as conn:
            cur = conn.execute("DELETE FROM items WHERE id = ?", (item_id,))
        return cur.rowcount > 0
