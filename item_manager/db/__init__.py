"""Database layer: SQLite connection, schema and the item repository."""

from item_manager.db.database import Database, get_db, reset_db
from item_manager.db.item_repo import ItemRepository
from item_manager.db.schema import SCHEMA_DDL, SEED_ITEM_NAMES

__all__ = [
    "Database", "get_db", "reset_db",
    "ItemRepository",
    "SCHEMA_DDL", "SEED_ITEM_NAMES",
]
