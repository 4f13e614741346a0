"""Database schema DDL and first-run seed data."""

SCHEMA_DDL = """
CREATE TABLE IF NOT EXISTS items (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT);
"""

# Inserted, in this order, when the items table is found empty.
SEED_ITEM_NAMES: tuple[str, ...] = ("test1", "test2", "test3")
