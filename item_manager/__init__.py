"""Item Manager: a personal list of named items backed by local SQLite."""

__version__ = "1.0.0"
