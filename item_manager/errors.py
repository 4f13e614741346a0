"""Domain errors raised by the item store."""

from __future__ import annotations


class ItemManagerError(Exception):
    """Base class for item manager domain errors."""


class DuplicateNameError(ItemManagerError, ValueError):
    """Another item already carries this name (case-insensitive)."""

    def __init__(self, name: str, message: str = "This item already exists."):
        super().__init__(message)
        self.name = name
        self.message = message
