"""Domain models for the item manager."""

from item_manager.models.item import Item

__all__ = ["Item"]
