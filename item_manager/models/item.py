"""Item domain model: a named record in the personal list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Item:
    """A persisted named record. ``id`` is assigned by the store."""

    id: int
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Item":
        return cls(id=int(row["id"]), name=row["name"])
