"""Item service: the business rules behind the item list.

Every write is validated (trim, empty no-op, case-insensitive duplicate
pre-check) and then held behind a confirmation gate supplied by the
caller. The service never talks to a UI directly, so all rules can be
exercised headless.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from item_manager.db.database import Database
from item_manager.db.item_repo import ItemRepository
from item_manager.errors import DuplicateNameError
from item_manager.models.item import Item

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    COMMITTED = "committed"
    CANCELLED = "cancelled"
    IGNORED = "ignored"
    REJECTED = "rejected"


class ConfirmAction(str, Enum):
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class ConfirmRequest:
    """The yes/no question shown before a write commits."""
    action: ConfirmAction
    title: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"action": self.action.value, "title": self.title, "message": self.message}


Confirm = Callable[[ConfirmRequest], bool]


def auto_confirm(request: ConfirmRequest) -> bool:
    return True


def never_confirm(request: ConfirmRequest) -> bool:
    return False


# -- pure helpers ---------------------------------------------------------------

def normalise_name(raw_text: Optional[str]) -> str:
    """Strip surrounding whitespace; ``None`` counts as empty."""
    return (raw_text or "").strip()


def filter_items(items: Iterable[Item], query: Optional[str]) -> list[Item]:
    """Keep items whose name contains ``query``, ignoring case."""
    needle = (query or "").lower()
    return [item for item in items if needle in (item.name or "").lower()]


def add_request(name: str) -> ConfirmRequest:
    return ConfirmRequest(
        ConfirmAction.ADD, "Confirm Add", f'Are you sure you want to add "{name}"?'
    )


def update_request(name: str) -> ConfirmRequest:
    return ConfirmRequest(
        ConfirmAction.UPDATE,
        "Confirm Update",
        f'Are you sure you want to update the item to "{name}"?',
    )


def delete_request() -> ConfirmRequest:
    return ConfirmRequest(
        ConfirmAction.DELETE, "Confirm Delete", "Are you sure you want to delete this item?"
    )


class ItemService:
    """
    Facade for item CRUD.

    The database handle and the confirmation gate are injected so the
    service can run against an in-memory store with scripted answers.
    """

    def __init__(self, db: Database, confirm: Confirm):
        self._db = db
        self._repo = ItemRepository(db)
        self._confirm = confirm

    # -- Setup -----------------------------------------------------------------

    def initialize(self, seed_names: Optional[Iterable[str]] = None) -> None:
        """Create the table and seed it on first run."""
        self._db.init(seed_names=seed_names)

    # -- Read ------------------------------------------------------------------

    def list_items(self) -> list[Item]:
        return self._repo.list_all()

    def get_item(self, item_id: int) -> Optional[Item]:
        return self._repo.get_by_id(item_id)

    # -- Create ----------------------------------------------------------------

    def add_item(self, raw_text: Optional[str], confirm: Optional[Confirm] = None) -> Outcome:
        """Insert a new item after the duplicate check and confirmation."""
        name = normalise_name(raw_text)
        if not name:
            logger.debug("Ignoring add with empty name")
            return Outcome.IGNORED

        if self._repo.find_by_name(name):
            logger.warning(f"Rejected duplicate item name: {name!r}")
            raise DuplicateNameError(name, "This item already exists.")

        if not (confirm or self._confirm)(add_request(name)):
            logger.debug(f"Add of {name!r} cancelled")
            return Outcome.CANCELLED

        item = self._repo.create(name)
        logger.info(f"Created item {item.id}: {item.name}")
        return Outcome.COMMITTED

    # -- Update ----------------------------------------------------------------

    def update_item(
        self,
        editing_item: Item,
        raw_text: Optional[str],
        confirm: Optional[Confirm] = None,
    ) -> Outcome:
        """Rename ``editing_item``; its own current name never counts as a duplicate."""
        name = normalise_name(raw_text)
        if not name:
            logger.debug("Ignoring update with empty name")
            return Outcome.IGNORED

        if self._repo.find_by_name(name, exclude_id=editing_item.id):
            logger.warning(f"Rejected rename of item {editing_item.id} to duplicate {name!r}")
            raise DuplicateNameError(name, "Another item with this name already exists.")

        if not (confirm or self._confirm)(update_request(name)):
            logger.debug(f"Update of item {editing_item.id} cancelled")
            return Outcome.CANCELLED

        self._repo.rename(editing_item.id, name)
        logger.info(f"Updated item {editing_item.id}: {editing_item.name!r} -> {name!r}")
        return Outcome.COMMITTED

    # -- Delete ----------------------------------------------------------------

    def delete_item(self, item_id: int, confirm: Optional[Confirm] = None) -> Outcome:
        """Remove an item. Unknown ids are a silent no-op."""
        if not (confirm or self._confirm)(delete_request()):
            logger.debug(f"Delete of item {item_id} cancelled")
            return Outcome.CANCELLED

        if self._repo.delete(item_id):
            logger.info(f"Deleted item {item_id}")
        else:
            logger.debug(f"Delete of item {item_id} matched no rows")
        return Outcome.COMMITTED
