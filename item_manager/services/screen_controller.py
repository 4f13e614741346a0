"""Screen controller: the state behind the single item screen.

Holds what the screen shows (input text, search query, the item being
edited, the current listing) and turns user actions into service calls.
Duplicate rejections become blocking notices instead of exceptions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from item_manager.errors import DuplicateNameError
from item_manager.models.item import Item
from item_manager.services.item_service import ItemService, Outcome, filter_items

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
    """A blocking message the user has to acknowledge."""
    title: str
    message: str


Notify = Callable[[Notice], None]


@dataclass
class ScreenState:
    text: str = ""
    search_query: str = ""
    editing_item: Optional[Item] = None
    items: list[Item] = field(default_factory=list)


class ScreenController:
    """Drives an :class:`ItemService` from screen events."""

    DUPLICATE_TITLE = "Duplicate item"

    def __init__(self, service: ItemService, notify: Optional[Notify] = None):
        self._service = service
        self._notify = notify or (lambda notice: None)
        self.state = ScreenState()

    # -- lifecycle -------------------------------------------------------------

    def start(self) -> None:
        """Initialise storage, then load the listing."""
        self._service.initialize()
        self.refresh()

    def refresh(self) -> list[Item]:
        self.state.items = self._service.list_items()
        return self.state.items

    # -- derived view ----------------------------------------------------------

    @property
    def visible_items(self) -> list[Item]:
        return filter_items(self.state.items, self.state.search_query)

    @property
    def is_editing(self) -> bool:
        return self.state.editing_item is not None

    @property
    def submit_label(self) -> str:
        return "Update Item" if self.is_editing else "Add Item"

    @property
    def can_add_from_search(self) -> bool:
        return not self.visible_items and bool(self.state.search_query.strip())

    # -- input fields ----------------------------------------------------------

    def set_text(self, text: str) -> None:
        self.state.text = text

    def clear_text(self) -> None:
        self.state.text = ""

    def set_search(self, query: str) -> None:
        self.state.search_query = query

    def clear_search(self) -> None:
        self.state.search_query = ""

    # -- actions ---------------------------------------------------------------

    def begin_edit(self, item: Item) -> None:
        """Load ``item`` into the input; replaces any earlier edit target."""
        self.state.text = item.name
        self.state.editing_item = item

    def submit(self) -> Outcome:
        if self.state.editing_item is not None:
            return self.update_item()
        return self.add_item()

    def add_item(self, text: Optional[str] = None) -> Outcome:
        raw = self.state.text if text is None else text
        try:
            outcome = self._service.add_item(raw)
        except DuplicateNameError as e:
            self._notify(Notice(self.DUPLICATE_TITLE, e.message))
            return Outcome.REJECTED

        if outcome is Outcome.COMMITTED:
            self.state.text = ""
            self.state.search_query = ""
            self.refresh()
        return outcome

    def add_from_search(self) -> Outcome:
        """Add the current search query as a new item."""
        query = self.state.search_query
        if not query.strip():
            return Outcome.IGNORED
        self.state.text = query
        return self.add_item(query)

    def update_item(self, text: Optional[str] = None) -> Outcome:
        editing = self.state.editing_item
        if editing is None:
            return Outcome.IGNORED
        raw = self.state.text if text is None else text
        try:
            outcome = self._service.update_item(editing, raw)
        except DuplicateNameError as e:
            self._notify(Notice(self.DUPLICATE_TITLE, e.message))
            return Outcome.REJECTED

        if outcome is Outcome.COMMITTED:
            self.state.text = ""
            self.state.editing_item = None
            self.refresh()
        return outcome

    def delete_item(self, item_id: int) -> Outcome:
        outcome = self._service.delete_item(item_id)
        if outcome is Outcome.COMMITTED:
            self.refresh()
        return outcome
