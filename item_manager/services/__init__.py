"""Service layer: item rules and the screen controller on top of them."""

from item_manager.services.item_service import (
    Confirm,
    ConfirmAction,
    ConfirmRequest,
    ItemService,
    Outcome,
    auto_confirm,
    filter_items,
    never_confirm,
    normalise_name,
)
from item_manager.services.screen_controller import Notice, ScreenController, ScreenState

__all__ = [
    "Confirm", "ConfirmAction", "ConfirmRequest",
    "ItemService", "Outcome",
    "auto_confirm", "never_confirm", "filter_items", "normalise_name",
    "Notice", "ScreenController", "ScreenState",
]
