"""Tests for the screen controller: input state, edit target, notices."""

from __future__ import annotations

import unittest
from unittest.mock import MagicMock

from item_manager.db.database import Database
from item_manager.services.item_service import ItemService, Outcome
from item_manager.services.screen_controller import Notice, ScreenController


def _names(items) -> list[str]:
    return [i.name for i in items]


class ScreenTestBase(unittest.TestCase):
    seed = ("Apple", "Banana", "grape")

    def setUp(self):
        self.db = Database(":memory:")
        self.db.init(seed_names=self.seed)
        self.confirm = MagicMock(return_value=True)
        self.notify = MagicMock()
        self.controller = ScreenController(
            ItemService(self.db, confirm=self.confirm), notify=self.notify
        )
        self.controller.start()

    def tearDown(self):
        self.db.close()

    def item(self, name):
        return next(i for i in self.controller.state.items if i.name == name)


class TestStartAndSearch(ScreenTestBase):
    def test_start_loads_items(self):
        self.assertEqual(_names(self.controller.state.items), ["Apple", "Banana", "grape"])

    def test_visible_items_follow_search(self):
        self.controller.set_search("AP")
        self.assertEqual(_names(self.controller.visible_items), ["Apple", "grape"])
        self.controller.set_search("app")
        self.assertEqual(_names(self.controller.visible_items), ["Apple"])
        self.controller.clear_search()
        self.assertEqual(len(self.controller.visible_items), 3)

    def test_can_add_from_search_only_when_nothing_matches(self):
        self.controller.set_search("kiwi")
        self.assertTrue(self.controller.can_add_from_search)
        self.controller.set_search("app")
        self.assertFalse(self.controller.can_add_from_search)
        self.controller.set_search("   ")
        self.assertFalse(self.controller.can_add_from_search)


class TestAdd(ScreenTestBase):
    def test_add_clears_text_and_search(self):
        self.controller.set_search("kiw")
        self.controller.set_text(" Kiwi ")
        self.assertEqual(self.controller.submit(), Outcome.COMMITTED)
        self.assertEqual(self.controller.state.text, "")
        self.assertEqual(self.controller.state.search_query, "")
        self.assertEqual(_names(self.controller.state.items)[-1], "Kiwi")

    def test_duplicate_shows_notice(self):
        self.controller.set_text("APPLE")
        self.assertEqual(self.controller.add_item(), Outcome.REJECTED)
        self.notify.assert_called_once_with(
            Notice("Duplicate item", "This item already exists.")
        )
        self.assertEqual(self.controller.state.text, "APPLE")
        self.assertEqual(len(self.controller.state.items), 3)

    def test_cancel_keeps_input(self):
        self.confirm.return_value = False
        self.controller.set_text("Kiwi")
        self.assertEqual(self.controller.add_item(), Outcome.CANCELLED)
        self.assertEqual(self.controller.state.text, "Kiwi")
        self.assertEqual(len(self.controller.state.items), 3)

    def test_blank_is_silent(self):
        self.controller.set_text("   ")
        self.assertEqual(self.controller.submit(), Outcome.IGNORED)
        self.notify.assert_not_called()
        self.confirm.assert_not_called()

    def test_add_from_search(self):
        self.controller.set_search(" Kiwi ")
        self.assertEqual(self.controller.add_from_search(), Outcome.COMMITTED)
        self.assertIn("Kiwi", _names(self.controller.state.items))
        self.assertEqual(self.controller.state.search_query, "")

    def test_add_from_blank_search_ignored(self):
        self.controller.set_search("  ")
        self.assertEqual(self.controller.add_from_search(), Outcome.IGNORED)


class TestEdit(ScreenTestBase):
    def test_begin_edit_loads_name(self):
        banana = self.item("Banana")
        self.controller.begin_edit(banana)
        self.assertEqual(self.controller.state.text, "Banana")
        self.assertIs(self.controller.state.editing_item, banana)
        self.assertEqual(self.controller.submit_label, "Update Item")

    def test_new_edit_replaces_old(self):
        self.controller.begin_edit(self.item("Apple"))
        self.controller.begin_edit(self.item("grape"))
        self.assertEqual(self.controller.state.editing_item.name, "grape")
        self.assertEqual(self.controller.state.text, "grape")

    def test_submit_updates_and_clears_edit(self):
        self.controller.set_search("an")
        self.controller.begin_edit(self.item("Banana"))
        self.controller.set_text("Mango")
        self.assertEqual(self.controller.submit(), Outcome.COMMITTED)
        self.assertFalse(self.controller.is_editing)
        self.assertEqual(self.controller.state.text, "")
        self.assertEqual(self.controller.state.search_query, "an")
        self.assertEqual(_names(self.controller.state.items), ["Apple", "Mango", "grape"])
        self.assertEqual(self.controller.submit_label, "Add Item")

    def test_update_duplicate_keeps_edit(self):
        self.controller.begin_edit(self.item("Banana"))
        self.controller.set_text("apple")
        self.assertEqual(self.controller.submit(), Outcome.REJECTED)
        self.notify.assert_called_once_with(
            Notice("Duplicate item", "Another item with this name already exists.")
        )
        self.assertTrue(self.controller.is_editing)

    def test_update_without_target_ignored(self):
        self.assertEqual(self.controller.update_item("x"), Outcome.IGNORED)


class TestDelete(ScreenTestBase):
    def test_delete_refreshes(self):
        apple = self.item("Apple")
        self.assertEqual(self.controller.delete_item(apple.id), Outcome.COMMITTED)
        self.assertEqual(_names(self.controller.state.items), ["Banana", "grape"])

    def test_cancelled_delete(self):
        self.confirm.return_value = False
        self.assertEqual(self.controller.delete_item(self.item("Apple").id), Outcome.CANCELLED)
        self.assertEqual(len(self.controller.state.items), 3)


if __name__ == "__main__":
    unittest.main()
