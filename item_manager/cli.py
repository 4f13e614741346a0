#!/usr/bin/env python3
"""
My Item Manager: terminal screen
================================

Manage a personal list of named items stored in a local SQLite file.

Usage:
    item-manager                 # Interactive screen
    item-manager --list          # Print the items and exit
    item-manager --yes           # Answer every confirmation with yes

Inside the screen, plain text is the item input: pressing Enter adds it,
or renames the item being edited.

Examples:
    > apples
    > /search app
    > /edit 2
    > pears
    > /delete 3
"""

from __future__ import annotations

import argparse
import logging
import shlex
from pathlib import Path
from typing import Callable, Optional

from item_manager.config import get_settings
from item_manager.db.database import Database
from item_manager.services.item_service import (
    ConfirmRequest,
    ItemService,
    Outcome,
    auto_confirm,
)
from item_manager.services.screen_controller import Notice, ScreenController

logger = logging.getLogger(__name__)

_OUTCOME_TEXT = {
    Outcome.COMMITTED: "Done.",
    Outcome.CANCELLED: "Cancelled.",
    Outcome.REJECTED: "Nothing changed.",
}


def prompt_confirm(request: ConfirmRequest, reader: Callable[[str], str] = input) -> bool:
    """Ask a yes/no question on the terminal. Anything but yes declines."""
    print(f"\n{request.title}")
    answer = reader(f"{request.message} [y/N] ").strip().lower()
    return answer in ("y", "yes")


def print_notice(notice: Notice) -> None:
    print(f"\n[{notice.title}] {notice.message}\n")


class ItemManagerApp:
    """Interactive terminal screen for the item list."""

    def __init__(
        self,
        db_path: Optional[str] = None,
        assume_yes: bool = False,
        reader: Callable[[str], str] = input,
    ):
        self.db = Database(path=Path(db_path) if db_path else None)
        self._reader = reader
        confirm = auto_confirm if assume_yes else (lambda req: prompt_confirm(req, self._reader))
        self.service = ItemService(self.db, confirm=confirm)
        self.controller = ScreenController(self.service, notify=print_notice)
        self.controller.start()

    def close(self) -> None:
        self.db.close()

    # -- rendering -------------------------------------------------------------

    def render(self) -> str:
        c = self.controller
        lines = [f"=== {get_settings().APP_NAME} ==="]
        if c.state.search_query:
            lines.append(f"Search: {c.state.search_query}")
        if c.is_editing:
            lines.append(f"Editing #{c.state.editing_item.id}: {c.state.text}")

        items = c.visible_items
        if not items:
            lines.append("No items found")
            if c.can_add_from_search:
                lines.append(f'  /add-search to add "{c.state.search_query.strip()}"')
        for item in items:
            lines.append(f"  {item.id:>4}  {item.name}")
        lines.append(f"[Enter: {c.submit_label}]")
        return "\n".join(lines)

    def show_list(self) -> None:
        print(self.render())

    # -- command dispatch ------------------------------------------------------

    def handle(self, line: str) -> bool:
        """Process one input line. Returns False when the user quits."""
        if not line.startswith("/"):
            self.controller.set_text(line)
            self._report(self.controller.submit())
            return True

        parts = shlex.split(line)
        cmd, args = parts[0].lower(), parts[1:]

        if cmd in ("/quit", "/exit", "/q"):
            return False
        if cmd == "/help":
            self._show_help()
        elif cmd == "/list":
            self.controller.refresh()
            self.show_list()
        elif cmd == "/search":
            if args:
                self.controller.set_search(" ".join(args))
            else:
                self.controller.clear_search()
            self.show_list()
        elif cmd == "/clear":
            self.controller.clear_text()
        elif cmd == "/add-search":
            self._report(self.controller.add_from_search())
        elif cmd in ("/edit", "/delete"):
            item_id = self._parse_id(args)
            if item_id is None:
                print(f"Usage: {cmd} ID")
            elif cmd == "/edit":
                self._begin_edit(item_id)
            else:
                self._report(self.controller.delete_item(item_id))
        else:
            print(f"Unknown command: {cmd} (try /help)")
        return True

    def _begin_edit(self, item_id: int) -> None:
        item = next((i for i in self.controller.state.items if i.id == item_id), None)
        if item is None:
            print(f"No item with id {item_id}")
            return
        self.controller.begin_edit(item)
        print(f'Editing #{item.id} "{item.name}". Type the new name and press Enter.')

    @staticmethod
    def _parse_id(args: list[str]) -> Optional[int]:
        if len(args) != 1:
            return None
        try:
            return int(args[0])
        except ValueError:
            return None

    def _report(self, outcome: Outcome) -> None:
        text = _OUTCOME_TEXT.get(outcome)
        if text:
            print(text)
        if outcome is Outcome.COMMITTED:
            self.show_list()

    def run_interactive(self) -> None:
        """Run the interactive loop."""
        print("Type an item name and press Enter. Commands: /help, /quit\n")
        self.show_list()

        while True:
            try:
                prompt = "Update> " if self.controller.is_editing else "Item> "
                line = self._reader(prompt).strip()
                if not line:
                    continue
                if not self.handle(line):
                    print("Goodbye!")
                    break
            except (KeyboardInterrupt, EOFError):
                print("\nGoodbye!")
                break
            except Exception as e:
                logger.exception("Command failed")
                print(f"\nError: {e}\n")

    def _show_help(self) -> None:
        print("""
Type a name and press Enter to add it (or to rename the item being edited).

Commands:
  /list          Show the items
  /search [Q]    Filter by name; without Q clears the search
  /add-search    Add the current search text as an item
  /edit ID       Load an item into the input for renaming
  /delete ID     Delete an item
  /clear         Clear the input text
  /help          Show this help
  /quit          Exit
""")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="My Item Manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--db",
        type=str,
        default=None,
        help="Database path (default: ITEMS_DB_PATH or data/items.db)",
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="Print the items and exit",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Confirm every change without asking",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, get_settings().LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = ItemManagerApp(db_path=args.db, assume_yes=args.yes)
    try:
        if args.list:
            app.show_list()
        else:
            app.run_interactive()
    finally:
        app.close()


if __name__ == "__main__":
    main()
