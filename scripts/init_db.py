#!/usr/bin/env python3
"""Initialize the item database and optionally seed it from a YAML file.

The YAML file holds a top-level ``items`` list of names::

    items:
      - milk
      - bread

Seeding only happens when the table is empty.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from item_manager.db.database import Database
from item_manager.db.item_repo import ItemRepository


def main(argv: Optional[list[str]] = None):
    parser = argparse.ArgumentParser(description="Initialize the item database")
    parser.add_argument("--seed-file", type=str, help="YAML file with the first-run item names")
    parser.add_argument("--db-path", type=str, help="Override database path")
    args = parser.parse_args(argv)

    seed_names = None
    if args.seed_file:
        try:
            seed_names = load_seed_names(Path(args.seed_file))
        except ValueError as e:
            parser.error(str(e))

    db = Database(path=Path(args.db_path) if args.db_path else None)
    db.init(seed_names=seed_names)
    print(f"Database initialized at: {db.path}")
    print(f"  Items: {ItemRepository(db).count()}")

    db.close()
    print("Done.")


def load_seed_names(path: Path) -> list[str]:
    import yaml
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping with an 'items' list at the top level")
    entries = data.get("items") or []
    if not isinstance(entries, list):
        raise ValueError(f"{path}: 'items' must be a list of names")

    names: list[str] = []
    for raw in entries:
        name = str(raw).strip()
        if not name:
            print(f"  Skipping blank entry in {path}")
            continue
        if name.lower() in {n.lower() for n in names}:
            print(f"  Skipping duplicate entry: {name}")
            continue
        names.append(name)
    return names


if __name__ == "__main__":
    main()
