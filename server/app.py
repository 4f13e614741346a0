"""FastAPI web server for the item manager."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from item_manager import __version__
from item_manager.config import get_settings
from item_manager.db.database import Database, get_db
from item_manager.db.item_repo import ItemRepository
from item_manager.errors import DuplicateNameError
from item_manager.services.item_service import (
    ConfirmRequest,
    ItemService,
    Outcome,
    filter_items,
)

logger = logging.getLogger(__name__)

# Global database handle, set on startup (tests may assign it directly)
_db: Optional[Database] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open and initialise the database on startup."""
    global _db

    _db = get_db()
    logger.info(f"Server started - DB: {_db.path}")
    yield

    logger.info("Server shutting down")


app = FastAPI(
    title="Item Manager API",
    description="Add, rename, delete and search a personal list of items",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request Models
class ItemWrite(BaseModel):
    name: str
    confirm: bool = False


class _RequestGate:
    """Confirmation gate fed by the ``confirm`` flag of a request."""

    def __init__(self, confirmed: bool):
        self.confirmed = confirmed
        self.request: Optional[ConfirmRequest] = None

    def __call__(self, request: ConfirmRequest) -> bool:
        self.request = request
        return self.confirmed


def _require_db() -> Database:
    if not _db:
        raise HTTPException(status_code=503, detail="Database not initialized")
    return _db


def _service(db: Database, gate: _RequestGate) -> ItemService:
    return ItemService(db, confirm=gate)


def _result(outcome: Outcome, gate: _RequestGate, service: ItemService) -> dict:
    if outcome is Outcome.CANCELLED:
        return {"status": "pending_confirmation", "prompt": gate.request.to_dict()}
    items = service.list_items()
    return {
        "status": outcome.value,
        "count": len(items),
        "items": [i.to_dict() for i in items],
    }


# API Routes
@app.get("/api/status")
async def get_status():
    """Get system status."""
    return {
        "status": "ok",
        "app": get_settings().APP_NAME,
        "timestamp": datetime.now().isoformat(),
        "services": {"database": _db is not None},
    }


@app.get("/api/items")
async def list_items(q: Optional[str] = None):
    """List all items, optionally filtered by a case-insensitive substring."""
    db = _require_db()
    items = filter_items(ItemRepository(db).list_all(), q)
    return {"count": len(items), "items": [i.to_dict() for i in items]}


@app.post("/api/items")
async def create_item(body: ItemWrite):
    """Add an item. Without ``confirm`` the prompt is returned instead."""
    db = _require_db()
    gate = _RequestGate(body.confirm)
    service = _service(db, gate)
    try:
        outcome = service.add_item(body.name)
    except DuplicateNameError as e:
        raise HTTPException(status_code=409, detail=e.message)
    return _result(outcome, gate, service)


@app.put("/api/items/{item_id}")
async def update_item(item_id: int, body: ItemWrite):
    """Rename an item. Without ``confirm`` the prompt is returned instead."""
    db = _require_db()
    gate = _RequestGate(body.confirm)
    service = _service(db, gate)
    item = service.get_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Item {item_id} not found")
    try:
        outcome = service.update_item(item, body.name)
    except DuplicateNameError as e:
        raise HTTPException(status_code=409, detail=e.message)
    return _result(outcome, gate, service)


@app.delete("/api/items/{item_id}")
async def delete_item(item_id: int, confirm: bool = False):
    """Delete an item. Unknown ids are accepted and change nothing."""
    db = _require_db()
    gate = _RequestGate(confirm)
    service = _service(db, gate)
    outcome = service.delete_item(item_id)
    return _result(outcome, gate, service)
