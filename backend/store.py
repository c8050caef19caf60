"""
Potluck item store.
Authoritative in-memory map of id -> item, flushed in full to a durable
backend (see ``repositories``) after every mutation and loaded once at
startup.

Item shape:
  {"id", "name", "dish", "section", "createdAt", "updatedAt"}
Timestamps are integer milliseconds since the epoch.
"""

import logging
import secrets
import string
import time
from typing import Callable

from errors import NotFound, PersistenceError, ValidationError
from repositories.base import ItemBackend
from validation import validate_item

logger = logging.getLogger(__name__)

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 12


def now_ms() -> int:
    return int(time.time() * 1000)


def random_id() -> str:
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def _sort_key(item: dict) -> tuple:
    # Case-insensitive on name, exact name breaks ties.
    name = item.get("name", "")
    return (item.get("section", ""), name.casefold(), name)


class ItemStore:
    """Owns the item map. Every mutation is flushed before it returns.

    Methods are synchronous and block the caller, event loop included,
    for the length of a backend call.

    If a flush fails the map is restored to its pre-mutation state and
    PersistenceError is raised, so the caller never sees an acknowledged
    change the backend does not hold.
    """

    def __init__(
        self,
        backend: ItemBackend,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = random_id,
    ):
        self.backend = backend
        self._clock = clock
        self._id_factory = id_factory
        self._items: dict[str, dict] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._items

    # ── Reads ──────────────────────────────────────────────────────────

    def list_items(self) -> list[dict]:
        """All items ordered by section, then name."""
        return [dict(it) for it in sorted(self._items.values(), key=_sort_key)]

    def get(self, item_id: str) -> dict:
        item = self._items.get(item_id)
        if item is None:
            raise NotFound()
        return dict(item)

    # ── Mutations ──────────────────────────────────────────────────────

    def create(self, fields: dict) -> dict:
        item_id = self._new_id()
        now = self._clock()
        item = {"id": item_id, **fields, "createdAt": now, "updatedAt": now}
        snapshot = dict(self._items)
        self._items[item_id] = item
        self._commit(snapshot, "create")
        logger.info("Created item %s (%s)", item_id, item["section"])
        return dict(item)

    def update(self, item_id: str, fields: dict) -> dict:
        current = self._items.get(item_id)
        if current is None:
            raise NotFound()
        updated = {
            **current,
            **fields,
            "id": current["id"],
            "createdAt": current.get("createdAt"),
            "updatedAt": self._clock(),
        }
        snapshot = dict(self._items)
        self._items[item_id] = updated
        self._commit(snapshot, "update")
        logger.info("Updated item %s", item_id)
        return dict(updated)

    def delete(self, item_id: str) -> None:
        if item_id not in self._items:
            raise NotFound()
        snapshot = dict(self._items)
        del self._items[item_id]
        self._commit(snapshot, "delete")
        logger.info("Deleted item %s", item_id)

    # ── Durable sync ───────────────────────────────────────────────────

    def load_all(self) -> None:
        """Replace the map with the backend's contents.

        A failing backend leaves the store empty; the service keeps running.
        """
        self._items = {}
        try:
            records = self.backend.load()
        except Exception as e:
            logger.error("Failed to load items from backend: %s", e, exc_info=True)
            return
        for record in records:
            if not isinstance(record, dict) or not record.get("id"):
                logger.warning("Skipping stored record without id: %r", record)
                continue
            try:
                fields = validate_item(record)
            except ValidationError as e:
                logger.warning("Skipping stored item %s: %s", record["id"], e)
                continue
            self._items[record["id"]] = {**record, **fields}
        logger.info("Loaded %d item(s)", len(self._items))

    def flush(self) -> None:
        """Reconcile the backend with the full in-memory state."""
        try:
            self.backend.save(list(self._items.values()))
        except Exception as e:
            logger.error("Flush to backend failed: %s", e, exc_info=True)
            raise PersistenceError(str(e)) from e

    def _commit(self, snapshot: dict, action: str) -> None:
        try:
            self.flush()
        except PersistenceError:
            logger.warning("Rolling back %s after failed flush", action)
            self._items = snapshot
            raise

    def _new_id(self) -> str:
        item_id = self._id_factory()
        while item_id in self._items:
            logger.debug("Id collision on %s, drawing again", item_id)
            item_id = self._id_factory()
        return item_id
