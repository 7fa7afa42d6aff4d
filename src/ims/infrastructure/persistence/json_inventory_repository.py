"""JSON-file-backed implementation of InventoryRepository.

The file is read once when the repository is built. Lookups and
mutations then work on the loaded entities, and ``save()`` writes the
whole collection back. ``save()`` is the only point that touches disk.
"""

from __future__ import annotations

import json
import threading
from contextlib import AbstractContextManager
from pathlib import Path

import structlog

from ims.domain.model.inventory import InventoryItem
from ims.domain.repository.inventory_repository import InventoryRepository

logger = structlog.get_logger(__name__)


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()
        self._items: list[InventoryItem] = self._load()
        self._lock = threading.RLock()

    # --- InventoryRepository interface ----------------------------------------

    @property
    def lock(self) -> AbstractContextManager:
        return self._lock

    def add(self, item: InventoryItem) -> None:
        self._items.append(item)

    def get_by_id(self, item_id: str) -> InventoryItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def list_all(self) -> list[InventoryItem]:
        return list(self._items)

    def save(self) -> None:
        raw = [self._to_raw(item) for item in self._items]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )
        logger.debug(
            "Inventory committed",
            path=str(self._file_path),
            items=len(raw),
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "quantity": item.quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        return InventoryItem(
            id=raw["id"],
            name=raw["name"],
            quantity=raw["quantity"],
        )

    def _load(self) -> list[InventoryItem]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [self._to_domain(r) for r in raw]

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
