"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Settings are read from the environment on every call so tests can
point the CLI somewhere else with ``monkeypatch.setenv``.
"""

from __future__ import annotations

import os
from pathlib import Path

from ims.application.inventory_service import InventoryService
from ims.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from ims.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DATA_DIR_ENV = "IMS_DATA_DIR"
LOG_LEVEL_ENV = "IMS_LOG_LEVEL"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "WARNING")


def inventory_repository() -> JsonInventoryRepository:
    return JsonInventoryRepository(data_dir() / "inventory.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def inventory_service(repo: JsonInventoryRepository | None = None) -> InventoryService:
    return InventoryService(repo or inventory_repository())
