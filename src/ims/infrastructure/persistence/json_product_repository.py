"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

import structlog

from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()
        self._products: list[Product] = self._load()

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> None:
        self._products.append(product)

    def list_all(self) -> list[Product]:
        return list(self._products)

    def save(self) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
            }
            for p in self._products
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )
        logger.debug(
            "Products committed",
            path=str(self._file_path),
            products=len(raw),
        )

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [
            Product(
                id=int(item["id"]),
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
            )
            for item in raw
        ]

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
