"""Tests for the in-memory and JSON repository implementations."""

import json
from decimal import Decimal

import pytest

from ims.application.inventory_service import InventoryService
from ims.domain.model.inventory import InventoryItem
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.infrastructure.persistence.in_memory_repositories import (
    InMemoryInventoryRepository,
    InMemoryProductRepository,
)
from ims.infrastructure.persistence.json_inventory_repository import JsonInventoryRepository
from ims.infrastructure.persistence.json_product_repository import JsonProductRepository


class TestInMemoryInventoryRepository:

    @pytest.mark.parametrize("item_id", ["", "anything", "00000000-0000-0000-0000-000000000000"])
    def test_get_by_id_on_empty_repository(self, item_id):
        assert InMemoryInventoryRepository().get_by_id(item_id) is None

    def test_get_by_id_unknown(self):
        repo = InMemoryInventoryRepository([InventoryItem(id="w", name="Widget", quantity=1)])
        assert repo.get_by_id("g") is None

    def test_returns_same_instance(self):
        repo = InMemoryInventoryRepository()
        item = InventoryItem.create("Widget", 1)
        repo.add(item)
        assert repo.get_by_id(item.id) is item

    def test_add_does_not_check_duplicates(self):
        repo = InMemoryInventoryRepository()
        item = InventoryItem(id="w", name="Widget", quantity=1)
        repo.add(item)
        repo.add(item)
        assert len(repo.list_all()) == 2

    def test_save_is_harmless(self):
        repo = InMemoryInventoryRepository()
        repo.save()
        assert repo.list_all() == []


class TestInMemoryProductRepository:

    def test_list_all_keeps_insertion_order(self):
        repo = InMemoryProductRepository()
        a = Product(id=2, name="B", price=Money.of(1))
        b = Product(id=1, name="A", price=Money.of(2))
        repo.add(a)
        repo.add(b)
        assert repo.list_all() == [a, b]


class TestJsonInventoryRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "inventory.json"
        JsonInventoryRepository(path)
        assert json.loads(path.read_text()) == []

    def test_changes_hit_disk_only_on_save(self, tmp_path):
        path = tmp_path / "inventory.json"
        repo = JsonInventoryRepository(path)
        repo.add(InventoryItem(id="w", name="Widget", quantity=10))
        assert json.loads(path.read_text()) == []

        repo.save()
        assert json.loads(path.read_text()) == [
            {"id": "w", "name": "Widget", "quantity": 10}
        ]

    def test_service_changes_survive_reload(self, tmp_path):
        path = tmp_path / "inventory.json"
        service = InventoryService(JsonInventoryRepository(path))
        item = service.create_inventory_item("Widget", 10)
        service.add_stock(item.id, 5)
        service.remove_stock(item.id, 3)

        reloaded = JsonInventoryRepository(path).get_by_id(item.id)
        assert reloaded == InventoryItem(id=item.id, name="Widget", quantity=12)

    def test_get_by_id_unknown(self, tmp_path):
        assert JsonInventoryRepository(tmp_path / "inventory.json").get_by_id("x") is None


class TestJsonProductRepository:

    def test_round_trip_keeps_decimal_price(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        repo.add(Product(id=1, name="Laptop", price=Money.of("1200.50")))
        repo.save()

        raw = json.loads(path.read_text())
        assert raw == [{"id": 1, "name": "Laptop", "price": "1200.50", "currency": "USD"}]

        [product] = JsonProductRepository(path).list_all()
        assert product.price.amount == Decimal("1200.50")
        assert product.id == 1
