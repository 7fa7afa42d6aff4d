"""Unit tests for Product and the Money value object."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money


class TestMoney:

    def test_of_coerces_int(self):
        assert Money.of(1200).amount == Decimal("1200")

    def test_of_coerces_string(self):
        assert Money.of("19.99") == Money(Decimal("19.99"))

    def test_zero_allowed(self):
        assert Money.of(0).amount == Decimal("0")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-1")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_float_rejected_without_factory(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(12.5)  # type: ignore[arg-type]

    def test_str_formats_two_decimals(self):
        assert str(Money.of("1200")) == "$1200.00"


class TestProduct:

    def test_products_compare_by_value(self):
        a = Product(id=1, name="Laptop", price=Money.of(1200))
        b = Product(id=1, name="Laptop", price=Money.of("1200.00"))
        assert a == b

    def test_product_is_immutable(self):
        product = Product(id=1, name="Laptop", price=Money.of(1200))
        with pytest.raises(AttributeError):
            product.name = "Desktop"  # type: ignore[misc]
