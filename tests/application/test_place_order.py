"""Tests for the PlaceOrder application handler."""

import pytest

from leathershop.application.dto import CustomerSpec, OrderItemSpec
from leathershop.application.place_order import PlaceOrderHandler
from leathershop.domain.exceptions import InsufficientStockError, ValidationError
from leathershop.domain.model.product import Product
from leathershop.domain.model.stock import StockRecord
from tests.fakes import (
    FakeOrderRepository,
    FakeProductRepository,
    FakeStockRepository,
    fake_sequences,
)


def _setup():
    products = [
        Product.create("PROD-1000", "Bifold Wallet", "CAT-010"),
        Product.create("PROD-1001", "Messenger Bag", "CAT-011"),
    ]
    stock_repo = FakeStockRepository([
        StockRecord.create("STOCK-3000", "PROD-1000", 5),
        StockRecord.create("STOCK-3001", "PROD-1001", 3),
    ])
    order_repo = FakeOrderRepository()
    handler = PlaceOrderHandler(
        order_repo, stock_repo, FakeProductRepository(products), fake_sequences()
    )
    return handler, order_repo, stock_repo


class TestPlaceOrder:

    def test_places_order_and_debits_stock(self):
        handler, order_repo, stock_repo = _setup()
        result = handler.handle(
            CustomerSpec(name="  Alice  ", email="alice@example.com"),
            [
                OrderItemSpec("PROD-1000", 2, "100"),
                OrderItemSpec("PROD-1001", 1, "50"),
            ],
            vendor_id="USER-010",
            notes="gift wrap",
        )

        assert result.status == "pending"
        assert result.total == "ARS 250.00"
        assert result.customer_name == "Alice"
        assert result.customer_email == "alice@example.com"
        assert result.notes == "gift wrap"
        assert [i.line_total for i in result.items] == ["ARS 200.00", "ARS 50.00"]
        assert order_repo.count() == 1
        assert stock_repo.quantity_of("PROD-1000") == 3
        assert stock_repo.quantity_of("PROD-1001") == 2

    def test_quoted_price_is_kept(self):
        handler, _, _ = _setup()
        result = handler.handle(
            CustomerSpec("Alice"), [OrderItemSpec("PROD-1000", 1, "99.90")], "USER-010"
        )
        assert result.items[0].unit_price == "ARS 99.90"

    def test_configured_currency(self):
        handler, _, _ = _setup()
        handler._currency = "USD"
        result = handler.handle(
            CustomerSpec("Alice"), [OrderItemSpec("PROD-1000", 1, "10")], "USER-010"
        )
        assert result.total == "USD 10.00"

    def test_insufficient_stock_leaves_no_trace(self):
        handler, order_repo, stock_repo = _setup()
        with pytest.raises(InsufficientStockError):
            handler.handle(
                CustomerSpec("Alice"),
                [OrderItemSpec("PROD-1000", 1, "10"), OrderItemSpec("PROD-1001", 9, "10")],
                "USER-010",
            )
        assert order_repo.count() == 0
        assert stock_repo.quantity_of("PROD-1000") == 5

    def test_missing_customer_name(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(ValidationError, match="Customer name"):
            handler.handle(CustomerSpec("   "), [OrderItemSpec("PROD-1000", 1, "10")], "USER-010")
        assert order_repo.count() == 0

    def test_zero_quantity_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError):
            handler.handle(CustomerSpec("Alice"), [OrderItemSpec("PROD-1000", 0, "10")], "USER-010")

    def test_bad_price_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid money amount"):
            handler.handle(CustomerSpec("Alice"), [OrderItemSpec("PROD-1000", 1, "abc")], "USER-010")

    def test_no_items(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError):
            handler.handle(CustomerSpec("Alice"), [], "USER-010")
