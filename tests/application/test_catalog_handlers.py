"""Tests for product, price and sequence application handlers."""

import pytest

from leathershop.application.add_product import AddProductHandler
from leathershop.application.list_products import ListProductsHandler
from leathershop.application.next_sequence import NextSequenceIdHandler
from leathershop.application.set_price import SetPriceHandler
from leathershop.application.show_price import ShowCurrentPriceHandler, ShowPriceHistoryHandler
from leathershop.domain.exceptions import ConflictError, EntityNotFoundError, ValidationError
from tests.fakes import (
    FakePriceRepository,
    FakeProductRepository,
    FakeStockRepository,
    fake_sequences,
)


@pytest.fixture
def ctx():
    products = FakeProductRepository()
    prices = FakePriceRepository()
    stocks = FakeStockRepository()
    sequences = fake_sequences()
    return products, prices, stocks, sequences


def _add(ctx, name="Bifold Wallet", **kwargs):
    products, prices, stocks, sequences = ctx
    return AddProductHandler(products, prices, stocks, sequences).handle(name, "CAT-010", **kwargs)


class TestAddProduct:

    def test_product_only(self, ctx):
        dto = _add(ctx)
        assert dto.id == "PROD-1000"
        assert dto.price is None
        assert dto.stock is None

    def test_with_price_and_stock(self, ctx):
        products, prices, stocks, _ = ctx
        dto = _add(ctx, material="cowhide", price="15000", initial_stock=8)
        assert dto.price == "ARS 15000.00"
        assert dto.stock == 8
        assert prices.get_current(dto.id).id == "PRICE-5000"
        assert stocks.quantity_of(dto.id) == 8
        assert products.get_by_id(dto.id).material == "cowhide"

    def test_duplicate_name_conflicts(self, ctx):
        _add(ctx)
        with pytest.raises(ConflictError, match="already exists") as info:
            _add(ctx, name="bifold wallet")
        assert info.value.reason == "conflict"
        assert info.value.context["product_id"] == "PROD-1000"

    @pytest.mark.parametrize(
        "kwargs",
        [{"price": "0"}, {"price": "abc"}, {"initial_stock": -1}],
    )
    def test_rejected_add_leaves_nothing_behind(self, ctx, kwargs):
        products, prices, stocks, _ = ctx
        with pytest.raises(ValidationError):
            _add(ctx, **kwargs)
        assert products.list_active() == []
        assert stocks.list_active() == []
        assert prices.retire_calls == 0

    def test_retry_after_rejected_price_succeeds(self, ctx):
        with pytest.raises(ValidationError, match="greater than zero"):
            _add(ctx, price="0")
        dto = _add(ctx, price="10")
        assert dto.id == "PROD-1000"
        assert dto.price == "ARS 10.00"

    def test_blank_name_rejected(self, ctx):
        with pytest.raises(ValidationError):
            _add(ctx, name="  ")


class TestListProducts:

    def test_enriched_with_price_and_stock(self, ctx):
        products, prices, stocks, _ = ctx
        _add(ctx, price="100", initial_stock=3)
        _add(ctx, name="Belt")
        listed = {p.name: p for p in ListProductsHandler(products, prices, stocks).handle()}
        assert listed["Bifold Wallet"].price == "ARS 100.00"
        assert listed["Bifold Wallet"].stock == 3
        assert listed["Belt"].price is None
        assert listed["Belt"].stock is None


class TestPriceHandlers:

    def test_set_show_and_history(self, ctx):
        products, prices, _, sequences = ctx
        product_id = _add(ctx).id
        setter = SetPriceHandler(prices, products, sequences)
        setter.handle(product_id, "100")
        latest = setter.handle(product_id, "120", promo_amount="110")

        current = ShowCurrentPriceHandler(prices, products, sequences).handle(product_id)
        assert current.id == latest.id
        assert current.promo_amount == "ARS 110.00"

        history = ShowPriceHistoryHandler(prices, products, sequences).handle(product_id)
        assert [h.current for h in history] == [True, False]

    def test_show_without_price(self, ctx):
        products, prices, _, sequences = ctx
        product_id = _add(ctx).id
        with pytest.raises(EntityNotFoundError):
            ShowCurrentPriceHandler(prices, products, sequences).handle(product_id)


class TestNextSequenceId:

    def test_formats_by_type(self):
        handler = NextSequenceIdHandler(fake_sequences())
        assert handler.handle("categorias") == "CAT-010"
        assert handler.handle("categorias") == "CAT-011"
        assert handler.handle("usuarios") == "USER-010"
        assert handler.handle("otros") == "ID-1"
