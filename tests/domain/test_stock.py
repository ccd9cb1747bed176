"""Unit tests for the StockRecord aggregate."""

import pytest

from leathershop.domain.exceptions import InsufficientStockError, ValidationError
from leathershop.domain.model.stock import AdjustDirection, StockRecord


def _record(quantity: int = 10, minimum: int = 5) -> StockRecord:
    return StockRecord.create("STOCK-3000", "PROD-1000", quantity, minimum=minimum)


class TestStockRecordCreate:

    def test_defaults(self):
        record = StockRecord.create("STOCK-3000", "PROD-1000", 12)
        assert record.minimum == 5
        assert record.location == "Main Warehouse"
        assert record.active

    def test_blank_location_uses_default(self):
        record = StockRecord.create("STOCK-3000", "PROD-1000", 1, location="  ")
        assert record.location == "Main Warehouse"

    def test_zero_quantity_allowed(self):
        assert StockRecord.create("STOCK-3000", "PROD-1000", 0).quantity == 0

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            StockRecord.create("STOCK-3000", "PROD-1000", -1)

    def test_negative_minimum_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            StockRecord.create("STOCK-3000", "PROD-1000", 1, minimum=-1)


class TestStockRecordAdjust:

    def test_increase(self):
        record = _record(quantity=10)
        result = record.adjust(4, AdjustDirection.INCREASE)
        assert (result.previous, result.new, result.delta) == (10, 14, 4)
        assert record.quantity == 14

    def test_decrease_reports_negative_delta(self):
        record = _record(quantity=10)
        result = record.adjust(4, AdjustDirection.DECREASE)
        assert (result.previous, result.new, result.delta) == (10, 6, -4)

    def test_decrease_to_zero(self):
        record = _record(quantity=3)
        record.adjust(3, AdjustDirection.DECREASE)
        assert record.quantity == 0

    def test_decrease_below_zero_leaves_quantity(self):
        record = _record(quantity=3)
        with pytest.raises(InsufficientStockError) as info:
            record.adjust(4, AdjustDirection.DECREASE)
        assert record.quantity == 3
        assert info.value.reason == "insufficient_stock"
        assert info.value.context["available"] == 3

    @pytest.mark.parametrize("delta", [0, -2])
    def test_non_positive_delta_rejected(self, delta):
        with pytest.raises(ValidationError, match="positive integer"):
            _record().adjust(delta, AdjustDirection.INCREASE)

    def test_unknown_direction_rejected(self):
        with pytest.raises(ValidationError, match="Invalid adjustment direction"):
            AdjustDirection.parse("sideways")


class TestStockRecordBelowMinimum:

    def test_equal_to_minimum_counts_as_low(self):
        assert _record(quantity=5, minimum=5).below_minimum

    def test_above_minimum_is_not_low(self):
        assert not _record(quantity=6, minimum=5).below_minimum


class TestStockRecordDeactivate:

    def test_deactivate_sets_lifecycle(self):
        record = _record()
        record.deactivate()
        assert not record.active
        assert record.lifecycle.retired_at is not None
