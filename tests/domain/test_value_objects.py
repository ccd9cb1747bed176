"""Unit tests for Money, Quantity and Lifecycle value objects."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from leathershop.domain.exceptions import ValidationError
from leathershop.domain.model.value_objects import Lifecycle, Money, Quantity


class TestMoney:

    def test_of_coerces_to_decimal(self):
        assert Money.of("15.50").amount == Decimal("15.50")
        assert Money.of(100).amount == Decimal("100")

    def test_default_currency_is_ars(self):
        assert Money.of("1").currency == "ARS"

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-1")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(15.5)  # type: ignore[arg-type]

    def test_addition_and_multiplication(self):
        assert Money.of("100") * 2 + Money.of("50") == Money.of("250")

    def test_mixed_currencies_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("1", "ARS") + Money.of("1", "USD")

    def test_str(self):
        assert str(Money.of("12.5", "USD")) == "USD 12.50"


class TestQuantity:

    def test_positive_accepted(self):
        assert Quantity(3).value == 3

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(value)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)  # type: ignore[arg-type]


class TestLifecycle:

    def test_new_lifecycle_is_active(self):
        lifecycle = Lifecycle()
        assert lifecycle.active
        assert lifecycle.retired_at is None

    def test_retire_stamps_time(self):
        at = datetime(2026, 1, 2, tzinfo=timezone.utc)
        retired = Lifecycle().retire(at)
        assert not retired.active
        assert retired.retired_at == at

    def test_retire_keeps_first_timestamp(self):
        first = datetime(2026, 1, 2, tzinfo=timezone.utc)
        later = datetime(2026, 3, 4, tzinfo=timezone.utc)
        assert Lifecycle().retire(first).retire(later).retired_at == first
