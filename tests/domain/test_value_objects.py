"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import MAX_AMOUNT, MAX_COUNT, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10.00")

    def test_zero_is_allowed(self):
        assert Money.of("0") == Money.zero()

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_sub_cent_precision_rejected(self):
        with pytest.raises(ValidationError, match="sub-cent"):
            Money.of("1.005")

    def test_amount_above_maximum_rejected(self):
        with pytest.raises(ValidationError, match="exceeds the maximum"):
            Money.of("10000000000.00") * 10_000_000
        assert Money(MAX_AMOUNT).amount == MAX_AMOUNT

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("NaN")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") <= Money.of("10")

    def test_no_float_drift(self):
        total = Money.zero()
        for _ in range(10):
            total = total + Money.of("0.10")
        assert total == Money.of("1.00")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            Quantity(-3)

    def test_above_maximum_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Quantity(MAX_COUNT + 1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(2.5)

    def test_str(self):
        assert str(Quantity(7)) == "7"
