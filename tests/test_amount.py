"""Tests for money values."""
from __future__ import annotations

from decimal import Decimal

import pytest

from common.errors import CurrencyMismatch
from portfolio.amount import DEFAULT_CURRENCY, Amount, Amounts


class TestAmount:
    def test_display(self):
        assert str(Amount.parse("123.45 EUR")) == "123.45 EUR"

    def test_display_pads_to_cents(self):
        assert str(Amount(Decimal(300), "USD")) == "300.00 USD"

    def test_display_without_currency(self):
        assert str(Amount.zero("")) == "0.00"

    @pytest.mark.parametrize("text, num, currency", [
        ("123.45 EUR", "123.45", "EUR"),
        ("200 USD", "200", "USD"),
        ("0.0045 BTC", "0.0045", "BTC"),
    ])
    def test_parse(self, text, num, currency):
        amount = Amount.parse(text)
        assert amount.num == Decimal(num)
        assert amount.currency == currency

    @pytest.mark.parametrize("text", ["123.45", "abc EUR", "1 2 EUR"])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            Amount.parse(text)

    def test_multiply(self):
        assert Amount.parse("123.45 EUR") * 2 == Amount.parse("246.90 EUR")

    def test_multiply_by_float_is_exact(self):
        assert (Amount.parse("10.00 USD") * 0.1).num == Decimal("1.000")

    def test_add_same_currency(self):
        assert Amount.parse("123.45 EUR") + Amount.parse("123.45 EUR") == Amount.parse("246.90 EUR")

    def test_add_different_currencies(self):
        with pytest.raises(CurrencyMismatch):
            Amount.parse("123.45 EUR") + Amount.parse("123.45 USD")


class TestAmounts:
    def test_zero_has_default_currency(self):
        assert Amounts.zero().for_currency(DEFAULT_CURRENCY) == Amount.zero(DEFAULT_CURRENCY)
        assert DEFAULT_CURRENCY == "USD"

    def test_upsert_new_currency(self):
        amounts = Amounts()
        amounts.upsert(Amount.parse("123.45 EUR"))
        assert len(amounts.amounts) == 1

    def test_upsert_adds_into_existing(self):
        amounts = Amounts.of(Amount.parse("1.50 EUR"))
        amounts.upsert(Amount.parse("2.25 EUR"))
        assert amounts.for_currency("EUR") == Amount.parse("3.75 EUR")

    def test_missing_currency_is_zero(self):
        assert Amounts().for_currency("JPY") == Amount.zero("JPY")

    def test_sorted_by_currency(self):
        amounts = Amounts.of(Amount.parse("123.45 USD"), Amount.parse("123.45 EUR"))
        assert amounts.sorted() == [Amount.parse("123.45 EUR"), Amount.parse("123.45 USD")]

    def test_str_one_line_per_currency(self):
        amounts = Amounts.of(Amount.parse("1 USD"), Amount.parse("2 EUR"))
        assert str(amounts) == "2.00 EUR\n1.00 USD"
