"""Tests for parsing rows into events."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from common.errors import InvalidTransaction
from transactions.events import DividendPaid, PriceObtained, Transaction, parse_int


class TestParseInt:
    @pytest.mark.parametrize("value, expected", [(3, 3), ("3", 3), (" -4 ", -4), (5.0, 5)])
    def test_integral_values(self, value, expected):
        assert parse_int(value, "amount") == expected

    @pytest.mark.parametrize("value", ["3.5", 3.5, "", None, False, [1]])
    def test_rejects(self, value):
        with pytest.raises(InvalidTransaction, match="amount"):
            parse_int(value, "amount")


class TestTransactionFromRow:
    def test_parses_string_row(self):
        tx = Transaction.from_row({"ticker": "AAPL", "currency": "USD", "amount": "2", "price": "150"})
        assert tx == Transaction("AAPL", "USD", 2, 150)

    def test_optional_date(self):
        tx = Transaction.from_row(
            {"ticker": "AAPL", "currency": "USD", "amount": 2, "price": 150, "date": "2023-01-02"}
        )
        assert tx.on == date(2023, 1, 2)

    def test_bad_date(self):
        with pytest.raises(InvalidTransaction, match="date"):
            Transaction.from_row(
                {"ticker": "AAPL", "currency": "USD", "amount": 2, "price": 150, "date": "02-01-2023"}
            )

    def test_missing_fields_are_named(self):
        with pytest.raises(InvalidTransaction, match="currency, price"):
            Transaction.from_row({"ticker": "AAPL", "amount": 2})


class TestPriceAndDividendRows:
    def test_price_is_decimal(self):
        ev = PriceObtained.from_row({"ticker": "AAPL", "currency": "USD", "price": "190.50"})
        assert ev.price == Decimal("190.50")

    def test_dividend_reads_price_column(self):
        ev = DividendPaid.from_row({"ticker": "AAPL", "currency": "USD", "price": "0.24"})
        assert ev.per_share == Decimal("0.24")

    def test_non_numeric_price(self):
        with pytest.raises(InvalidTransaction):
            PriceObtained.from_row({"ticker": "AAPL", "currency": "USD", "price": "n/a"})
