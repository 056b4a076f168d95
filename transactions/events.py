"""Ledger events.

Rows arrive as loosely typed mappings (a CSV line, a scenario table). They
are parsed once here into frozen dataclasses so everything downstream works
with real ints, Decimals and dates.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional, Union

from common.errors import InvalidTransaction

REQUIRED_FIELDS = ("ticker", "currency", "amount", "price")


def parse_int(value: Any, field_name: str) -> int:
    """Interpret value as an integer, rejecting anything lossy."""
    if isinstance(value, bool):
        raise InvalidTransaction(f"{field_name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise InvalidTransaction(f"{field_name} must be an integer, got {value!r}")
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidTransaction(f"{field_name} must be an integer, got {value!r}")


def parse_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise InvalidTransaction(f"{field_name} must be a number, got {value!r}")
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidTransaction(f"{field_name} must be a number, got {value!r}") from None


def parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise InvalidTransaction(f"date must be YYYY-MM-DD, got {value!r}") from None


def _require(row: Mapping[str, Any], *names: str) -> None:
    missing = [n for n in names if row.get(n) in (None, "")]
    if missing:
        raise InvalidTransaction(f"row is missing {', '.join(missing)}: {dict(row)}")


@dataclass(frozen=True)
class Transaction:
    """A stock purchase: `amount` shares of `ticker` at `price` each."""

    ticker: str
    currency: str
    amount: int
    price: int
    on: Optional[date] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Transaction":
        _require(row, *REQUIRED_FIELDS)
        return cls(
            ticker=str(row["ticker"]).strip(),
            currency=str(row["currency"]).strip(),
            amount=parse_int(row["amount"], "amount"),
            price=parse_int(row["price"], "price"),
            on=parse_date(row.get("date")),
        )


StocksBought = Transaction


@dataclass(frozen=True)
class PriceObtained:
    """A market price observed for one share of `ticker`."""

    ticker: str
    currency: str
    price: Decimal
    on: Optional[date] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "PriceObtained":
        _require(row, "ticker", "currency", "price")
        return cls(
            ticker=str(row["ticker"]).strip(),
            currency=str(row["currency"]).strip(),
            price=parse_decimal(row["price"], "price"),
            on=parse_date(row.get("date")),
        )


@dataclass(frozen=True)
class DividendPaid:
    """A dividend of `per_share` paid on every share held."""

    ticker: str
    currency: str
    per_share: Decimal
    on: Optional[date] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DividendPaid":
        _require(row, "ticker", "currency", "price")
        return cls(
            ticker=str(row["ticker"]).strip(),
            currency=str(row["currency"]).strip(),
            per_share=parse_decimal(row["price"], "price"),
            on=parse_date(row.get("date")),
        )


Event = Union[Transaction, PriceObtained, DividendPaid]
