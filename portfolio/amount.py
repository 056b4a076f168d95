"""Money values.

An Amount is a number tagged with a currency code. Amounts only combine
with amounts of the same currency; Amounts keeps one running total per
currency for dashboards that span several markets.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Union

from common.errors import CurrencyMismatch

DEFAULT_CURRENCY = "USD"

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal without picking up float representation noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass(frozen=True, order=True)
class Amount:
    """A number of units of some currency."""

    num: Decimal
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Amount":
        return cls(Decimal(0), currency)

    @classmethod
    def parse(cls, text: str) -> "Amount":
        """Parse '123.45 EUR' into an Amount."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"Amount must look like '123.45 EUR', got {text!r}")
        try:
            num = Decimal(parts[0])
        except InvalidOperation:
            raise ValueError(f"Not a decimal number: {parts[0]!r}") from None
        return cls(num, parts[1])

    def __add__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        if other.currency != self.currency:
            raise CurrencyMismatch(
                f"Cannot add amounts of different currencies. Got {self.currency} and {other.currency}"
            )
        return Amount(self.num + other.num, self.currency)

    def __mul__(self, factor: Number) -> "Amount":
        return Amount(self.num * to_decimal(factor), self.currency)

    __rmul__ = __mul__

    def __str__(self) -> str:
        if not self.currency:
            return f"{self.num:.2f}"
        return f"{self.num:.2f} {self.currency}"


@dataclass
class Amounts:
    """Running totals, one Amount per currency."""

    amounts: Dict[str, Amount] = field(default_factory=dict)

    @classmethod
    def of(cls, *amounts: Amount) -> "Amounts":
        totals = cls()
        for a in amounts:
            totals.upsert(a)
        return totals

    @classmethod
    def zero(cls) -> "Amounts":
        return cls.of(Amount.zero(DEFAULT_CURRENCY))

    def for_currency(self, currency: str) -> Amount:
        return self.amounts.get(currency, Amount.zero(currency))

    def upsert(self, amount: Amount) -> None:
        self.amounts[amount.currency] = self.for_currency(amount.currency) + amount

    def sorted(self) -> List[Amount]:
        return [self.amounts[c] for c in sorted(self.amounts)]

    def __str__(self) -> str:
        return "\n".join(str(a) for a in self.sorted())
