from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional
from common.errors import InvalidTransaction
from portfolio.amount import Amount
from transactions.events import Transaction, parse_int

@dataclass
class Position:
    """All purchases of one ticker, in one currency."""

    ticker: str
    currency: str
    transactions: List[Transaction] = field(default_factory=list)
    value: Optional[Amount] = None  # None until a price is obtained
    dividends: Amount = field(init=False)

    def __post_init__(self) -> None:
        self.dividends = Amount.zero(self.currency)

    def add_transaction(self, amount: Any, price: Any) -> None:
        tx = Transaction(
            ticker=self.ticker,
            currency=self.currency,
            amount=parse_int(amount, "amount"),
            price=parse_int(price, "price"),
        )
        self.apply(tx)

    def apply(self, tx: Transaction) -> None:
        if tx.ticker != self.ticker or tx.currency != self.currency:
            raise InvalidTransaction(
                f"{tx.ticker} {tx.currency} transaction does not belong to {self.ticker} {self.currency} position"
            )
        self.transactions.append(tx)

    def total_buying_price(self) -> int:
        return sum(t.amount * t.price for t in self.transactions)

    def buying_price(self) -> Amount:
        return Amount(Decimal(self.total_buying_price()), self.currency)

    def shares(self) -> int:
        return sum(t.amount for t in self.transactions)

    def record_price(self, price: Decimal) -> Amount:
        self.value = Amount(price, self.currency) * self.shares()
        return self.value

    def add_dividend(self, per_share: Decimal) -> Amount:
        paid = Amount(per_share, self.currency) * self.shares()
        self.dividends = self.dividends + paid
        return paid
