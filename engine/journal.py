from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Iterable, List, Optional
from portfolio.amount import Amount
from transactions.events import DividendPaid, Event, Transaction

class EntryType(Enum):
    BUY = "Buy"
    DIVIDEND = "Dividend"

@dataclass(frozen=True)
class JournalRow:
    on: Optional[date]
    type: EntryType
    ticker: str
    amount: int
    price: Amount
    total: Amount

@dataclass
class Journal:
    entries: List[JournalRow]

    @classmethod
    def from_events(cls, events: Iterable[Event]) -> "Journal":
        entries: List[JournalRow] = []
        for e in events:
            if isinstance(e, Transaction):
                price = Amount(Decimal(e.price), e.currency)
                entries.append(JournalRow(e.on, EntryType.BUY, e.ticker, e.amount, price, price * e.amount))
            elif isinstance(e, DividendPaid):
                # dividends are journaled as the payment itself, not per share
                paid = Amount(e.per_share, e.currency)
                entries.append(JournalRow(e.on, EntryType.DIVIDEND, e.ticker, 1, paid, paid))
        return cls(entries=entries)

    def buys(self) -> List[JournalRow]:
        return [r for r in self.entries if r.type is EntryType.BUY]
