"""Dashboard model.

Replays ledger events in order and keeps the portfolio-wide totals that the
dashboard shows: number of positions, buying price, market value and
dividends, each split per currency.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List

from common.config_loader import MIXED_CURRENCY_POLICIES
from common.errors import MixedCurrency, UnknownTicker
from portfolio.amount import Amount, Amounts
from portfolio.position import Position
from transactions.events import DividendPaid, Event, PriceObtained, Transaction

logger = logging.getLogger(__name__)


@dataclass
class Dashboard:
    mixed_currency: str = "error"
    total_buying_price: Amounts = field(default_factory=Amounts.zero)
    total_value: Amounts = field(default_factory=Amounts.zero)
    total_dividend: Amounts = field(default_factory=Amounts.zero)
    positions: Dict[str, Position] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.mixed_currency not in MIXED_CURRENCY_POLICIES:
            raise ValueError(
                f"mixed_currency must be one of {MIXED_CURRENCY_POLICIES}, got {self.mixed_currency!r}"
            )

    @classmethod
    def from_events(cls, events: Iterable[Event], mixed_currency: str = "error") -> "Dashboard":
        dashboard = cls(mixed_currency=mixed_currency)
        for event in events:
            dashboard.handle(event)
        return dashboard

    @property
    def number_of_positions(self) -> int:
        return len(self.positions)

    def position(self, ticker: str) -> Position:
        try:
            return self.positions[ticker]
        except KeyError:
            raise UnknownTicker(ticker) from None

    def assets(self) -> List[Position]:
        """Positions by value, largest first; positions without a price last."""
        priced = [p for p in self.positions.values() if p.value is not None]
        unpriced = [p for p in self.positions.values() if p.value is None]
        priced.sort(key=lambda p: p.value.num, reverse=True)
        return priced + unpriced

    def handle(self, event: Event) -> None:
        if isinstance(event, Transaction):
            self._stocks_bought(event)
        elif isinstance(event, PriceObtained):
            self._price_obtained(event)
        elif isinstance(event, DividendPaid):
            self._dividend_paid(event)
        else:
            raise TypeError(f"Unsupported event: {event!r}")

    def _stocks_bought(self, event: Transaction) -> None:
        position = self.positions.get(event.ticker)
        if position is None:
            position = Position(ticker=event.ticker, currency=event.currency)
            self.positions[event.ticker] = position
        else:
            self._check_currency(position, event, "purchase")

        position.add_transaction(amount=event.amount, price=event.price)
        self.total_buying_price.upsert(Amount(Decimal(event.amount * event.price), position.currency))

    def _price_obtained(self, event: PriceObtained) -> None:
        position = self.positions.get(event.ticker)
        if position is None:
            logger.debug("Ignoring price for %s: not held", event.ticker)
            return
        self._check_currency(position, event, "price")
        position.record_price(event.price)
        self._recompute_value()

    def _dividend_paid(self, event: DividendPaid) -> None:
        position = self.positions.get(event.ticker)
        if position is None:
            logger.debug("Ignoring dividend for %s: not held", event.ticker)
            return
        self._check_currency(position, event, "dividend")
        self.total_dividend.upsert(position.add_dividend(event.per_share))

    def _check_currency(self, position: Position, event: Event, kind: str) -> None:
        """Apply the mixed-currency policy to an event for a held position.

        Under "first" the event is booked in the position's currency.
        """
        if event.currency == position.currency:
            return
        if self.mixed_currency == "error":
            raise MixedCurrency(event.ticker, position.currency, event.currency)
        logger.warning("%s: booking %s %s as %s", event.ticker, event.currency, kind, position.currency)

    def _recompute_value(self) -> None:
        totals = Amounts.zero()
        for p in self.positions.values():
            if p.value is not None:
                totals.upsert(p.value)
        self.total_value = totals
