"""Aggregation of transaction rows into positions.

Rows are grouped by ticker with per-ticker input order preserved, each
group is folded into one Position, and the positions' buying prices are
summed into the single dashboard total.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from common.config_loader import MIXED_CURRENCY_POLICIES
from common.errors import MixedCurrency
from portfolio.amount import Amounts
from portfolio.position import Position
from transactions.events import Transaction

logger = logging.getLogger(__name__)

Row = Union[Transaction, Mapping[str, Any]]


def _as_transaction(row: Row) -> Transaction:
    return row if isinstance(row, Transaction) else Transaction.from_row(row)


def group_by_ticker(rows: Iterable[Row]) -> Dict[str, List[Transaction]]:
    """Partition rows by ticker; each list keeps the input order."""
    by_ticker: Dict[str, List[Transaction]] = {}
    for row in rows:
        tx = _as_transaction(row)
        if tx.ticker not in by_ticker:
            by_ticker[tx.ticker] = []
        by_ticker[tx.ticker].append(tx)
    return by_ticker


def build_positions(rows: Iterable[Row], mixed_currency: str = "error") -> List[Position]:
    """Build one Position per distinct ticker.

    The position takes the currency of its ticker's first row. With
    mixed_currency="error" a later row in another currency raises
    MixedCurrency; with "first" the row is booked in the first currency.
    """
    if mixed_currency not in MIXED_CURRENCY_POLICIES:
        raise ValueError(f"mixed_currency must be one of {MIXED_CURRENCY_POLICIES}, got {mixed_currency!r}")

    positions: List[Position] = []
    for ticker, txs in group_by_ticker(rows).items():
        currency = txs[0].currency
        position = Position(ticker=ticker, currency=currency)
        for tx in txs:
            if tx.currency != currency:
                if mixed_currency == "error":
                    raise MixedCurrency(ticker, currency, tx.currency)
                logger.warning("%s: booking %s row as %s", ticker, tx.currency, currency)
            position.add_transaction(amount=tx.amount, price=tx.price)
        logger.debug("%s: %d transactions, buying price %s", ticker, len(txs), position.total_buying_price())
        positions.append(position)
    return positions


def dashboard_total(positions: Iterable[Position]) -> int:
    return sum(p.total_buying_price() for p in positions)


def totals_by_currency(positions: Iterable[Position]) -> Amounts:
    totals = Amounts()
    for p in positions:
        totals.upsert(p.buying_price())
    return totals
