"""Journal file loading.

The journal is a CSV file, one event per line:

    type,date,ticker,currency,amount,price
    buy,2023-01-02,AAPL,USD,10,150
    price,2023-06-30,AAPL,USD,,190.50
    dividend,2023-08-17,AAPL,USD,,0.24

For `dividend` lines the price column holds the dividend per share.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from common.errors import InvalidTransaction
from transactions.events import DividendPaid, Event, PriceObtained, Transaction

logger = logging.getLogger(__name__)

EVENT_TYPES = {
    "buy": Transaction,
    "price": PriceObtained,
    "dividend": DividendPaid,
}


def events_from_frame(df: pd.DataFrame) -> List[Event]:
    """Parse a journal DataFrame into events, in file order."""
    if "type" not in df.columns:
        raise InvalidTransaction("journal must contain a 'type' column")

    events: List[Event] = []
    # header is line 1
    for line, record in enumerate(df.to_dict(orient="records"), start=2):
        row: Dict[str, Any] = {k: v for k, v in record.items() if not pd.isna(v)}
        kind = str(row.get("type", "")).strip().lower()
        event_cls = EVENT_TYPES.get(kind)
        if event_cls is None:
            raise InvalidTransaction(f"line {line}: unknown event type {row.get('type')!r}")
        try:
            events.append(event_cls.from_row(row))
        except InvalidTransaction as e:
            raise InvalidTransaction(f"line {line}: {e}") from e
    return events


def load_journal(path: str | Path) -> List[Event]:
    df = pd.read_csv(path, dtype=str, skipinitialspace=True)
    events = events_from_frame(df)
    logger.info("Loaded %d events from %s", len(events), path)
    return events
