"""Text rendering of the dashboard."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pandas as pd

from portfolio.amount import Amounts
from portfolio.dashboard import Dashboard

UNKNOWN_VALUE = "??.?? ???"


@dataclass(frozen=True)
class DashboardView:
    """The total buying price of a portfolio in one currency."""

    total_buying_price: int
    currency: str

    def to_display_string(self) -> str:
        # no thousands separators: the total must appear verbatim
        return f"Dashboard\n\n  Total buying price  {self.total_buying_price} {self.currency}"

    def __str__(self) -> str:
        return self.to_display_string()


def _table(rows: List[List[str]], columns: List[str], header: bool) -> str:
    if not rows:
        return "  ".join(columns) if header else ""
    df = pd.DataFrame(rows, columns=columns)
    return df.to_string(index=False, header=header, justify="center")


def _fmt_amounts(amounts: Amounts) -> List[str]:
    return [str(a) for a in amounts.sorted()]


@dataclass(frozen=True)
class DetailedDashboardView:
    """Totals and per-asset breakdown of a replayed Dashboard."""

    dashboard: Dashboard

    def meta_table(self) -> str:
        d = self.dashboard
        meta = [
            ("Number of positions", [str(d.number_of_positions)]),
            ("Total buying price", _fmt_amounts(d.total_buying_price)),
            ("Total value", _fmt_amounts(d.total_value)),
            ("Total dividend", _fmt_amounts(d.total_dividend)),
        ]
        rows = []
        for key, values in meta:
            # one line per currency, label on the first
            for i, v in enumerate(values):
                rows.append([key if i == 0 else "", v])
        return _table(rows, ["key", "value"], header=False)

    def portfolio_table(self) -> str:
        rows = [
            [
                p.ticker,
                str(p.shares()),
                str(p.dividends),
                str(p.value) if p.value is not None else UNKNOWN_VALUE,
            ]
            for p in self.dashboard.assets()
        ]
        return _table(rows, ["Ticker", "Amount", "Dividend", "Value"], header=True)

    def to_display_string(self) -> str:
        return f"\nDashboard\n\n{self.meta_table()}\n\n{self.portfolio_table()}"

    def __str__(self) -> str:
        return self.to_display_string()
