from __future__ import annotations
from typing import Dict, Any
from portfolio.amount import Amounts
from portfolio.dashboard import Dashboard

def _amounts(amounts: Amounts) -> Dict[str, str]:
    return {a.currency: f"{a.num:.2f}" for a in amounts.sorted()}

def dashboard_summary(dashboard: Dashboard) -> Dict[str, Any]:
    return {
        "number_of_positions": dashboard.number_of_positions,
        "total_buying_price": _amounts(dashboard.total_buying_price),
        "total_value": _amounts(dashboard.total_value),
        "total_dividend": _amounts(dashboard.total_dividend),
        "assets": [
            {
                "ticker": p.ticker,
                "currency": p.currency,
                "amount": p.shares(),
                "buying_price": p.total_buying_price(),
                "dividends": f"{p.dividends.num:.2f}",
                "value": f"{p.value.num:.2f}" if p.value is not None else None,
            }
            for p in dashboard.assets()
        ],
    }
