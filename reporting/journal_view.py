from __future__ import annotations
from dataclasses import dataclass
import pandas as pd
from engine.journal import Journal

@dataclass(frozen=True)
class JournalView:
    journal: Journal

    def to_display_string(self) -> str:
        rows = [
            [str(r.on or ""), r.type.value, r.ticker, str(r.amount), str(r.price), str(r.total)]
            for r in self.journal.buys()
        ]
        if not rows:
            return "\nMy Journal\n  (no purchases)"
        df = pd.DataFrame(rows, columns=["Date", "Type", "Ticker", "Amount", "Price", "Total"])
        return f"\nMy Journal\n{df.to_string(index=False)}"

    def __str__(self) -> str:
        return self.to_display_string()
