"""Bullboard CLI.

Provides commands for:
- dashboard: Positions, totals and dividends of the journal
- total: Total buying price of all purchases in one currency
- journal: Purchases recorded in the journal
- demo: Dashboard of a built-in example portfolio
"""
from __future__ import annotations

import argparse
import json
import logging
from datetime import date
from decimal import Decimal
from typing import List

from common.config_loader import LoadedConfig, load_all
from common.errors import BullboardError
from common.logging_config import configure_logging
from engine.aggregator import build_positions, dashboard_total
from engine.journal import Journal
from portfolio.dashboard import Dashboard
from reporting.dashboard_view import DashboardView, DetailedDashboardView
from reporting.journal_view import JournalView
from reporting.summary import dashboard_summary
from transactions.events import DividendPaid, Event, PriceObtained, Transaction
from transactions.loader import load_journal

logger = logging.getLogger(__name__)


def demo_events() -> List[Event]:
    """A small two-market portfolio with one price update and a dividend."""
    return [
        Transaction("AAPL", "USD", 10, 150, date(2023, 1, 2)),
        Transaction("AAPL", "USD", 5, 160, date(2023, 2, 1)),
        Transaction("ASR-AS", "EUR", 20, 42, date(2023, 2, 15)),
        PriceObtained("AAPL", "USD", Decimal("190.50"), date(2023, 6, 30)),
        PriceObtained("ASR-AS", "EUR", Decimal("40.10"), date(2023, 6, 30)),
        DividendPaid("AAPL", "USD", Decimal("0.24"), date(2023, 8, 17)),
    ]


def _journal_path(args, cfg: LoadedConfig) -> str:
    return args.journal or cfg.journal_path


def cmd_dashboard(args, cfg: LoadedConfig) -> int:
    """Handle dashboard command: full dashboard of the journal."""
    events = load_journal(_journal_path(args, cfg))
    dashboard = Dashboard.from_events(events, mixed_currency=cfg.mixed_currency)

    if args.json:
        print(json.dumps(dashboard_summary(dashboard), indent=2))
    else:
        print(DetailedDashboardView(dashboard))
    return 0


def cmd_total(args, cfg: LoadedConfig) -> int:
    """Handle total command: single buying-price total over all purchases."""
    events = load_journal(_journal_path(args, cfg))
    buys = [e for e in events if isinstance(e, Transaction)]
    positions = build_positions(buys, mixed_currency=cfg.mixed_currency)

    currency = args.currency or cfg.currency
    skipped = sorted(p.ticker for p in positions if p.currency != currency)
    if skipped:
        logger.warning("Leaving out positions not in %s: %s", currency, ", ".join(skipped))
    in_currency = [p for p in positions if p.currency == currency]

    print(DashboardView(total_buying_price=dashboard_total(in_currency), currency=currency))
    return 0


def cmd_journal(args, cfg: LoadedConfig) -> int:
    """Handle journal command: list recorded purchases."""
    events = load_journal(_journal_path(args, cfg))
    print(JournalView(Journal.from_events(events)))
    return 0


def cmd_demo(args, cfg: LoadedConfig) -> int:
    """Handle demo command: dashboard of the built-in portfolio."""
    print(DetailedDashboardView(Dashboard.from_events(demo_events())))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bullboard",
        description="Bullboard: stock positions and dividends at a glance",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common arguments for all commands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default="config/bullboard.yaml", help="Config file")

    with_journal = argparse.ArgumentParser(add_help=False, parents=[common])
    with_journal.add_argument("--journal", default=None, help="Journal CSV file (default: from config)")

    dash = sub.add_parser("dashboard", parents=[with_journal], help="Show the dashboard")
    dash.add_argument("--json", action="store_true", help="Print totals as JSON")
    dash.set_defaults(func=cmd_dashboard)

    total = sub.add_parser("total", parents=[with_journal], help="Show the total buying price")
    total.add_argument("--currency", default=None, help="Currency label (default: from config)")
    total.set_defaults(func=cmd_total)

    journal = sub.add_parser("journal", parents=[with_journal], help="Show the journal")
    journal.set_defaults(func=cmd_journal)

    demo = sub.add_parser("demo", parents=[common], help="Show a demo of the dashboard")
    demo.set_defaults(func=cmd_demo)

    return p


def run(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_all(args.config)
    configure_logging(cfg.log_level)

    try:
        return args.func(args, cfg)
    except (BullboardError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1


def main():
    """Main entry point."""
    raise SystemExit(run())


if __name__ == "__main__":
    main()
