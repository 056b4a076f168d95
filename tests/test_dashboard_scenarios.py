"""Dashboard scenarios.

Each scenario runs given/when/then steps against a fresh ScenarioContext,
created by a fixture and dropped when the test ends. Transaction tables are
given the way a data table reader supplies them: one mapping per row, every
cell a string.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pytest

from engine.aggregator import build_positions, dashboard_total
from portfolio.position import Position
from reporting.dashboard_view import DashboardView


@dataclass
class ScenarioContext:
    positions: List[Position] = field(default_factory=list)
    output: Optional[DashboardView] = None


@pytest.fixture
def ctx() -> ScenarioContext:
    return ScenarioContext()


def table(text: str) -> List[Dict[str, str]]:
    """Parse a pipe-delimited table, first row as header."""
    lines = [line.strip().strip("|") for line in text.strip().splitlines()]
    header, *rows = [[cell.strip() for cell in line.split("|")] for line in lines]
    return [dict(zip(header, row)) for row in rows]


def given_stock_transactions(ctx: ScenarioContext, rows: List[Dict[str, str]]) -> None:
    ctx.positions.extend(build_positions(rows))


def when_i_check_my_dashboard(ctx: ScenarioContext, currency: str = "USD") -> None:
    ctx.output = DashboardView(total_buying_price=dashboard_total(ctx.positions), currency=currency)


def then_i_should_see(ctx: ScenarioContext, text: str) -> None:
    assert ctx.output is not None, "dashboard was not checked"
    assert text in str(ctx.output)


def test_single_purchase_shows_buying_price(ctx):
    given_stock_transactions(ctx, table("""
        | ticker | currency | amount | price |
        | AAPL   | USD      | 2      | 150   |
    """))
    when_i_check_my_dashboard(ctx)
    then_i_should_see(ctx, "300")


def test_buying_price_sums_over_tickers(ctx):
    given_stock_transactions(ctx, table("""
        | ticker | currency | amount | price |
        | AAPL   | USD      | 2      | 150   |
        | GOOG   | USD      | 1      | 100   |
    """))
    when_i_check_my_dashboard(ctx)
    then_i_should_see(ctx, "400")
    assert len(ctx.positions) == 2


def test_repeat_purchases_fold_into_one_position(ctx):
    given_stock_transactions(ctx, table("""
        | ticker | currency | amount | price |
        | AAPL   | USD      | 10     | 150   |
        | AAPL   | USD      | 5      | 160   |
    """))
    when_i_check_my_dashboard(ctx)
    then_i_should_see(ctx, "2300")
    assert [p.ticker for p in ctx.positions] == ["AAPL"]


def test_tables_accumulate_across_steps(ctx):
    given_stock_transactions(ctx, table("""
        | ticker | currency | amount | price |
        | AAPL   | USD      | 2      | 150   |
    """))
    given_stock_transactions(ctx, table("""
        | ticker | currency | amount | price |
        | MSFT   | USD      | 3      | 10    |
    """))
    when_i_check_my_dashboard(ctx)
    then_i_should_see(ctx, "330")


def test_empty_portfolio_shows_zero(ctx):
    when_i_check_my_dashboard(ctx)
    then_i_should_see(ctx, "0 USD")


def test_each_scenario_starts_clean(ctx):
    assert ctx.positions == []
    assert ctx.output is None
