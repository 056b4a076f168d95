from __future__ import annotations


class BullboardError(Exception):
    """Base class for errors raised by the dashboard and its inputs."""

    pass


class InvalidTransaction(BullboardError, ValueError):
    """Raised when a transaction row cannot be parsed."""

    pass


class MixedCurrency(BullboardError):
    """Raised when rows for one ticker disagree on currency."""

    def __init__(self, ticker: str, expected: str, got: str) -> None:
        super().__init__(f"{ticker}: rows mix currencies {expected} and {got}")
        self.ticker = ticker
        self.expected = expected
        self.got = got


class CurrencyMismatch(BullboardError, ValueError):
    """Raised when combining amounts of different currencies."""

    pass


class UnknownTicker(BullboardError, KeyError):
    """Raised when looking up a position the dashboard does not hold."""

    def __str__(self) -> str:
        return f"No position for ticker {self.args[0]}"
