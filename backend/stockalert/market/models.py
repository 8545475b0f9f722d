"""Data models for market data."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Stock:
    """A tracked ticker and the display name used in alert messages."""

    symbol: str
    name: str


@dataclass(frozen=True, slots=True)
class Quote:
    """Current price and previous close for a ticker, as returned by a quote source."""

    symbol: str
    price: float
    previous_close: float
    timestamp: float = field(default_factory=time.time)  # Unix seconds

    @property
    def change_percent(self) -> float:
        """Percentage change from the previous close. Not rounded."""
        return (self.price - self.previous_close) / self.previous_close * 100


@dataclass(frozen=True, slots=True)
class FetchFailure:
    """A quote that could not be obtained this cycle."""

    symbol: str
    reason: str


QuoteResult = Quote | FetchFailure


@dataclass(frozen=True, slots=True)
class PriceSnapshot:
    """Last observed price and percent change for a ticker."""

    symbol: str
    price: float
    change_percent: float
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> dict:
        """Serialize for the /precios response."""
        return {
            "price": self.price,
            "changePercent": self.change_percent,
        }
