"""In-memory store of the last observed price per ticker."""

from __future__ import annotations

import time
from threading import Lock

from .models import PriceSnapshot


class PriceState:
    """Latest price and percent change for each ticker.

    Writer: StockMonitor, once per successful fetch.
    Readers: StockMonitor (to decide whether a ticker has been seen before)
    and the /precios endpoint.

    Holds no history. Each update overwrites the previous snapshot.
    """

    def __init__(self) -> None:
        self._prices: dict[str, PriceSnapshot] = {}
        self._lock = Lock()

    def update(
        self,
        symbol: str,
        price: float,
        change_percent: float,
        timestamp: float | None = None,
    ) -> PriceSnapshot:
        """Record the latest observation for a ticker. Returns the stored snapshot."""
        with self._lock:
            snapshot = PriceSnapshot(
                symbol=symbol,
                price=price,
                change_percent=change_percent,
                timestamp=time.time() if timestamp is None else timestamp,
            )
            self._prices[symbol] = snapshot
            return snapshot

    def get(self, symbol: str) -> PriceSnapshot | None:
        """Latest snapshot for a ticker, or None if it was never observed."""
        with self._lock:
            return self._prices.get(symbol)

    def __len__(self) -> int:
        with self._lock:
            return len(self._prices)

    def __contains__(self, symbol: str) -> bool:
        with self._lock:
            return symbol in self._prices
