"""Fixed-interval fetch → evaluate → notify loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence

from .alerts import Alert, evaluate
from .config import Thresholds, load_thresholds
from .market.cache import PriceState
from .market.interface import QuoteSource
from .market.models import FetchFailure, Stock
from .market.stocks import STOCKS
from .push.notifier import PushNotifier

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 5 * 60.0


class StockMonitor:
    """Polls every tracked stock on a fixed period and pushes threshold alerts.

    A tick fires every `interval` seconds regardless of whether the previous
    cycle has finished, so slow cycles can overlap. Stocks within a cycle are
    processed one after another.

    An alert is only considered for a stock that already has a snapshot in
    PriceState, so the first successful observation after startup is silent.
    """

    def __init__(
        self,
        source: QuoteSource,
        prices: PriceState,
        notifier: PushNotifier,
        stocks: Sequence[Stock] = STOCKS,
        interval: float = DEFAULT_INTERVAL,
        thresholds_loader: Callable[[], Thresholds] = load_thresholds,
    ) -> None:
        self._source = source
        self._prices = prices
        self._notifier = notifier
        self._stocks = tuple(stocks)
        self._interval = interval
        self._load_thresholds = thresholds_loader
        self._task: asyncio.Task | None = None
        self._cycles: set[asyncio.Task] = set()

    @property
    def stocks(self) -> tuple[Stock, ...]:
        return self._stocks

    @property
    def prices(self) -> PriceState:
        return self._prices

    @property
    def notifier(self) -> PushNotifier:
        return self._notifier

    async def start(self) -> None:
        """Start the timer. The first cycle runs one interval from now."""
        self._task = asyncio.create_task(self._schedule_loop(), name="stock-monitor")
        logger.info(
            "Stock monitor started: %d stocks, %.0fs interval",
            len(self._stocks),
            self._interval,
        )

    async def stop(self) -> None:
        pending = [t for t in (self._task, *self._cycles) if t is not None and not t.done()]
        for task in pending:
            task.cancel()
        for task in pending:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._task = None
        self._cycles.clear()
        await self._source.close()
        logger.info("Stock monitor stopped")

    async def check_stocks(self) -> list[Alert]:
        """Run one cycle over every stock. Returns the alerts that were sent."""
        thresholds = self._load_thresholds()
        fired: list[Alert] = []

        for stock in self._stocks:
            try:
                alert = await self._check_stock(stock, thresholds)
            except Exception:
                logger.exception("Skipping %s this cycle", stock.symbol)
                continue
            if alert is not None:
                fired.append(alert)

        return fired

    async def _check_stock(self, stock: Stock, thresholds: Thresholds) -> Alert | None:
        result = await self._source.fetch(stock.symbol)
        if isinstance(result, FetchFailure):
            logger.debug("Skipping %s this cycle: %s", stock.symbol, result.reason)
            return None

        change_percent = result.change_percent
        alert = None
        if stock.symbol in self._prices:
            alert = evaluate(stock, change_percent, thresholds)
            if alert is not None:
                await self._notifier.send_alert(alert.message)

        self._prices.update(stock.symbol, price=result.price, change_percent=change_percent)
        return alert

    async def _schedule_loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            cycle = asyncio.create_task(self._run_cycle(), name="stock-check")
            self._cycles.add(cycle)
            cycle.add_done_callback(self._cycles.discard)

    async def _run_cycle(self) -> None:
        try:
            alerts = await self.check_stocks()
        except Exception:
            logger.exception("Stock check cycle failed")
            return
        if alerts:
            logger.info("Sent %d alert(s): %s", len(alerts), ", ".join(a.symbol for a in alerts))
