"""Application factory and server entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import create_router
from .config import Settings
from .market.cache import PriceState
from .market.stocks import STOCKS
from .market.yahoo_client import YahooQuoteSource
from .monitor import StockMonitor
from .push.notifier import PushNotifier
from .push.store import SubscriptionStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings, monitor: StockMonitor | None = None) -> FastAPI:
    """Wire the store, price state, notifier and monitor into a FastAPI app.

    The monitor is started and stopped with the app's lifespan. Pass a
    prebuilt `monitor` to control its source or interval; its notifier and
    price state are then the ones the routes use.
    """
    if monitor is None:
        store = SubscriptionStore()
        notifier = PushNotifier(
            store=store,
            vapid_private_key=settings.vapid_private_key,
            vapid_contact=settings.vapid_contact,
        )
        monitor = StockMonitor(
            source=YahooQuoteSource(base_url=settings.quote_base_url),
            prices=PriceState(),
            notifier=notifier,
            stocks=STOCKS,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await monitor.start()
        try:
            yield
        finally:
            await monitor.stop()

    app = FastAPI(title="Stock Alert Backend", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(
        create_router(
            store=monitor.notifier.store,
            notifier=monitor.notifier,
            prices=monitor.prices,
            stocks=monitor.stocks,
        )
    )
    app.state.monitor = monitor
    return app


def run() -> None:
    load_dotenv()
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    logger.info("Servidor escuchando en puerto %d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
