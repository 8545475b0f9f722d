"""HTTP routes: subscription registration, manual push, current prices."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Annotated, Any

from fastapi import APIRouter, Body
from fastapi.responses import PlainTextResponse

from .market.cache import PriceState
from .market.models import Stock
from .push.notifier import PushNotifier
from .push.store import SubscriptionStore

logger = logging.getLogger(__name__)


def create_router(
    store: SubscriptionStore,
    notifier: PushNotifier,
    prices: PriceState,
    stocks: Sequence[Stock],
) -> APIRouter:
    """Create the API router bound to the service's shared state.

    The handlers close over the objects passed in here, so every route sees
    the same store and price state the monitor writes to.
    """
    router = APIRouter()

    @router.post("/subscribe", status_code=201)
    async def subscribe(subscription: Annotated[Any, Body()]) -> dict:
        """Register a push subscription as sent by the browser."""
        store.add(subscription)
        logger.info("Subscription stored (%d total)", len(store))
        return {"message": "Suscripción guardada"}

    @router.post("/notify")
    async def notify(payload: Annotated[dict[str, Any], Body()]) -> dict:
        """Send {title, body} to every subscription, for manual testing."""
        await notifier.notify_all(payload.get("title"), payload.get("body"))
        return {"message": "Notificaciones enviadas"}

    @router.get("/precios")
    async def precios() -> dict:
        """Last observed price and percent change for every tracked stock."""
        result = {}
        for stock in stocks:
            snapshot = prices.get(stock.symbol)
            if snapshot is None:
                result[stock.symbol] = {"price": None, "changePercent": None}
            else:
                result[stock.symbol] = snapshot.to_dict()
        return result

    @router.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "Stock Alert Backend funcionando"

    return router
