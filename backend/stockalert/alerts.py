"""Buy/sell classification of a ticker's percent change."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .config import Thresholds
from .market.models import Stock

AlertKind = Literal["buy", "sell"]


@dataclass(frozen=True, slots=True)
class Alert:
    symbol: str
    kind: AlertKind
    change_percent: float
    message: str


def evaluate(stock: Stock, change_percent: float, thresholds: Thresholds) -> Alert | None:
    """Classify a percent change against the buy/sell thresholds.

    A drop of at least `thresholds.buy` percent is a buy opportunity, a rise of
    at least `thresholds.sell` percent is a sell signal. Buy is checked first,
    so at most one alert comes back.
    """
    if change_percent <= -thresholds.buy:
        return Alert(
            symbol=stock.symbol,
            kind="buy",
            change_percent=change_percent,
            message=f"{stock.name}: ¡Oportunidad de compra! Bajó {change_percent:.2f}%",
        )
    if change_percent >= thresholds.sell:
        return Alert(
            symbol=stock.symbol,
            kind="sell",
            change_percent=change_percent,
            message=f"{stock.name}: ¡Momento de vender! Subió {change_percent:.2f}%",
        )
    return None
