"""Tracked stocks."""

from .models import Stock

STOCKS: tuple[Stock, ...] = (
    Stock(symbol="AMZN", name="Amazon"),
    Stock(symbol="NVDA", name="NVIDIA"),
    Stock(symbol="BRK-B", name="Berkshire Hathaway"),
)
