"""Market data subsystem.

Public API:
    Stock            - Tracked ticker and display name
    Quote            - Price and previous close from a quote source
    FetchFailure     - Failure variant of a quote fetch
    PriceSnapshot    - Last observed price and percent change
    PriceState       - In-memory store of the latest snapshot per ticker
    QuoteSource      - Abstract interface for price providers
    YahooQuoteSource - QuoteSource backed by the Yahoo Finance chart API
    STOCKS           - The tracked tickers
"""

from .cache import PriceState
from .interface import QuoteSource
from .models import FetchFailure, PriceSnapshot, Quote, QuoteResult, Stock
from .stocks import STOCKS
from .yahoo_client import YahooQuoteSource

__all__ = [
    "Stock",
    "Quote",
    "FetchFailure",
    "QuoteResult",
    "PriceSnapshot",
    "PriceState",
    "QuoteSource",
    "YahooQuoteSource",
    "STOCKS",
]
