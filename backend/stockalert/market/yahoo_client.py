"""Yahoo Finance chart API client."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any

import httpx

from .interface import QuoteSource
from .models import FetchFailure, Quote, QuoteResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://query1.finance.yahoo.com"

# Yahoo rejects requests that carry a library default user agent
_HEADERS = {"User-Agent": "Mozilla/5.0 (compatible; stock-alert-backend)"}


class YahooQuoteSource(QuoteSource):
    """QuoteSource backed by GET /v8/finance/chart/{symbol}.

    Reads chart.result[0].meta.regularMarketPrice and
    chart.result[0].meta.chartPreviousClose from a 1-day range query.
    One request per symbol, no retries, no timeout.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, client: httpx.AsyncClient | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client

    async def fetch(self, symbol: str) -> QuoteResult:
        url = f"{self._base_url}/v8/finance/chart/{symbol}"
        try:
            response = await self._get_client().get(url, params={"interval": "1d", "range": "1d"})
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.debug("Yahoo request for %s failed: %s", symbol, e)
            return FetchFailure(symbol=symbol, reason=str(e))

        return parse_chart(symbol, data)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(headers=_HEADERS, timeout=None)
        return self._client


def parse_chart(symbol: str, data: Any) -> QuoteResult:
    """Extract a Quote from a chart response body."""
    try:
        meta = data["chart"]["result"][0]["meta"]
        price = meta["regularMarketPrice"]
        previous_close = meta["chartPreviousClose"]
    except (KeyError, IndexError, TypeError) as e:
        logger.debug("Malformed chart response for %s: %r", symbol, e)
        return FetchFailure(symbol=symbol, reason=f"malformed response: {e!r}")

    if not _is_number(price) or not _is_number(previous_close):
        return FetchFailure(symbol=symbol, reason="non-numeric price fields")
    try:
        price = float(price)
        previous_close = float(previous_close)
    except OverflowError:
        return FetchFailure(symbol=symbol, reason="price out of range")
    if not (math.isfinite(price) and math.isfinite(previous_close)):
        return FetchFailure(symbol=symbol, reason="non-finite price fields")
    if previous_close == 0:
        return FetchFailure(symbol=symbol, reason="previous close is zero")

    return Quote(symbol=symbol, price=price, previous_close=previous_close)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
