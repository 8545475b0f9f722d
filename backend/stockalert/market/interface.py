"""Abstract interface for quote sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import QuoteResult


class QuoteSource(ABC):
    """Contract for price providers.

    A source answers one symbol at a time and never raises for upstream
    problems: every failure comes back as a FetchFailure so the caller can
    skip the symbol and move on.

    Lifecycle:
        source = YahooQuoteSource(base_url=settings.quote_base_url)
        result = await source.fetch("AMZN")
        # ... once per poll cycle, per symbol ...
        await source.close()
    """

    @abstractmethod
    async def fetch(self, symbol: str) -> QuoteResult:
        """Fetch the current price and previous close for a symbol.

        Returns a Quote on success, FetchFailure otherwise.
        """

    async def close(self) -> None:
        """Release network resources. Safe to call multiple times."""
