"""In-memory list of Web Push subscriptions."""

from __future__ import annotations

from typing import Any


class SubscriptionStore:
    """Push subscriptions registered by clients.

    Subscriptions are stored exactly as received. Registering the same
    subscription twice stores it twice. Nothing survives a restart.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Any] = []

    def add(self, subscription: Any) -> None:
        self._subscriptions.append(subscription)

    def remove(self, subscription: Any) -> None:
        """Remove every entry equal to `subscription`."""
        self._subscriptions = [s for s in self._subscriptions if s != subscription]

    def all(self) -> list[Any]:
        """Snapshot of the current subscriptions."""
        return list(self._subscriptions)

    def __len__(self) -> int:
        return len(self._subscriptions)
