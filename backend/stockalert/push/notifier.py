"""Web Push delivery to stored subscriptions."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any

from pywebpush import webpush

from .store import SubscriptionStore

logger = logging.getLogger(__name__)

ALERT_TITLE = "Alerta de acciones"


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Outcome of a single push attempt."""

    subscription: Any
    ok: bool
    error: str | None = None


class PushNotifier:
    """Sends JSON payloads to every subscription in a SubscriptionStore.

    Each subscription gets exactly one attempt. On the alert path a failed
    subscription is treated as expired and dropped from the store; the manual
    path leaves the store untouched.
    """

    def __init__(
        self,
        store: SubscriptionStore,
        vapid_private_key: str,
        vapid_contact: str,
    ) -> None:
        self._store = store
        self._private_key = vapid_private_key
        self._contact = vapid_contact

    @property
    def store(self) -> SubscriptionStore:
        return self._store

    async def deliver(self, subscription: Any, payload: dict) -> DeliveryResult:
        data = json.dumps(payload, ensure_ascii=False)
        try:
            # pywebpush is synchronous (requests); keep it off the event loop.
            await asyncio.to_thread(self._send, subscription, data)
        except Exception as e:
            return DeliveryResult(subscription=subscription, ok=False, error=str(e))
        return DeliveryResult(subscription=subscription, ok=True)

    async def send_alert(self, message: str) -> list[DeliveryResult]:
        """Push an alert to all subscriptions, pruning those that fail."""
        results = []
        for subscription in self._store.all():
            result = await self.deliver(subscription, {"title": ALERT_TITLE, "body": message})
            if not result.ok:
                self._store.remove(subscription)
                logger.info("Removed subscription after failed delivery: %s", result.error)
            results.append(result)
        return results

    async def notify_all(self, title: Any, body: Any) -> list[DeliveryResult]:
        """Push {title, body} as given to all subscriptions. Never prunes."""
        results = []
        for subscription in self._store.all():
            result = await self.deliver(subscription, {"title": title, "body": body})
            if not result.ok:
                logger.warning("Manual notification failed: %s", result.error)
            results.append(result)
        return results

    def _send(self, subscription: Any, data: str) -> None:
        # pywebpush adds aud/exp to the claims dict, so pass a fresh one.
        webpush(
            subscription_info=subscription,
            data=data,
            vapid_private_key=self._private_key,
            vapid_claims={"sub": self._contact},
        )
