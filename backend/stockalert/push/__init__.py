"""Web Push subscriptions and delivery."""

from .notifier import ALERT_TITLE, DeliveryResult, PushNotifier
from .store import SubscriptionStore

__all__ = [
    "ALERT_TITLE",
    "DeliveryResult",
    "PushNotifier",
    "SubscriptionStore",
]
