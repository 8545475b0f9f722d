"""Pytest configuration and fixtures."""

import pytest

from stockalert.config import Settings
from stockalert.market.cache import PriceState
from stockalert.push.notifier import PushNotifier
from stockalert.push.store import SubscriptionStore


@pytest.fixture
def settings():
    """Settings with dummy VAPID keys; webpush is always patched in tests."""
    return Settings(vapid_public_key="test-public-key", vapid_private_key="test-private-key")


@pytest.fixture
def store():
    return SubscriptionStore()


@pytest.fixture
def notifier(store):
    return PushNotifier(store=store, vapid_private_key="test-private-key", vapid_contact="mailto:test@example.com")


@pytest.fixture
def prices():
    return PriceState()

