"""Process configuration read from environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 5.0
DEFAULT_PORT = 3000
DEFAULT_VAPID_CONTACT = "mailto:alertas@stockapp.com"
DEFAULT_QUOTE_BASE_URL = "https://query1.finance.yahoo.com"


class ConfigError(Exception):
    """Raised when a required setting is missing or invalid."""


@dataclass(frozen=True, slots=True)
class Thresholds:
    """Percent moves that trigger alerts. Both are positive magnitudes."""

    buy: float = DEFAULT_THRESHOLD
    sell: float = DEFAULT_THRESHOLD


@dataclass(frozen=True, slots=True)
class Settings:
    vapid_public_key: str
    vapid_private_key: str
    vapid_contact: str = DEFAULT_VAPID_CONTACT
    port: int = DEFAULT_PORT
    quote_base_url: str = DEFAULT_QUOTE_BASE_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from the environment.

        VAPID_PUBLIC_KEY and VAPID_PRIVATE_KEY are required; everything else
        has a default.
        """
        env = os.environ if environ is None else environ

        missing = [name for name in ("VAPID_PUBLIC_KEY", "VAPID_PRIVATE_KEY") if not env.get(name, "").strip()]
        if missing:
            raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

        port_raw = env.get("PORT", "").strip()
        try:
            port = int(port_raw) if port_raw else DEFAULT_PORT
        except ValueError:
            raise ConfigError(f"PORT must be an integer, got {port_raw!r}") from None

        return cls(
            vapid_public_key=env["VAPID_PUBLIC_KEY"].strip(),
            vapid_private_key=env["VAPID_PRIVATE_KEY"].strip(),
            vapid_contact=env.get("VAPID_CONTACT", "").strip() or DEFAULT_VAPID_CONTACT,
            port=port,
            quote_base_url=env.get("QUOTE_BASE_URL", "").strip() or DEFAULT_QUOTE_BASE_URL,
            log_level=env.get("LOG_LEVEL", "").strip().upper() or "INFO",
        )


def load_thresholds(environ: Mapping[str, str] | None = None) -> Thresholds:
    """Read BUY_THRESHOLD and SELL_THRESHOLD. Called once per poll cycle."""
    env = os.environ if environ is None else environ
    return Thresholds(
        buy=_parse_threshold(env, "BUY_THRESHOLD"),
        sell=_parse_threshold(env, "SELL_THRESHOLD"),
    )


def _parse_threshold(env: Mapping[str, str], name: str) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return DEFAULT_THRESHOLD
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using %.1f", name, raw, DEFAULT_THRESHOLD)
        return DEFAULT_THRESHOLD
