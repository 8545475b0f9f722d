"""Tests for environment configuration."""

import logging

import pytest

from stockalert.config import ConfigError, Settings, Thresholds, load_thresholds

VAPID_ENV = {"VAPID_PUBLIC_KEY": "pub", "VAPID_PRIVATE_KEY": "priv"}


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env(VAPID_ENV)
        assert settings.vapid_public_key == "pub"
        assert settings.vapid_private_key == "priv"
        assert settings.vapid_contact == "mailto:alertas@stockapp.com"
        assert settings.port == 3000
        assert settings.quote_base_url == "https://query1.finance.yahoo.com"
        assert settings.log_level == "INFO"

    def test_overrides(self):
        env = {
            **VAPID_ENV,
            "PORT": "8080",
            "VAPID_CONTACT": "mailto:ops@example.com",
            "LOG_LEVEL": "debug",
        }
        settings = Settings.from_env(env)
        assert settings.port == 8080
        assert settings.vapid_contact == "mailto:ops@example.com"
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("missing", ["VAPID_PUBLIC_KEY", "VAPID_PRIVATE_KEY"])
    def test_missing_vapid_key(self, missing):
        env = {k: v for k, v in VAPID_ENV.items() if k != missing}
        with pytest.raises(ConfigError, match=missing):
            Settings.from_env(env)

    def test_blank_vapid_key_counts_as_missing(self):
        with pytest.raises(ConfigError):
            Settings.from_env({**VAPID_ENV, "VAPID_PRIVATE_KEY": "  "})

    def test_invalid_port(self):
        with pytest.raises(ConfigError, match="PORT"):
            Settings.from_env({**VAPID_ENV, "PORT": "abc"})

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("VAPID_PUBLIC_KEY", "env-pub")
        monkeypatch.setenv("VAPID_PRIVATE_KEY", "env-priv")
        assert Settings.from_env().vapid_public_key == "env-pub"


class TestLoadThresholds:
    def test_defaults(self):
        assert load_thresholds({}) == Thresholds(buy=5.0, sell=5.0)

    def test_overrides(self):
        assert load_thresholds({"BUY_THRESHOLD": "2.5", "SELL_THRESHOLD": "7"}) == Thresholds(buy=2.5, sell=7.0)

    def test_invalid_value_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            thresholds = load_thresholds({"BUY_THRESHOLD": "lots"})
        assert thresholds.buy == 5.0
        assert "BUY_THRESHOLD" in caplog.text

    def test_reread_each_call(self, monkeypatch):
        monkeypatch.setenv("SELL_THRESHOLD", "3")
        assert load_thresholds().sell == 3.0
        monkeypatch.setenv("SELL_THRESHOLD", "4")
        assert load_thresholds().sell == 4.0
