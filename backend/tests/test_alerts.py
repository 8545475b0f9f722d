"""Tests for buy/sell threshold classification."""

from stockalert.alerts import evaluate
from stockalert.config import Thresholds
from stockalert.market.models import Stock

AMAZON = Stock(symbol="AMZN", name="Amazon")


class TestEvaluate:
    def test_inside_band_no_alert(self):
        assert evaluate(AMAZON, 4.99, Thresholds()) is None
        assert evaluate(AMAZON, -4.99, Thresholds()) is None
        assert evaluate(AMAZON, 0.0, Thresholds()) is None

    def test_buy_at_exact_threshold(self):
        alert = evaluate(AMAZON, -5.0, Thresholds())
        assert alert.kind == "buy"
        assert alert.symbol == "AMZN"
        assert alert.message == "Amazon: ¡Oportunidad de compra! Bajó -5.00%"

    def test_sell_at_exact_threshold(self):
        alert = evaluate(AMAZON, 5.0, Thresholds())
        assert alert.kind == "sell"
        assert alert.message == "Amazon: ¡Momento de vender! Subió 5.00%"

    def test_change_rounded_to_two_decimals_in_message(self):
        alert = evaluate(AMAZON, 16.666666, Thresholds())
        assert alert.message.endswith("Subió 16.67%")
        assert alert.change_percent == 16.666666

    def test_custom_thresholds(self):
        thresholds = Thresholds(buy=2.0, sell=10.0)
        assert evaluate(AMAZON, -2.5, thresholds).kind == "buy"
        assert evaluate(AMAZON, 9.0, thresholds) is None
        assert evaluate(AMAZON, 10.0, thresholds).kind == "sell"

    def test_buy_wins_when_both_match(self):
        """Negative thresholds make both conditions true; buy is checked first."""
        thresholds = Thresholds(buy=-1.0, sell=-1.0)
        alert = evaluate(AMAZON, 2.0, thresholds)
        assert alert.kind == "buy"
