"""
Unit tests for the market data response models.
"""

import pytest
from decimal import Decimal

from clob_client.models.market_data import (
    LastTradePrice,
    Midpoint,
    NegRisk,
    Price,
    Spread,
    TickSize,
)
from clob_client.models.order_book import Side


class TestPriceResponses:
    """Single-value price responses."""

    def test_midpoint(self):
        assert Midpoint.from_dict({"mid": "0.505"}).mid == Decimal("0.505")

    def test_price(self):
        assert Price.from_dict({"price": "0.51"}).price == Decimal("0.51")

    def test_spread(self):
        assert Spread.from_dict({"spread": "0.02"}).spread == Decimal("0.02")

    def test_tick_size_numeric(self):
        """The exchange sends tick size as a JSON number."""
        tick = TickSize.from_dict({"minimum_tick_size": 0.001})

        assert tick.minimum_tick_size == Decimal("0.001")

    @pytest.mark.parametrize("model,data", [
        (Midpoint, {}),
        (Price, {"price": "x"}),
        (Spread, "0.02"),
        (TickSize, {"minimum_tick_size": None}),
    ])
    def test_malformed(self, model, data):
        with pytest.raises(ValueError):
            model.from_dict(data)


class TestNegRisk:

    def test_parse(self):
        assert NegRisk.from_dict({"neg_risk": True}).neg_risk is True

    def test_missing_field(self):
        with pytest.raises(ValueError):
            NegRisk.from_dict({})


class TestLastTradePrice:

    def test_with_side(self):
        last = LastTradePrice.from_dict({"price": "0.50", "side": "BUY"})

        assert last.price == Decimal("0.50")
        assert last.side is Side.BUY

    def test_without_side(self):
        """Markets that never traded report an empty side."""
        last = LastTradePrice.from_dict({"price": "0.5", "side": ""})

        assert last.side is None
