"""
Market Data Models: typed responses of the CLOB public pricing endpoints

Each endpoint returns a small JSON object with one or two string-encoded
numbers:
- Midpoint:        GET /midpoint          {"mid": "0.505"}
- Price:           GET /price             {"price": "0.51"}
- Spread:          GET /spread            {"spread": "0.02"}
- TickSize:        GET /tick-size         {"minimum_tick_size": 0.01}
- NegRisk:         GET /neg-risk          {"neg_risk": false}
- LastTradePrice:  GET /last-trade-price  {"price": "0.50", "side": "BUY"}

Author: CLOB Client Team
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
import logging

from ..utils.decimal_utils import to_decimal
from .order_book import Side

logger = logging.getLogger(__name__)


def _require_dict(data, name: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"Expected {name} object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class Midpoint:
    """Midpoint between best bid and best ask."""
    mid: Decimal

    @classmethod
    def from_dict(cls, data: dict) -> "Midpoint":
        data = _require_dict(data, "midpoint")
        return cls(mid=to_decimal(data.get("mid"), "mid"))


@dataclass(frozen=True)
class Price:
    """Best price available to a taker on one side."""
    price: Decimal

    @classmethod
    def from_dict(cls, data: dict) -> "Price":
        data = _require_dict(data, "price")
        return cls(price=to_decimal(data.get("price"), "price"))


@dataclass(frozen=True)
class Spread:
    """Difference between best ask and best bid."""
    spread: Decimal

    @classmethod
    def from_dict(cls, data: dict) -> "Spread":
        data = _require_dict(data, "spread")
        return cls(spread=to_decimal(data.get("spread"), "spread"))


@dataclass(frozen=True)
class TickSize:
    """Minimum price increment of a market."""
    minimum_tick_size: Decimal

    @classmethod
    def from_dict(cls, data: dict) -> "TickSize":
        data = _require_dict(data, "tick size")
        return cls(
            minimum_tick_size=to_decimal(data.get("minimum_tick_size"), "minimum_tick_size")
        )


@dataclass(frozen=True)
class NegRisk:
    neg_risk: bool

    @classmethod
    def from_dict(cls, data: dict) -> "NegRisk":
        data = _require_dict(data, "neg risk")
        if "neg_risk" not in data:
            raise ValueError("Missing neg_risk field")
        return cls(neg_risk=bool(data["neg_risk"]))


@dataclass(frozen=True)
class LastTradePrice:
    """
    Price and taker side of the most recent trade.

    Attributes:
        price: Trade price
        side: Taker side, None when the market has not traded yet
    """
    price: Decimal
    side: Optional[Side] = None

    @classmethod
    def from_dict(cls, data: dict) -> "LastTradePrice":
        data = _require_dict(data, "last trade price")
        side = data.get("side")
        return cls(
            price=to_decimal(data.get("price"), "price"),
            side=Side.parse(side) if side else None,
        )
