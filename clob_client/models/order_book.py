"""
Order Book Models: typed snapshots of the CLOB /book response

The exchange returns one side of the book as a list of price levels:

    {
        "market": "0x...",
        "asset_id": "1234...",
        "timestamp": "1700000000000",
        "hash": "0xabc...",
        "bids": [{"price": "0.48", "size": "120"}, ...],
        "asks": [{"price": "0.52", "size": "80"}, ...],
        "min_order_size": "5",
        "tick_size": "0.01",
        "neg_risk": false
    }

Key Design Decisions:
- Prices and sizes are Decimal, never float (financial quantities)
- Levels are kept in the order the exchange delivered them; nothing here
  sorts or validates the ordering
- OrderSummary is frozen: a level is a snapshot value, not a mutable record

Author: CLOB Client Team
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
import logging

from ..utils.decimal_utils import to_decimal

logger = logging.getLogger(__name__)


class Side(Enum):
    """Order side from the taker's point of view."""
    BUY = "BUY"
    SELL = "SELL"

    @classmethod
    def parse(cls, value: Any) -> "Side":
        """Accept a Side or a case-insensitive string ("buy", "SELL")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Invalid side: {value!r}") from None


@dataclass(frozen=True)
class OrderSummary:
    """
    One price level of an order book.

    Attributes:
        price: Level price in exchange-native precision (>= 0)
        size: Quantity available at that price (>= 0)
    """
    price: Decimal
    size: Decimal

    def __post_init__(self):
        if self.price < 0:
            raise ValueError(f"Level price must be non-negative, got {self.price}")
        if self.size < 0:
            raise ValueError(f"Level size must be non-negative, got {self.size}")

    @property
    def notional(self) -> Decimal:
        """Monetary value of the level: size * price."""
        return self.size * self.price

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderSummary":
        """
        Create an OrderSummary from a raw level dictionary.

        Args:
            data: {"price": "0.5", "size": "100"}

        Returns:
            OrderSummary instance

        Raises:
            ValueError: If data is not an object, or price or size is missing,
                malformed or negative
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected order level object, got {type(data).__name__}")

        return cls(
            price=to_decimal(data.get("price"), "price"),
            size=to_decimal(data.get("size"), "size"),
        )

    def to_dict(self) -> Dict[str, str]:
        """Convert to the exchange's string-encoded level format."""
        return {"price": str(self.price), "size": str(self.size)}

    def __repr__(self) -> str:
        return f"OrderSummary({self.price} x {self.size})"


@dataclass
class OrderBookSummary:
    """
    Order book snapshot for a single outcome token.

    Attributes:
        market: Condition id of the market
        asset_id: Token id the book belongs to
        timestamp: Exchange timestamp (milliseconds, as delivered)
        hash: Exchange-provided hash of the book state
        bids: Bid levels in delivered order
        asks: Ask levels in delivered order
        min_order_size: Minimum order size accepted by the market
        tick_size: Minimum price increment
        neg_risk: Whether the market is a negative-risk market
    """
    market: str = ""
    asset_id: str = ""
    timestamp: Optional[str] = None
    hash: Optional[str] = None
    bids: List[OrderSummary] = field(default_factory=list)
    asks: List[OrderSummary] = field(default_factory=list)
    min_order_size: Optional[Decimal] = None
    tick_size: Optional[Decimal] = None
    neg_risk: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderBookSummary":
        """
        Create an OrderBookSummary from a decoded /book response.

        Args:
            data: Raw response dictionary

        Returns:
            OrderBookSummary instance

        Raises:
            ValueError: If a level or numeric field is malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected order book object, got {type(data).__name__}")

        min_order_size = data.get("min_order_size")
        tick_size = data.get("tick_size")

        book = cls(
            market=data.get("market", ""),
            asset_id=data.get("asset_id", ""),
            timestamp=data.get("timestamp"),
            hash=data.get("hash"),
            bids=[OrderSummary.from_dict(level) for level in data.get("bids") or []],
            asks=[OrderSummary.from_dict(level) for level in data.get("asks") or []],
            min_order_size=(
                to_decimal(min_order_size, "min_order_size")
                if min_order_size is not None else None
            ),
            tick_size=to_decimal(tick_size, "tick_size") if tick_size is not None else None,
            neg_risk=bool(data.get("neg_risk", False)),
        )

        logger.debug(
            f"Parsed order book for {book.asset_id}: "
            f"{len(book.bids)} bids, {len(book.asks)} asks"
        )
        return book

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the exchange's response format."""
        return {
            "market": self.market,
            "asset_id": self.asset_id,
            "timestamp": self.timestamp,
            "hash": self.hash,
            "bids": [level.to_dict() for level in self.bids],
            "asks": [level.to_dict() for level in self.asks],
            "min_order_size": str(self.min_order_size) if self.min_order_size is not None else None,
            "tick_size": str(self.tick_size) if self.tick_size is not None else None,
            "neg_risk": self.neg_risk,
        }

    def levels_for(self, side: Side) -> List[OrderSummary]:
        """
        Liquidity a taker on the given side consumes.

        A buyer lifts the asks, a seller hits the bids.
        """
        return self.asks if Side.parse(side) is Side.BUY else self.bids

    def __repr__(self) -> str:
        return (
            f"OrderBookSummary({self.asset_id}, "
            f"levels={len(self.bids)}x{len(self.asks)})"
        )
