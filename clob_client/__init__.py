"""
CLOB Client

An asyncio client library for a central-limit-order-book exchange API:
typed HTTP transport, order book models and market order pricing.
"""

from .clients import ClobClient, HttpClient
from .clients.errors import (
    ClobError,
    TransportError,
    SerializationError,
    DeserializationError,
    ApiError,
    InvalidOrderError,
)
from .config import ClientConfig
from .models import OrderSummary, OrderBookSummary, Side
from .services import calculate_market_price

__version__ = "0.1.0"
__all__ = [
    "ClobClient",
    "HttpClient",
    "ClientConfig",
    "OrderSummary",
    "OrderBookSummary",
    "Side",
    "calculate_market_price",
    "ClobError",
    "TransportError",
    "SerializationError",
    "DeserializationError",
    "ApiError",
    "InvalidOrderError",
]
