"""
CLOB Client Domain Layer

This module contains domain models for order book snapshots, market data
responses and request parameters.
"""

from .order_book import OrderSummary, OrderBookSummary, Side
from .market_data import Midpoint, Price, Spread, TickSize, NegRisk, LastTradePrice
from .request_params import (
    INITIAL_CURSOR,
    END_CURSOR,
    PaginationParams,
    TradeQueryParams,
    ActivityQueryParams,
    ActivitySortBy,
    SortDirection,
)

__all__ = [
    "OrderSummary",
    "OrderBookSummary",
    "Side",
    "Midpoint",
    "Price",
    "Spread",
    "TickSize",
    "NegRisk",
    "LastTradePrice",
    "INITIAL_CURSOR",
    "END_CURSOR",
    "PaginationParams",
    "TradeQueryParams",
    "ActivityQueryParams",
    "ActivitySortBy",
    "SortDirection",
]
