"""
Application layer services for the CLOB client.

Pure calculations over domain models, independent of the transport.
"""

from .market_price import calculate_market_price

__all__ = ["calculate_market_price"]
