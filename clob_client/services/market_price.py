"""
Market Price Service - market order pricing over order book depth

A market order sweeps the book from the best level outward until the
requested notional is filled. The order is priced at the last (worst) level
it touches:

    sum = 0
    for level in levels (best to worst):
        sum += level.size * level.price
        if sum >= amount_to_match:
            return level.price

This is a conservative fill price, not a volume-weighted average. Levels
past the one that completes the fill are never read.

The levels must already be ordered best-to-worst for the taker; the exchange
delivers them that way and nothing here re-sorts them.
"""

import logging
from decimal import Decimal
from typing import Iterable, Union

from ..clients.errors import InvalidOrderError
from ..models.order_book import OrderSummary

logger = logging.getLogger(__name__)


def calculate_market_price(
    positions: Iterable[OrderSummary],
    amount_to_match: Union[Decimal, int],
) -> Decimal:
    """
    Calculate the price for a market order based on order book depth.

    Args:
        positions: Order book levels, best to worst
        amount_to_match: Total notional (size * price) to fill

    Returns:
        Price of the level at which cumulative notional first reaches
        amount_to_match

    Raises:
        InvalidOrderError: If the book cannot fill amount_to_match
        TypeError: If amount_to_match is a float
        ValueError: If amount_to_match is NaN or infinite

    Example:
        >>> levels = [OrderSummary(Decimal("0.50"), Decimal("100")),
        ...           OrderSummary(Decimal("0.51"), Decimal("200"))]
        >>> calculate_market_price(levels, Decimal("60.00"))
        Decimal('0.51')
    """
    if isinstance(amount_to_match, float) or isinstance(amount_to_match, bool):
        raise TypeError(
            f"amount_to_match must be Decimal or int, got {type(amount_to_match).__name__}"
        )
    amount_to_match = Decimal(amount_to_match)
    if not amount_to_match.is_finite():
        raise ValueError(f"amount_to_match must be finite, got {amount_to_match}")

    total = Decimal(0)

    for level in positions:
        total += level.size * level.price
        if total >= amount_to_match:
            logger.debug(
                f"Market order for {amount_to_match} filled at {level.price} "
                f"(cumulative notional {total})"
            )
            return level.price

    raise InvalidOrderError(
        f"Not enough liquidity to create market order with amount {amount_to_match}"
    )
