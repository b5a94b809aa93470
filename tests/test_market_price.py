"""
Unit tests for market order pricing.

Tests cover:
- Fill on the first level and across several levels
- Insufficient liquidity (partial book and empty book)
- Early exit: levels past the filling one are never read
- Non-positive targets and exact-decimal arithmetic
"""

import pytest
from decimal import Decimal

from clob_client.clients.errors import ClobError, InvalidOrderError
from clob_client.models.order_book import OrderSummary
from clob_client.services.market_price import calculate_market_price


def level(price: str, size: str) -> OrderSummary:
    return OrderSummary(price=Decimal(price), size=Decimal(size))


class ExplodingLevel:
    """Level whose fields must never be read."""

    @property
    def price(self):
        raise AssertionError("level past the fill point was read")

    @property
    def size(self):
        raise AssertionError("level past the fill point was read")


@pytest.fixture
def levels():
    """Two-level book: 0.50 x 100 (notional 50) then 0.51 x 200 (notional 102)."""
    return [level("0.50", "100"), level("0.51", "200")]


class TestFill:
    """Amounts the book can fill."""

    def test_first_level_exactly_fills(self, levels):
        """Notional of the first level meets the target exactly."""
        assert calculate_market_price(levels, Decimal("50.00")) == Decimal("0.50")

    def test_fill_spills_into_second_level(self, levels):
        """50.00 is not enough, 152.00 after the second level is."""
        assert calculate_market_price(levels, Decimal("60.00")) == Decimal("0.51")

    def test_whole_book_exactly_fills(self, levels):
        assert calculate_market_price(levels, Decimal("152.00")) == Decimal("0.51")

    def test_priced_at_worst_touched_level_not_average(self):
        """Sweeping three levels prices at the third, not a weighted average."""
        book = [level("0.40", "10"), level("0.45", "10"), level("0.90", "10")]

        price = calculate_market_price(book, Decimal("8.60"))

        assert price == Decimal("0.90")

    def test_integer_amount_accepted(self, levels):
        assert calculate_market_price(levels, 50) == Decimal("0.50")

    def test_accepts_any_iterable(self, levels):
        assert calculate_market_price(iter(levels), Decimal("60")) == Decimal("0.51")


class TestEarlyExit:
    """The scan stops at the level that completes the fill."""

    def test_later_levels_never_read(self):
        book = [level("0.50", "100"), ExplodingLevel()]

        assert calculate_market_price(book, Decimal("50")) == Decimal("0.50")

    def test_generator_not_advanced_past_fill(self):
        consumed = []

        def stream():
            for lvl in (level("0.50", "100"), level("0.51", "200"), level("0.99", "1")):
                consumed.append(lvl.price)
                yield lvl

        assert calculate_market_price(stream(), Decimal("60")) == Decimal("0.51")
        assert consumed == [Decimal("0.50"), Decimal("0.51")]


class TestInsufficientLiquidity:
    """Books that cannot fill the requested amount."""

    def test_amount_exceeds_book(self, levels):
        with pytest.raises(InvalidOrderError) as exc_info:
            calculate_market_price(levels, Decimal("200.00"))

        assert "200.00" in str(exc_info.value)
        assert "Not enough liquidity" in str(exc_info.value)

    def test_just_above_total_notional(self, levels):
        with pytest.raises(InvalidOrderError):
            calculate_market_price(levels, Decimal("152.01"))

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("1"), Decimal("1000")])
    def test_empty_book(self, amount):
        with pytest.raises(InvalidOrderError) as exc_info:
            calculate_market_price([], amount)

        assert str(amount) in str(exc_info.value)

    def test_error_is_clob_error(self, levels):
        """InvalidOrderError belongs to the client's exception family."""
        with pytest.raises(ClobError):
            calculate_market_price(levels, Decimal("1000"))


class TestEdgeCases:
    """Non-positive targets and arithmetic."""

    def test_zero_amount_returns_best_price(self, levels):
        assert calculate_market_price(levels, Decimal("0")) == Decimal("0.50")

    def test_negative_amount_returns_best_price(self, levels):
        assert calculate_market_price(levels, Decimal("-5")) == Decimal("0.50")

    def test_zero_size_level_with_zero_amount(self):
        assert calculate_market_price([level("0.30", "0")], Decimal("0")) == Decimal("0.30")

    def test_exact_decimal_arithmetic(self):
        """0.1 * 1 three times is exactly 0.3 with Decimal (not with float)."""
        book = [level("0.1", "1"), level("0.1", "1"), level("0.1", "1")]

        assert calculate_market_price(book, Decimal("0.3")) == Decimal("0.1")

    def test_float_amount_rejected(self, levels):
        with pytest.raises(TypeError):
            calculate_market_price(levels, 50.0)

    @pytest.mark.parametrize("amount", [Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity")])
    def test_non_finite_amount_rejected(self, levels, amount):
        with pytest.raises(ValueError):
            calculate_market_price(levels, amount)

    def test_levels_not_modified(self, levels):
        snapshot = list(levels)

        calculate_market_price(levels, Decimal("60"))

        assert levels == snapshot
