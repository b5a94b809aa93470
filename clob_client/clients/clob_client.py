"""
ClobClient - public market-data client for the CLOB REST API.

Read-only endpoints (health, server time, order books, prices) are exposed
as typed async methods on top of HttpClient. get_market_price combines a
book fetch with the market-order pricing calculation.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Union

from ..config import ClientConfig
from ..models.market_data import LastTradePrice, Midpoint, NegRisk, Price, Spread, TickSize
from ..models.order_book import OrderBookSummary, Side
from ..models.request_params import PaginationParams, TradeQueryParams, build_path
from ..services.market_price import calculate_market_price
from .http_client import HttpClient

logger = logging.getLogger(__name__)


def _order_book_list(data: Any) -> List[OrderBookSummary]:
    if not isinstance(data, list):
        raise ValueError(f"Expected list of order books, got {type(data).__name__}")
    return [OrderBookSummary.from_dict(item) for item in data]


class ClobClient:
    """
    Asynchronous client for the CLOB public market-data endpoints.

    Usage:
        async with ClobClient() as client:
            book = await client.get_order_book(token_id)
            price = await client.get_market_price(token_id, Side.BUY, Decimal("100"))

    Attributes:
        config: Endpoint configuration
        http: Transport bound to the CLOB URL
        data_http: Transport bound to the data API URL
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http: Optional[HttpClient] = None,
        data_http: Optional[HttpClient] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Endpoint configuration. Defaults to ClientConfig().
            http: Pre-built transport for the CLOB API
            data_http: Pre-built transport for the data API
        """
        self.config = config or ClientConfig()
        self.http = http or HttpClient(
            self.config.clob_url,
            user_agent=self.config.user_agent,
            timeout=self.config.timeout,
        )
        self.data_http = data_http or HttpClient(
            self.config.data_api_url,
            user_agent=self.config.user_agent,
            timeout=self.config.timeout,
        )

    async def __aenter__(self) -> "ClobClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()
        await self.data_http.aclose()

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    async def get_ok(self) -> Any:
        """Health check; the server answers "OK"."""
        return await self.http.get("/")

    async def get_server_time(self) -> int:
        """Server time as a unix timestamp in seconds."""
        return await self.http.get("/time", response_type=int)

    # ------------------------------------------------------------------
    # Order books and prices
    # ------------------------------------------------------------------

    async def get_order_book(self, token_id: str) -> OrderBookSummary:
        return await self.http.get(
            build_path("/book", {"token_id": token_id}),
            response_type=OrderBookSummary,
        )

    async def get_order_books(self, token_ids: Sequence[str]) -> List[OrderBookSummary]:
        """Fetch several books in one request."""
        body = [{"token_id": token_id} for token_id in token_ids]
        return await self.http.post("/books", body, response_type=_order_book_list)

    async def get_midpoint(self, token_id: str) -> Midpoint:
        return await self.http.get(
            build_path("/midpoint", {"token_id": token_id}),
            response_type=Midpoint,
        )

    async def get_price(self, token_id: str, side: Union[Side, str]) -> Price:
        return await self.http.get(
            build_path("/price", {"token_id": token_id, "side": Side.parse(side)}),
            response_type=Price,
        )

    async def get_spread(self, token_id: str) -> Spread:
        return await self.http.get(
            build_path("/spread", {"token_id": token_id}),
            response_type=Spread,
        )

    async def get_tick_size(self, token_id: str) -> TickSize:
        return await self.http.get(
            build_path("/tick-size", {"token_id": token_id}),
            response_type=TickSize,
        )

    async def get_neg_risk(self, token_id: str) -> NegRisk:
        return await self.http.get(
            build_path("/neg-risk", {"token_id": token_id}),
            response_type=NegRisk,
        )

    async def get_last_trade_price(self, token_id: str) -> LastTradePrice:
        return await self.http.get(
            build_path("/last-trade-price", {"token_id": token_id}),
            response_type=LastTradePrice,
        )

    async def get_market_price(
        self,
        token_id: str,
        side: Union[Side, str],
        amount: Decimal,
    ) -> Decimal:
        """
        Price a market order for `amount` notional against the live book.

        A BUY sweeps the asks, a SELL sweeps the bids. Levels are used in the
        order the exchange returned them.

        Raises:
            InvalidOrderError: If the book side cannot fill `amount`
            ApiError, TransportError: If the book cannot be fetched
        """
        side = Side.parse(side)
        book = await self.get_order_book(token_id)
        price = calculate_market_price(book.levels_for(side), amount)

        logger.info(f"Market {side.value} {amount} on {token_id} priced at {price}")
        return price

    # ------------------------------------------------------------------
    # Data API
    # ------------------------------------------------------------------

    async def get_trades(
        self,
        params: Optional[TradeQueryParams] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> List[Dict[str, Any]]:
        """Fetch trades from the data API, filtered by `params`."""
        query = params.to_query_params() if params else None
        return await self.data_http.get(build_path("/trades", query), headers=headers)

    async def get_trades_page(
        self,
        pagination: Optional[PaginationParams] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Fetch one cursor page of CLOB trades.

        The response carries "data" and "next_cursor"; pass the latter back in
        a new PaginationParams until PaginationParams.is_last_page(cursor).
        """
        pagination = pagination or PaginationParams()
        return await self.http.get(
            build_path("/data/trades", pagination.to_query_params()),
            headers=headers,
        )
