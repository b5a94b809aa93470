"""
Request Parameter Models: query-string shaping for paginated and filtered calls

The CLOB paginates with opaque base64 cursors: "MA==" (base64 "0") requests
the first page and the server returns "LTE=" (base64 "-1") once the last page
has been served. The data API filters trades and activity with plain query
parameters.

None of these types interpret the values they carry; they only render them
into the query string the server expects (unset fields omitted, booleans as
"true"/"false", enums by value).
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

from .order_book import Side

INITIAL_CURSOR = "MA=="
END_CURSOR = "LTE="


class SortDirection(Enum):
    ASC = "ASC"
    DESC = "DESC"


class ActivitySortBy(Enum):
    TIMESTAMP = "TIMESTAMP"
    TOKENS = "TOKENS"
    CASH = "CASH"


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_path(path: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Append an encoded query string to a request path.

    Args:
        path: Request path, e.g. "/book"
        params: Query parameters; None values are skipped

    Returns:
        Path with "?query" appended when any parameter is set
    """
    if not params:
        return path
    query = urlencode(
        [(key, _render(value)) for key, value in params.items() if value is not None]
    )
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"


@dataclass
class PaginationParams:
    """
    Cursor-based pagination state.

    Attributes:
        next_cursor: Cursor returned by the previous page, None for the first page
    """
    next_cursor: Optional[str] = None

    @property
    def cursor(self) -> str:
        return self.next_cursor or INITIAL_CURSOR

    @staticmethod
    def is_last_page(cursor: Optional[str]) -> bool:
        """True once the server has signalled there are no more pages."""
        return cursor == END_CURSOR

    def to_query_params(self) -> Dict[str, str]:
        return {"next_cursor": self.cursor}


class _QueryParams:
    """Renders dataclass fields into query parameters."""

    # attribute name -> query parameter name, where they differ
    _renames: Dict[str, str] = {}

    def to_query_params(self) -> Dict[str, str]:
        params = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            params[self._renames.get(f.name, f.name)] = _render(value)
        return params

    def to_query_string(self) -> str:
        return urlencode(self.to_query_params())


@dataclass
class TradeQueryParams(_QueryParams):
    """
    Filters for the data API /trades endpoint.

    Attributes:
        user: Wallet address whose trades to return
        market: Condition id to restrict to
        limit: Page size
        offset: Number of trades to skip
        taker_only: Only trades where the user was the taker
        filter_type: "CASH" or "TOKENS", paired with filter_amount
        filter_amount: Minimum trade value for filter_type
        side: Restrict to one taker side
    """
    user: Optional[str] = None
    market: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    taker_only: Optional[bool] = None
    filter_type: Optional[str] = None
    filter_amount: Optional[Decimal] = None
    side: Optional[Side] = None

    _renames = {"taker_only": "takerOnly", "filter_type": "filterType", "filter_amount": "filterAmount"}


@dataclass
class ActivityQueryParams(_QueryParams):
    """Filters and ordering for the data API /activity endpoint."""
    user: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    market: Optional[str] = None
    activity_type: Optional[str] = None
    start: Optional[int] = None
    end: Optional[int] = None
    side: Optional[Side] = None
    sort_by: Optional[ActivitySortBy] = None
    sort_direction: Optional[SortDirection] = None

    _renames = {"activity_type": "type", "sort_by": "sortBy", "sort_direction": "sortDirection"}
