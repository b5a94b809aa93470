"""
HttpClient - typed JSON transport for the CLOB REST API.

This module wraps a connection-pooled httpx.AsyncClient bound to one base URL.
Every call:
1. Encodes the optional body as UTF-8 JSON
2. Applies the default headers, then overlays the per-call headers
3. Sends the request and awaits the response
4. Decodes a 2xx JSON body into the caller's requested type, or raises
   ApiError with the raw body text for any other status

The instance holds no per-call state, so a single client can be shared by
many concurrent tasks.
"""

import dataclasses
import json
import logging
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Optional

import httpx

from ..config import DEFAULT_USER_AGENT
from .errors import ApiError, DeserializationError, SerializationError, TransportError

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error"

# Marks "no body" so that an explicit None body still encodes as JSON null
_NO_BODY = object()


def _json_default(obj: Any) -> Any:
    """Fallback encoder for values json.dumps does not handle natively."""
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, Enum):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class HttpClient:
    """
    Asynchronous HTTP client for JSON APIs.

    Default headers sent with every request:
        User-Agent: py_clob_client
        Accept: */*
        Connection: keep-alive
        Content-Type: application/json

    A header passed to a single call replaces the default of the same name
    for that call only.

    Usage:
        async with HttpClient("https://clob.polymarket.com") as http:
            book = await http.get("/book?token_id=123", response_type=OrderBookSummary)

    Attributes:
        base_url: Prefix prepended verbatim to every request path
        default_headers: Headers applied before per-call headers
    """

    def __init__(
        self,
        base_url: str,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. "https://clob.polymarket.com"
            user_agent: Value of the default User-Agent header
            timeout: Request timeout in seconds. None keeps httpx's default.
            transport: Optional httpx transport (used to inject mock transports)
        """
        self.base_url = base_url
        self.default_headers: Dict[str, str] = {
            "User-Agent": user_agent,
            "Accept": "*/*",
            "Connection": "keep-alive",
            "Content-Type": "application/json",
        }

        client_kwargs: Dict[str, Any] = {"headers": self.default_headers}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.AsyncClient(**client_kwargs)

        logger.debug(f"HttpClient initialized: base_url={base_url}")

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def get(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        response_type: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """Make a GET request."""
        return await self._request("GET", path, headers=headers, response_type=response_type)

    async def post(
        self,
        path: str,
        body: Any,
        headers: Optional[Dict[str, str]] = None,
        response_type: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """Make a POST request with a JSON body."""
        return await self._request(
            "POST", path, body=body, headers=headers, response_type=response_type
        )

    async def delete(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        response_type: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """Make a DELETE request without a body."""
        return await self._request("DELETE", path, headers=headers, response_type=response_type)

    async def delete_with_body(
        self,
        path: str,
        body: Any,
        headers: Optional[Dict[str, str]] = None,
        response_type: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """Make a DELETE request with a JSON body."""
        return await self._request(
            "DELETE", path, body=body, headers=headers, response_type=response_type
        )

    async def _request(
        self,
        method: str,
        path: str,
        body: Any = _NO_BODY,
        headers: Optional[Dict[str, str]] = None,
        response_type: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """
        Send one request and decode its response.

        Args:
            method: HTTP method
            path: Appended verbatim to base_url
            body: JSON-serializable body, omitted when not given
            headers: Per-call headers overlaid on the defaults
            response_type: Decoder for the success body (see _decode)

        Returns:
            Decoded response body

        Raises:
            SerializationError: If body cannot be encoded (nothing is sent)
            TransportError: On connection, DNS, TLS, timeout or URL failure
            DeserializationError: If a 2xx body is not valid JSON for response_type
            ApiError: If the server answers with a non-2xx status
        """
        url = f"{self.base_url}{path}"
        content = self._encode_body(body) if body is not _NO_BODY else None

        logger.debug(f"{method} {url}")

        try:
            request = self._client.build_request(method, url, content=content, headers=headers)
            response = await self._client.send(request, stream=True)
        except UnicodeEncodeError as e:
            raise SerializationError(f"Failed to encode request headers: {e}", cause=e) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"{method} {url} failed: {e!r}")
            raise TransportError(f"{method} {url} failed: {e}", cause=e) from e

        try:
            return await self._handle_response(method, url, response, response_type)
        finally:
            await response.aclose()

    async def _handle_response(
        self,
        method: str,
        url: str,
        response: httpx.Response,
        response_type: Optional[Callable[[Any], Any]],
    ) -> Any:
        """Parse a 2xx JSON body or raise ApiError with the raw body text."""
        status = response.status_code
        logger.debug(f"{method} {url} -> {status}")

        if response.is_success:
            try:
                raw = await response.aread()
            except httpx.HTTPError as e:
                logger.error(f"Failed to read response body from {url}: {e!r}")
                raise TransportError(f"Failed to read response body: {e}", cause=e) from e

            try:
                data = json.loads(raw)
            except ValueError as e:
                raise DeserializationError(
                    f"Malformed JSON in {status} response from {url}: {e}", cause=e
                ) from e

            return self._decode(data, response_type)

        # Error bodies are kept verbatim, even when they happen to be JSON
        try:
            await response.aread()
            message = response.text
        except httpx.HTTPError as e:
            logger.warning(f"Could not read error body from {url}: {e!r}")
            message = UNKNOWN_ERROR_MESSAGE

        logger.warning(f"{method} {url} returned {status}: {message}")
        raise ApiError(status, message)

    @staticmethod
    def _encode_body(body: Any) -> bytes:
        """
        Encode a request body as UTF-8 JSON.

        Objects with to_dict() are converted first; Decimal encodes as its
        string form and enums by value.

        Raises:
            SerializationError: If the body is not JSON serializable
        """
        try:
            return json.dumps(body, default=_json_default, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to encode request body: {e}", cause=e) from e

    @staticmethod
    def _decode(data: Any, response_type: Optional[Callable[[Any], Any]]) -> Any:
        """
        Decode parsed JSON into the requested type.

        response_type may be None (return the parsed JSON), a class with a
        from_dict classmethod, or any callable taking the parsed JSON.

        Raises:
            DeserializationError: If the decoder rejects the data
        """
        if response_type is None:
            return data

        decoder = getattr(response_type, "from_dict", response_type)
        try:
            return decoder(data)
        except (AttributeError, KeyError, TypeError, ValueError, ArithmeticError) as e:
            name = getattr(response_type, "__name__", repr(response_type))
            raise DeserializationError(f"Cannot decode response as {name}: {e}", cause=e) from e
