"""
Exception hierarchy for the CLOB client.

Callers need to tell apart three outcomes:
- TransportError: the exchange never gave an authoritative answer (network,
  TLS, timeout) or its answer could not be encoded/decoded.
- ApiError: the server answered with a non-success HTTP status.
- InvalidOrderError: the order cannot be built from the data we have
  (e.g. not enough book liquidity).
"""

from typing import Optional


class ClobError(Exception):
    """Base exception for the CLOB client"""
    pass


class TransportError(ClobError):
    """The request/response exchange could not be completed"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class SerializationError(TransportError):
    """Request body could not be encoded as JSON"""
    pass


class DeserializationError(TransportError):
    """Success response body could not be decoded into the requested type"""
    pass


class ApiError(ClobError):
    """
    The server responded with a non-2xx status.

    Attributes:
        status: HTTP status code
        message: Raw response body text, kept verbatim
    """

    def __init__(self, status: int, message: str):
        super().__init__(f"API error {status}: {message}")
        self.status = status
        self.message = message

    def __repr__(self) -> str:
        return f"ApiError(status={self.status}, message={self.message!r})"


class InvalidOrderError(ClobError):
    """Order cannot be created from the available market data"""
    pass
