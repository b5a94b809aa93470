"""
Infrastructure Layer - HTTP transport and API clients
"""

from .http_client import HttpClient
from .clob_client import ClobClient

__all__ = ["HttpClient", "ClobClient"]
