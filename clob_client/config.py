"""
Client configuration.

Defaults target the public production endpoints; each value can be
overridden from the environment:

    CLOB_API_URL        CLOB REST endpoint
    CLOB_DATA_API_URL   Data API endpoint (trades, activity)
    CLOB_USER_AGENT     User-Agent header sent with every request
    CLOB_TIMEOUT        Request timeout in seconds (unset: HTTP engine default)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_CLOB_URL = "https://clob.polymarket.com"
DEFAULT_DATA_API_URL = "https://data-api.polymarket.com"
DEFAULT_USER_AGENT = "py_clob_client"


@dataclass
class ClientConfig:
    """
    Endpoint and transport settings shared by the API clients.

    Attributes:
        clob_url: Base URL of the CLOB REST API
        data_api_url: Base URL of the data API
        user_agent: Value of the default User-Agent header
        timeout: Request timeout in seconds, None for the HTTP engine default
    """
    clob_url: str = DEFAULT_CLOB_URL
    data_api_url: str = DEFAULT_DATA_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build a config from environment variables, falling back to defaults.

        Raises:
            ValueError: If CLOB_TIMEOUT is not a positive number
        """
        env = os.environ if environ is None else environ

        timeout = None
        raw_timeout = env.get("CLOB_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"Invalid CLOB_TIMEOUT: {raw_timeout!r}") from None
            if timeout <= 0:
                raise ValueError(f"CLOB_TIMEOUT must be positive, got {timeout}")

        config = cls(
            clob_url=env.get("CLOB_API_URL") or DEFAULT_CLOB_URL,
            data_api_url=env.get("CLOB_DATA_API_URL") or DEFAULT_DATA_API_URL,
            user_agent=env.get("CLOB_USER_AGENT") or DEFAULT_USER_AGENT,
            timeout=timeout,
        )
        logger.debug(f"Loaded client config: {config}")
        return config
