"""
Unit tests for ClientConfig.
"""

import pytest

from clob_client.config import (
    DEFAULT_CLOB_URL,
    DEFAULT_DATA_API_URL,
    DEFAULT_USER_AGENT,
    ClientConfig,
)


class TestClientConfig:

    def test_defaults(self):
        config = ClientConfig()

        assert config.clob_url == "https://clob.polymarket.com"
        assert config.data_api_url == "https://data-api.polymarket.com"
        assert config.user_agent == "py_clob_client"
        assert config.timeout is None

    def test_from_empty_env(self):
        config = ClientConfig.from_env({})

        assert config.clob_url == DEFAULT_CLOB_URL
        assert config.data_api_url == DEFAULT_DATA_API_URL
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.timeout is None

    def test_from_env_overrides(self):
        config = ClientConfig.from_env({
            "CLOB_API_URL": "https://clob.example",
            "CLOB_DATA_API_URL": "https://data.example",
            "CLOB_USER_AGENT": "bot/2",
            "CLOB_TIMEOUT": "7.5",
        })

        assert config.clob_url == "https://clob.example"
        assert config.data_api_url == "https://data.example"
        assert config.user_agent == "bot/2"
        assert config.timeout == 7.5

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("CLOB_API_URL", "https://from-env.example")
        monkeypatch.delenv("CLOB_TIMEOUT", raising=False)

        assert ClientConfig.from_env().clob_url == "https://from-env.example"

    @pytest.mark.parametrize("raw", ["soon", "0", "-1"])
    def test_invalid_timeout(self, raw):
        with pytest.raises(ValueError):
            ClientConfig.from_env({"CLOB_TIMEOUT": raw})
