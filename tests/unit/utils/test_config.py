"""Unit tests for configuration loading."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from searxng_mcp.utils.config import Settings, get_settings
from searxng_mcp.utils.exceptions import ConfigurationError


class TestSettings:
    """Tests for Settings class.

    Note: We use _env_file=None to disable .env file reading in tests.
    """

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.instances == ("http://localhost:8080",)
            assert settings.searxng_user_agent == "MCP-SearXNG/1.0"
            assert settings.searxng_verify_tls is True
            assert settings.searxng_timeout == 5.0  # noqa: PLR2004
            assert settings.log_level == "INFO"

    def test_instances_from_env_keep_order(self) -> None:
        with patch.dict(
            os.environ,
            {"SEARXNG_INSTANCES": "http://local:8080, https://mirror.example ,,https://b.example"},
            clear=True,
        ):
            settings = Settings(_env_file=None)

            assert settings.instances == (
                "http://local:8080",
                "https://mirror.example",
                "https://b.example",
            )

    def test_invalid_instance_url_raises(self) -> None:
        with patch.dict(os.environ, {"SEARXNG_INSTANCES": "localhost:8080"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_user_agent_from_env(self) -> None:
        with patch.dict(os.environ, {"SEARXNG_USER_AGENT": "my-agent/3.0"}, clear=True):
            assert Settings(_env_file=None).searxng_user_agent == "my-agent/3.0"

    def test_verify_tls_from_env(self) -> None:
        with patch.dict(os.environ, {"SEARXNG_VERIFY_TLS": "false"}, clear=True):
            assert Settings(_env_file=None).searxng_verify_tls is False

    def test_node_tls_reject_unauthorized_alias(self) -> None:
        with patch.dict(os.environ, {"NODE_TLS_REJECT_UNAUTHORIZED": "0"}, clear=True):
            assert Settings(_env_file=None).searxng_verify_tls is False

    def test_invalid_timeout_raises(self) -> None:
        with patch.dict(os.environ, {"SEARXNG_TIMEOUT": "0"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_to_search_config(self) -> None:
        with patch.dict(
            os.environ,
            {
                "SEARXNG_INSTANCES": "https://a.example,https://b.example",
                "SEARXNG_TIMEOUT": "2.5",
                "SEARXNG_VERIFY_TLS": "0",
            },
            clear=True,
        ):
            config = Settings(_env_file=None).to_search_config()

            assert config.instances == ("https://a.example", "https://b.example")
            assert config.timeout == 2.5  # noqa: PLR2004
            assert config.verify_tls is False

    def test_to_search_config_without_instances_raises(self) -> None:
        with patch.dict(os.environ, {"SEARXNG_INSTANCES": " , "}, clear=True):
            settings = Settings(_env_file=None)
            with pytest.raises(ConfigurationError, match="SEARXNG_INSTANCES"):
                settings.to_search_config()

    def test_get_settings_wraps_validation_error(self) -> None:
        with patch.dict(os.environ, {"SEARXNG_TIMEOUT": "-1"}, clear=True):
            with pytest.raises(ConfigurationError, match="Invalid configuration"):
                get_settings()
