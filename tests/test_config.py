"""Tests for environment configuration."""

import pytest

from hubspot_toolkit.core.models import ConfigError
from hubspot_toolkit.core.config import (
    DEFAULT_BASE_URL,
    ENV_BASE_URL,
    ENV_TOKEN,
    ENV_TIMEOUT,
    ENV_SEARCH_DELAY,
    load_settings,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove toolkit variables from the environment."""
    for name in (ENV_BASE_URL, ENV_TOKEN, ENV_TIMEOUT, ENV_SEARCH_DELAY):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    """Test settings with no environment variables."""
    settings = load_settings()

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.token is None
    assert settings.timeout_seconds == 30.0
    assert settings.search_delay_seconds == 0.5


def test_values_from_environment(clean_env):
    """Test settings read from environment variables."""
    clean_env.setenv(ENV_BASE_URL, "https://api.example.com/")
    clean_env.setenv(ENV_TOKEN, "pat-123")
    clean_env.setenv(ENV_TIMEOUT, "12.5")
    clean_env.setenv(ENV_SEARCH_DELAY, "0")

    settings = load_settings()

    assert settings.base_url == "https://api.example.com"
    assert settings.token == "pat-123"
    assert settings.timeout_seconds == 12.5
    assert settings.search_delay_seconds == 0.0


def test_empty_token_is_none(clean_env):
    """Test that an empty token counts as unset."""
    clean_env.setenv(ENV_TOKEN, "")
    assert load_settings().token is None


@pytest.mark.parametrize("value", ["soon", "-1"])
def test_invalid_timeout(clean_env, value):
    """Test that invalid numbers raise ConfigError."""
    clean_env.setenv(ENV_TIMEOUT, value)

    with pytest.raises(ConfigError) as exc_info:
        load_settings()

    assert ENV_TIMEOUT in str(exc_info.value)
