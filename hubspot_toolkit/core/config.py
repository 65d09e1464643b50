"""Environment-driven configuration for the toolkit."""

import logging
import os
from dataclasses import dataclass

from .models import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.hubapi.com"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_SEARCH_DELAY_SECONDS = 0.5

ENV_BASE_URL = "HUBSPOT_TOOLKIT_BASE_URL"
ENV_TOKEN = "HUBSPOT_TOOLKIT_TOKEN"
ENV_TIMEOUT = "HUBSPOT_TOOLKIT_TIMEOUT"
ENV_SEARCH_DELAY = "HUBSPOT_TOOLKIT_SEARCH_DELAY"


@dataclass
class Settings:
    """Resolved toolkit settings."""
    base_url: str = DEFAULT_BASE_URL
    token: str | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    search_delay_seconds: float = DEFAULT_SEARCH_DELAY_SECONDS


def _read_float(name: str, default: float) -> float:
    """
    Read a non-negative float from an environment variable.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or empty

    Returns:
        The parsed value

    Raises:
        ConfigError: If the value is not a non-negative number
    """
    raw = os.environ.get(name)
    if not raw:
        return default

    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got '{raw}'")

    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {value}")
    return value


def load_settings() -> Settings:
    """
    Load settings from the environment.

    Variables:
    1. HUBSPOT_TOOLKIT_BASE_URL (default: https://api.hubapi.com)
    2. HUBSPOT_TOOLKIT_TOKEN (private app token, no default)
    3. HUBSPOT_TOOLKIT_TIMEOUT in seconds (default: 30)
    4. HUBSPOT_TOOLKIT_SEARCH_DELAY in seconds (default: 0.5)

    Returns:
        Settings resolved from the environment

    Raises:
        ConfigError: If a numeric variable is invalid
    """
    settings = Settings(
        base_url=(os.environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL).rstrip("/"),
        token=os.environ.get(ENV_TOKEN) or None,
        timeout_seconds=_read_float(ENV_TIMEOUT, DEFAULT_TIMEOUT_SECONDS),
        search_delay_seconds=_read_float(ENV_SEARCH_DELAY, DEFAULT_SEARCH_DELAY_SECONDS),
    )
    logger.debug(
        f"Loaded settings: base_url={settings.base_url}, "
        f"timeout={settings.timeout_seconds}s, search_delay={settings.search_delay_seconds}s"
    )
    return settings
