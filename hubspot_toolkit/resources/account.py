"""Account details and the connect operation."""

import logging
from typing import Any

from hubspot_toolkit.client.executor import HubSpotClient
from hubspot_toolkit.core.config import DEFAULT_BASE_URL
from hubspot_toolkit.core.session import connect
from .base import ResourceAdapter

logger = logging.getLogger(__name__)


class AccountResource(ResourceAdapter):
    """Account information under /account-info/v3."""

    @property
    def resource_name(self) -> str:
        return "account"

    def base_path(self) -> str:
        return "/account-info/v3"

    def details(self) -> Any:
        """Fetch the account details; used as a connectivity check."""
        return self.client.request(self.path("details"))


def connect_and_check(
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    client: HubSpotClient | None = None,
) -> Any:
    """
    Establish the default session and verify it against the API.

    Args:
        api_key: Private app access token
        base_url: API base URL
        client: Client to check with (a new one using the default session if None)

    Returns:
        Account details returned by the API

    Raises:
        RequestFailed: If the credential is rejected or the API is unreachable
    """
    connect(api_key, base_url)

    owns_client = client is None
    if client is None:
        client = HubSpotClient()

    try:
        details = AccountResource(client).details()
    finally:
        if owns_client:
            client.close()

    portal_id = details.get("portalId") if isinstance(details, dict) else None
    logger.info(f"Connected to HubSpot account {portal_id}")
    return details
