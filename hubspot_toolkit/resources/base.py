"""Base class for resource operations."""

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote

from hubspot_toolkit.client.executor import HubSpotClient
from hubspot_toolkit.client.query import QueryOptions
from hubspot_toolkit.core.models import ValidationError


def require_id(value: Any, label: str = "id") -> str:
    """
    Validate a required identifier.

    Args:
        value: Identifier supplied by the caller
        label: Name used in the error message

    Returns:
        The identifier as a stripped string

    Raises:
        ValidationError: If the identifier is missing or blank
    """
    if value is None or not str(value).strip():
        raise ValidationError(f"A non-empty {label} is required")
    return str(value).strip()


class ResourceAdapter(ABC):
    """
    Abstract base class for one HubSpot resource.

    Each resource maps its operations to endpoint paths and bodies and
    delegates to the HubSpotClient. Resources hold no state besides the
    client.
    """

    def __init__(self, client: HubSpotClient):
        """
        Initialize the resource with a client.

        Args:
            client: Client used to issue requests
        """
        self.client = client

    @property
    @abstractmethod
    def resource_name(self) -> str:
        """
        Return the resource name.

        Returns:
            Name string (e.g., 'deals', 'owners')
        """
        pass

    @abstractmethod
    def base_path(self) -> str:
        """
        Return the collection path for this resource.

        Returns:
            Path starting with '/' (e.g., '/crm/v3/objects/deals')
        """
        pass

    def path(self, *segments: Any, options: QueryOptions | None = None) -> str:
        """
        Build an endpoint path below the collection path.

        Args:
            *segments: Extra path segments (identifiers are URL-quoted)
            options: Optional query options to append

        Returns:
            Endpoint path
        """
        result = self.base_path()
        for segment in segments:
            result = f"{result}/{quote(str(segment), safe='')}"
        if options is not None:
            result = options.apply(result)
        return result
