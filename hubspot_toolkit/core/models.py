"""Core data models for the HubSpot Toolkit."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ObjectType(Enum):
    """CRM object types the toolkit can address."""
    DEALS = "deals"
    CONTACTS = "contacts"
    COMPANIES = "companies"
    NOTES = "notes"
    TICKETS = "tickets"


class HttpMethod(Enum):
    """HTTP methods accepted by the request executor."""
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
    PATCH = "PATCH"


class Verbosity(Enum):
    """Diagnostic output level."""
    NONE = "none"
    VERBOSE = "verbose"
    EXTRA_VERBOSE = "extra-verbose"


# Object types that own pipelines
PIPELINE_OBJECT_TYPES = (ObjectType.DEALS, ObjectType.TICKETS)


@dataclass
class Session:
    """Connection details shared by every request of a client."""
    base_url: str
    api_key: str

    def is_populated(self) -> bool:
        """Return True when both the base URL and the API key are set."""
        return bool(self.base_url) and bool(self.api_key)


@dataclass(frozen=True)
class RequestDescriptor:
    """One logical API call."""
    endpoint: str
    http_method: HttpMethod = HttpMethod.GET
    body: Any = None


@dataclass(frozen=True)
class AssociationTuple:
    """
    A directed, typed edge between two CRM records.

    The API is the source of truth for whether the edge is valid.
    """
    from_object_type: ObjectType
    from_id: str
    to_object_type: ObjectType
    to_id: str
    association_type: str

    def to_input(self) -> dict[str, Any]:
        """Convert to a batch create/archive input entry."""
        return {
            "from": {"id": self.from_id},
            "to": {"id": self.to_id},
            "type": self.association_type,
        }


@dataclass
class SingleObject:
    """Result of a call whose response carried no next-page link."""
    data: Any

    def unwrap(self) -> Any:
        return self.data


@dataclass
class ResultPages:
    """Concatenated results of a followed next-page link chain."""
    results: list[Any] = field(default_factory=list)
    pages: int = 0

    def unwrap(self) -> list[Any]:
        return self.results


class HubSpotToolkitError(Exception):
    """Base class for all toolkit errors."""
    pass


class PreconditionError(HubSpotToolkitError):
    """Raised when a request is attempted without an established session."""
    pass


class ValidationError(HubSpotToolkitError, ValueError):
    """Raised when an endpoint or argument is malformed."""
    pass


class RequestFailed(HubSpotToolkitError):
    """Raised when an HTTP request fails at the transport or status level."""

    def __init__(
        self,
        endpoint: str,
        method: str,
        message: str,
        status_code: int | None = None,
    ):
        self.endpoint = endpoint
        self.method = method
        self.message = message
        self.status_code = status_code
        status = f" {status_code}" if status_code is not None else ""
        super().__init__(f"{method} {endpoint} failed{status}: {message}")


class CompositeLookupFailure(RequestFailed):
    """Raised when both the active and the archived owner lookups fail."""
    pass


class ConfigError(HubSpotToolkitError):
    """Raised when configuration from the environment is invalid."""
    pass


def parse_object_type(value: "ObjectType | str", allowed=None) -> ObjectType:
    """
    Convert a string or ObjectType into an ObjectType.

    Args:
        value: Object type name (e.g., "deals") or enum member
        allowed: Optional subset of accepted object types

    Returns:
        The matching ObjectType

    Raises:
        ValidationError: If the value is not a known (or allowed) object type
    """
    try:
        object_type = value if isinstance(value, ObjectType) else ObjectType(str(value).lower())
    except ValueError:
        choices = ", ".join(t.value for t in (allowed or ObjectType))
        raise ValidationError(f"Invalid object type '{value}'. Must be one of: {choices}")

    if allowed is not None and object_type not in allowed:
        choices = ", ".join(t.value for t in allowed)
        raise ValidationError(f"Object type '{object_type.value}' not supported here. Must be one of: {choices}")

    return object_type


def parse_http_method(value: "HttpMethod | str") -> HttpMethod:
    """Convert a string or HttpMethod into an HttpMethod, raising ValidationError."""
    if isinstance(value, HttpMethod):
        return value
    try:
        return HttpMethod(str(value).upper())
    except ValueError:
        raise ValidationError(
            f"Invalid HTTP method '{value}'. Must be one of: "
            + ", ".join(m.value for m in HttpMethod)
        )
