"""Core components for the HubSpot Toolkit."""

from .models import (
    ObjectType,
    HttpMethod,
    Verbosity,
    PIPELINE_OBJECT_TYPES,
    Session,
    RequestDescriptor,
    AssociationTuple,
    SingleObject,
    ResultPages,
    HubSpotToolkitError,
    PreconditionError,
    ValidationError,
    RequestFailed,
    CompositeLookupFailure,
    ConfigError,
    parse_object_type,
    parse_http_method,
)
from .config import Settings, load_settings, DEFAULT_BASE_URL
from .session import (
    connect,
    get_session,
    reset_session,
    set_verbosity,
    get_verbosity,
)

__all__ = [
    "ObjectType",
    "HttpMethod",
    "Verbosity",
    "PIPELINE_OBJECT_TYPES",
    "Session",
    "RequestDescriptor",
    "AssociationTuple",
    "SingleObject",
    "ResultPages",
    "HubSpotToolkitError",
    "PreconditionError",
    "ValidationError",
    "RequestFailed",
    "CompositeLookupFailure",
    "ConfigError",
    "parse_object_type",
    "parse_http_method",
    "Settings",
    "load_settings",
    "DEFAULT_BASE_URL",
    "connect",
    "get_session",
    "reset_session",
    "set_verbosity",
    "get_verbosity",
]
