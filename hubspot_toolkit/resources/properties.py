"""Property definition resource."""

from typing import Any

from hubspot_toolkit.client.executor import HubSpotClient
from hubspot_toolkit.client.query import QueryOptions
from hubspot_toolkit.core.models import HttpMethod, ObjectType, ValidationError, parse_object_type
from .base import ResourceAdapter, require_id

# Fields HubSpot requires when creating a property
REQUIRED_PROPERTY_FIELDS = ("name", "label", "type", "fieldType", "groupName")


class PropertyResource(ResourceAdapter):
    """Property definitions under /crm/v3/properties/{object}."""

    def __init__(self, client: HubSpotClient, object_type: "ObjectType | str"):
        super().__init__(client)
        self.object_type = parse_object_type(object_type)

    @property
    def resource_name(self) -> str:
        return "properties"

    def base_path(self) -> str:
        return f"/crm/v3/properties/{self.object_type.value}"

    def get(self, name: str | None = None, archived: bool | None = None) -> Any:
        """Fetch one property definition, or all of them when no name is given."""
        options = QueryOptions(archived=archived)
        if name is None:
            return self.client.request(self.path(options=options))
        return self.client.request(self.path(require_id(name, "property name"), options=options))

    def create(self, definition: dict[str, Any]) -> Any:
        if not isinstance(definition, dict):
            raise ValidationError("Property definition must be a JSON object")
        missing = [f for f in REQUIRED_PROPERTY_FIELDS if not definition.get(f)]
        if missing:
            raise ValidationError(f"Property definition is missing: {', '.join(missing)}")
        return self.client.request(self.path(), HttpMethod.POST, definition)

    def update(self, name: str, changes: dict[str, Any]) -> Any:
        if not isinstance(changes, dict) or not changes:
            raise ValidationError("Property changes must be a non-empty JSON object")
        return self.client.request(
            self.path(require_id(name, "property name")), HttpMethod.PATCH, changes
        )

    def delete(self, name: str) -> Any:
        return self.client.request(self.path(require_id(name, "property name")), HttpMethod.DELETE)
