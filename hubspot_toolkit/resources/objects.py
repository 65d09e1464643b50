"""CRM object resources: deals, contacts, companies and notes."""

from typing import Any

from hubspot_toolkit.client.executor import HubSpotClient
from hubspot_toolkit.client.query import QueryOptions
from hubspot_toolkit.client.search import search_all
from hubspot_toolkit.core.models import (
    HttpMethod,
    ObjectType,
    AssociationTuple,
    ValidationError,
    parse_object_type,
)
from .base import ResourceAdapter, require_id


# Association category for the default (unlabelled) association types
HUBSPOT_DEFINED = "HUBSPOT_DEFINED"


def _require_properties(properties: Any) -> dict[str, Any]:
    if not isinstance(properties, dict) or not properties:
        raise ValidationError("properties must be a non-empty JSON object")
    return properties


class CrmObjectResource(ResourceAdapter):
    """
    Operations on one CRM object type.

    Implements get (by id or list), create, update, delete and search
    under /crm/v3/objects/{type}.
    """

    def __init__(self, client: HubSpotClient, object_type: "ObjectType | str"):
        super().__init__(client)
        self.object_type = parse_object_type(object_type)

    @property
    def resource_name(self) -> str:
        return self.object_type.value

    def base_path(self) -> str:
        return f"/crm/v3/objects/{self.object_type.value}"

    def get(self, object_id: str | None = None, options: QueryOptions | None = None) -> Any:
        """
        Fetch one record by id, or list records when no id is given.

        Args:
            object_id: Record id (list all records if None)
            options: Properties, associations, archived flag, page limit

        Returns:
            The record for a single fetch; the raw response or the list
            of all records for a list call
        """
        if object_id is None:
            return self.client.request(self.path(options=options))
        return self.client.request(self.path(require_id(object_id), options=options))

    def create(self, properties: dict[str, Any]) -> Any:
        """
        Create a record.

        Args:
            properties: Property values for the new record

        Returns:
            Created record
        """
        body = {"properties": _require_properties(properties)}
        return self.client.request(self.path(), HttpMethod.POST, body)

    def update(self, object_id: str, properties: dict[str, Any]) -> Any:
        """
        Update a record's properties.

        Args:
            object_id: Record id
            properties: Property values to change

        Returns:
            Updated record
        """
        body = {"properties": _require_properties(properties)}
        return self.client.request(self.path(require_id(object_id)), HttpMethod.PATCH, body)

    def delete(self, object_id: str) -> Any:
        """Archive a record by id."""
        return self.client.request(self.path(require_id(object_id)), HttpMethod.DELETE)

    def search(self, query: dict[str, Any]) -> list[Any]:
        """
        Run a search query and return every matching record.

        Args:
            query: Search body (filterGroups, properties, sorts, limit)

        Returns:
            All matching records
        """
        return search_all(self.client, self.object_type, query)


class NoteResource(CrmObjectResource):
    """Notes, which can be associated to other records on creation."""

    def __init__(self, client: HubSpotClient):
        super().__init__(client, ObjectType.NOTES)

    def create(
        self,
        properties: dict[str, Any],
        associations: list[AssociationTuple] | None = None,
    ) -> Any:
        """
        Create a note, optionally associated to other records.

        Args:
            properties: Note properties (hs_note_body, hs_timestamp, ...)
            associations: Edges from this note to other records; the
                association_type is the numeric association type id

        Returns:
            Created note
        """
        body: dict[str, Any] = {"properties": _require_properties(properties)}

        if associations:
            entries = []
            for association in associations:
                if association.from_object_type is not ObjectType.NOTES:
                    raise ValidationError("Note associations must start from a note")
                try:
                    type_id = int(association.association_type)
                except (TypeError, ValueError):
                    raise ValidationError(
                        f"Association type must be a numeric type id, got {association.association_type!r}"
                    )
                entries.append({
                    "to": {"id": require_id(association.to_id, "association target id")},
                    "types": [{
                        "associationCategory": HUBSPOT_DEFINED,
                        "associationTypeId": type_id,
                    }],
                })
            body["associations"] = entries

        return self.client.request(self.path(), HttpMethod.POST, body)


def object_resource(client: HubSpotClient, object_type: "ObjectType | str") -> CrmObjectResource:
    """
    Return the resource for an object type.

    Args:
        client: Client used to issue requests
        object_type: Object type name or enum member

    Returns:
        NoteResource for notes, CrmObjectResource otherwise
    """
    object_type = parse_object_type(object_type)
    if object_type is ObjectType.NOTES:
        return NoteResource(client)
    return CrmObjectResource(client, object_type)
