"""Association resource (v3 batch endpoints)."""

import logging
from typing import Any

from hubspot_toolkit.client.executor import HubSpotClient
from hubspot_toolkit.core.models import (
    AssociationTuple,
    HttpMethod,
    ObjectType,
    ValidationError,
    parse_object_type,
)
from .base import ResourceAdapter, require_id

logger = logging.getLogger(__name__)


class AssociationResource(ResourceAdapter):
    """
    Associations between two object types.

    Paths live under /crm/v3/associations/{from}/{to}.
    """

    def __init__(
        self,
        client: HubSpotClient,
        from_object_type: "ObjectType | str",
        to_object_type: "ObjectType | str",
    ):
        super().__init__(client)
        self.from_object_type = parse_object_type(from_object_type)
        self.to_object_type = parse_object_type(to_object_type)

    @property
    def resource_name(self) -> str:
        return "associations"

    def base_path(self) -> str:
        return f"/crm/v3/associations/{self.from_object_type.value}/{self.to_object_type.value}"

    def get_types(self) -> Any:
        """List the association types defined between the two object types."""
        return self.client.request(self.path("types"))

    def get(self, from_ids: list[str]) -> Any:
        """
        Read the associations of one or more records.

        Args:
            from_ids: Ids of records of the 'from' object type

        Returns:
            Batch read response
        """
        if isinstance(from_ids, str):
            from_ids = [from_ids]
        if not from_ids:
            raise ValidationError("At least one record id is required")

        body = {"inputs": [{"id": require_id(i)} for i in from_ids]}
        return self.client.request(self.path("batch", "read"), HttpMethod.POST, body)

    def _batch_body(self, associations: list[AssociationTuple]) -> dict[str, Any]:
        if not associations:
            raise ValidationError("At least one association is required")

        inputs = []
        for association in associations:
            if (
                association.from_object_type is not self.from_object_type
                or association.to_object_type is not self.to_object_type
            ):
                raise ValidationError(
                    f"Association {association.from_object_type.value}->"
                    f"{association.to_object_type.value} does not match "
                    f"{self.from_object_type.value}->{self.to_object_type.value}"
                )
            require_id(association.from_id, "from id")
            require_id(association.to_id, "to id")
            require_id(association.association_type, "association type")
            inputs.append(association.to_input())

        return {"inputs": inputs}

    def create(self, associations: list[AssociationTuple]) -> Any:
        """Create associations in one batch call."""
        body = self._batch_body(associations)
        return self.client.request(self.path("batch", "create"), HttpMethod.POST, body)

    def delete(self, associations: list[AssociationTuple]) -> Any:
        """Remove associations in one batch call."""
        body = self._batch_body(associations)
        logger.info(f"Archiving {len(body['inputs'])} {self.from_object_type.value}->{self.to_object_type.value} associations")
        return self.client.request(self.path("batch", "archive"), HttpMethod.POST, body)
