"""Pipeline resource."""

import logging
from typing import Any

from hubspot_toolkit.client.executor import HubSpotClient
from hubspot_toolkit.client.query import append_query
from hubspot_toolkit.core.models import (
    HttpMethod,
    ObjectType,
    PIPELINE_OBJECT_TYPES,
    ValidationError,
    parse_object_type,
)
from .base import ResourceAdapter, require_id

logger = logging.getLogger(__name__)


class PipelineResource(ResourceAdapter):
    """Deal and ticket pipelines under /crm/v3/pipelines/{type}."""

    def __init__(self, client: HubSpotClient, object_type: "ObjectType | str"):
        super().__init__(client)
        self.object_type = parse_object_type(object_type, allowed=PIPELINE_OBJECT_TYPES)

    @property
    def resource_name(self) -> str:
        return "pipelines"

    def base_path(self) -> str:
        return f"/crm/v3/pipelines/{self.object_type.value}"

    def get(self, pipeline_id: str | None = None) -> Any:
        """Fetch one pipeline, or all pipelines when no id is given."""
        if pipeline_id is None:
            return self.client.request(self.path())
        return self.client.request(self.path(require_id(pipeline_id, "pipeline id")))

    def create(self, definition: dict[str, Any]) -> Any:
        """
        Create a pipeline.

        Args:
            definition: Pipeline body (label, displayOrder, stages)

        Returns:
            Created pipeline
        """
        if not isinstance(definition, dict) or not definition.get("label"):
            raise ValidationError("Pipeline definition must include a label")
        return self.client.request(self.path(), HttpMethod.POST, definition)

    def update(self, pipeline_id: str, changes: dict[str, Any]) -> Any:
        """Partially update a pipeline."""
        if not isinstance(changes, dict) or not changes:
            raise ValidationError("Pipeline changes must be a non-empty JSON object")
        return self.client.request(
            self.path(require_id(pipeline_id, "pipeline id")), HttpMethod.PATCH, changes
        )

    def delete(self, pipeline_id: str, force: bool = False) -> Any:
        """
        Delete a pipeline.

        Args:
            pipeline_id: Pipeline id
            force: Skip the API's check for records still in the pipeline

        Returns:
            Raw API response ({} on 204)
        """
        path = self.path(require_id(pipeline_id, "pipeline id"))
        if force:
            logger.warning(
                f"Force deleting {self.object_type.value} pipeline {pipeline_id}; "
                f"records still in it may be orphaned"
            )
            path = append_query(path, "validateReferencesBeforeDelete", False)
        return self.client.request(path, HttpMethod.DELETE)
