"""Resource operations mapped onto HubSpot endpoints."""

from .base import ResourceAdapter, require_id
from .objects import CrmObjectResource, NoteResource, object_resource
from .pipelines import PipelineResource
from .properties import PropertyResource
from .owners import OwnerResource
from .users import UserResource
from .associations import AssociationResource
from .account import AccountResource, connect_and_check

__all__ = [
    "ResourceAdapter",
    "require_id",
    "CrmObjectResource",
    "NoteResource",
    "object_resource",
    "PipelineResource",
    "PropertyResource",
    "OwnerResource",
    "UserResource",
    "AssociationResource",
    "AccountResource",
    "connect_and_check",
]
