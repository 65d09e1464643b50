"""Owner resource and owner-to-user resolution."""

import logging
from typing import Any

from hubspot_toolkit.client.query import QueryOptions
from hubspot_toolkit.core.models import CompositeLookupFailure, RequestFailed
from .base import ResourceAdapter, require_id
from .users import UserResource

logger = logging.getLogger(__name__)


class OwnerResource(ResourceAdapter):
    """Owners under /crm/v3/owners. The API exposes owners read-only."""

    @property
    def resource_name(self) -> str:
        return "owners"

    def base_path(self) -> str:
        return "/crm/v3/owners"

    def get(
        self,
        owner_id: str | None = None,
        archived: bool | None = None,
        email: str | None = None,
    ) -> Any:
        """
        Fetch one owner by id, or list owners.

        Args:
            owner_id: Owner id (list owners if None)
            archived: Look up archived owners instead of active ones
            email: Filter the owner list by email (list only)

        Returns:
            Owner record, or the owner list
        """
        if owner_id is None:
            return self.client.request(self.path(options=QueryOptions(archived=archived, email=email)))
        return self.client.request(
            self.path(require_id(owner_id, "owner id"), options=QueryOptions(archived=archived))
        )

    def resolve(self, owner_id: str) -> dict[str, Any]:
        """
        Resolve an owner and the account user behind it.

        The active owner is looked up first. If that fails the owner is
        assumed archived and looked up once more with archived=true. The
        owner's userId is then matched against the account's users.

        Args:
            owner_id: Owner id

        Returns:
            Dict with 'owner', 'archived' and 'user' (None when no user matches)

        Raises:
            CompositeLookupFailure: If the archived lookup fails as well
            RequestFailed: If listing users fails
        """
        owner_id = require_id(owner_id, "owner id")
        archived = False

        try:
            owner = self.get(owner_id)
        except RequestFailed as e:
            logger.info(f"Active owner {owner_id} not found ({e.status_code}); trying archived owners")
            archived = True
            try:
                owner = self.get(owner_id, archived=True)
            except RequestFailed as fallback:
                raise CompositeLookupFailure(
                    fallback.endpoint,
                    fallback.method,
                    f"Owner {owner_id} not found as active or archived owner: {fallback.message}",
                    status_code=fallback.status_code,
                ) from fallback

        user = None
        user_id = owner.get("userId") if isinstance(owner, dict) else None
        if user_id is not None:
            for candidate in UserResource(self.client).list_all():
                if str(candidate.get("id")) == str(user_id):
                    user = candidate
                    break
            if user is None:
                logger.warning(f"Owner {owner_id} has userId {user_id} but no matching user")

        return {"owner": owner, "archived": archived, "user": user}
