"""User resource."""

from typing import Any

from hubspot_toolkit.core.models import HttpMethod, ValidationError
from .base import ResourceAdapter, require_id


class UserResource(ResourceAdapter):
    """Account users under /settings/v3/users."""

    @property
    def resource_name(self) -> str:
        return "users"

    def base_path(self) -> str:
        return "/settings/v3/users"

    def get(self, user_id: str | None = None) -> Any:
        """Fetch one user by id, or all users when no id is given."""
        if user_id is None:
            return self.client.request(self.path())
        return self.client.request(self.path(require_id(user_id, "user id")))

    def list_all(self) -> list[Any]:
        """
        Return every user as a flat list.

        A single-page response is unwrapped to its results.
        """
        response = self.get()
        if isinstance(response, dict):
            return list(response.get("results") or [])
        return list(response or [])

    def create(self, email: str, role_id: str | None = None, send_welcome_email: bool = False) -> Any:
        """
        Invite a user.

        Args:
            email: Email address of the new user
            role_id: Optional role to assign
            send_welcome_email: Whether HubSpot emails the invitation

        Returns:
            Created user
        """
        if not email or "@" not in email:
            raise ValidationError(f"A valid email address is required, got {email!r}")

        body: dict[str, Any] = {"email": email, "sendWelcomeEmail": send_welcome_email}
        if role_id:
            body["roleId"] = role_id
        return self.client.request(self.path(), HttpMethod.POST, body)

    def delete(self, user_id: str) -> Any:
        """Remove a user from the account."""
        return self.client.request(self.path(require_id(user_id, "user id")), HttpMethod.DELETE)
