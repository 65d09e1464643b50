"""Query string options for resource endpoints."""

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from ..core.models import ValidationError


def append_query(path: str, name: str, value: Any) -> str:
    """
    Append one query parameter to a path.

    Uses '?' when the path has no query string yet and '&' otherwise.

    Args:
        path: Endpoint path, possibly already carrying a query string
        name: Parameter name
        value: Parameter value; lists are comma-joined, booleans lower-cased

    Returns:
        Path with the parameter appended
    """
    if isinstance(value, bool):
        value = "true" if value else "false"
    elif isinstance(value, (list, tuple)):
        value = ",".join(str(v) for v in value)

    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{name}={quote(str(value), safe=',')}"


def _clean_names(label: str, names) -> list[str] | None:
    """Normalise a list or comma-separated string of names."""
    if names is None:
        return None
    if isinstance(names, str):
        names = names.split(",")

    cleaned = [str(n).strip() for n in names]
    if not cleaned or any(not n for n in cleaned):
        raise ValidationError(f"{label} must be a non-empty list of names")
    return cleaned


@dataclass
class QueryOptions:
    """
    Recognised optional query parameters.

    Options are serialised in a fixed order (properties, associations,
    archived, email, limit, idProperty) so the same options always produce the
    same path.
    """
    properties: list[str] | None = None
    associations: list[str] | None = None
    archived: bool | None = None
    email: str | None = None
    limit: int | None = None
    id_property: str | None = None

    def __post_init__(self):
        self.properties = _clean_names("properties", self.properties)
        self.associations = _clean_names("associations", self.associations)

        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
                raise ValidationError(f"limit must be a positive integer, got {self.limit!r}")

        if self.id_property is not None and not str(self.id_property).strip():
            raise ValidationError("id_property must not be empty")

    def apply(self, path: str) -> str:
        """
        Append every set option to a path.

        Args:
            path: Endpoint path

        Returns:
            Path with the query string extended
        """
        if self.properties:
            path = append_query(path, "properties", self.properties)
        if self.associations:
            path = append_query(path, "associations", self.associations)
        if self.archived is not None:
            path = append_query(path, "archived", self.archived)
        if self.email:
            path = append_query(path, "email", self.email)
        if self.limit is not None:
            path = append_query(path, "limit", self.limit)
        if self.id_property:
            path = append_query(path, "idProperty", self.id_property)
        return path
