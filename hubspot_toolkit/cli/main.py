"""Main CLI entry point for the HubSpot Toolkit."""

import argparse
import json
import logging
import sys
from pathlib import Path

from hubspot_toolkit.core import (
    AssociationTuple,
    ObjectType,
    Verbosity,
    HubSpotToolkitError,
    PreconditionError,
    RequestFailed,
    ValidationError,
    connect,
    load_settings,
    parse_object_type,
    set_verbosity,
)
from hubspot_toolkit.client import HubSpotClient, QueryOptions
from hubspot_toolkit.resources import (
    AssociationResource,
    OwnerResource,
    PipelineResource,
    PropertyResource,
    UserResource,
    object_resource,
    connect_and_check,
)

logger = logging.getLogger(__name__)

OBJECT_RESOURCES = ("deals", "contacts", "companies", "notes")
RESOURCES = OBJECT_RESOURCES + ("pipelines", "properties", "owners", "users")


def setup_logging(verbose: int = 0):
    """Configure logging for the CLI."""
    logging.basicConfig(format="%(levelname)s: %(message)s")
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if verbose >= 2:
        set_verbosity(Verbosity.EXTRA_VERBOSE)
    elif verbose == 1:
        set_verbosity(Verbosity.VERBOSE)
    else:
        set_verbosity(Verbosity.NONE)


def print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def load_json_argument(value: str | None, label: str):
    """
    Parse a JSON command line argument.

    A value starting with '@' is read from the named file.
    """
    if value is None:
        return None

    text = value
    if value.startswith("@"):
        path = Path(value[1:])
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValidationError(f"Cannot read {label} file {path}: {e}")

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON for {label}: {e}")


def parse_association(value: str, from_type: ObjectType, to_type: ObjectType | None = None) -> AssociationTuple:
    """
    Parse an association argument.

    Formats: 'FROM_ID:TO_ID:TYPE' with fixed object types, or
    'TO_TYPE:TO_ID:TYPE' when to_type is None (note creation).
    """
    parts = value.split(":")
    if len(parts) != 3 or not all(parts):
        raise ValidationError(f"Invalid association '{value}'")

    if to_type is None:
        target_type, to_id, association_type = parts
        return AssociationTuple(
            from_object_type=from_type,
            from_id="",
            to_object_type=parse_object_type(target_type),
            to_id=to_id,
            association_type=association_type,
        )

    from_id, to_id, association_type = parts
    return AssociationTuple(
        from_object_type=from_type,
        from_id=from_id,
        to_object_type=to_type,
        to_id=to_id,
        association_type=association_type,
    )


def build_client(args) -> HubSpotClient:
    """Connect the default session from flags and environment and return a client."""
    settings = load_settings()
    token = args.token or settings.token
    if not token:
        raise PreconditionError(
            "No token provided. Use --token or set HUBSPOT_TOOLKIT_TOKEN."
        )

    connect(token, args.base_url or settings.base_url)
    return HubSpotClient(
        timeout_seconds=args.timeout or settings.timeout_seconds,
        search_delay_seconds=settings.search_delay_seconds,
    )


def cmd_connect(args, client: HubSpotClient):
    """Handle the connect command."""
    settings = load_settings()
    details = connect_and_check(
        args.token or settings.token,
        args.base_url or settings.base_url,
        client=client,
    )
    print_json(details)


def _require_type(args, resource: str) -> str:
    if not args.type:
        raise ValidationError(f"--type is required for {resource}")
    return args.type


def cmd_get(args, client: HubSpotClient):
    """Handle the get command."""
    resource = args.resource

    if resource in OBJECT_RESOURCES:
        options = QueryOptions(
            properties=args.properties,
            associations=args.associations,
            archived=True if args.archived else None,
            limit=args.limit,
        )
        result = object_resource(client, resource).get(args.id, options)
    elif resource == "pipelines":
        result = PipelineResource(client, _require_type(args, resource)).get(args.id)
    elif resource == "properties":
        result = PropertyResource(client, _require_type(args, resource)).get(
            args.id, archived=True if args.archived else None
        )
    elif resource == "owners":
        result = OwnerResource(client).get(args.id, archived=True if args.archived else None)
    else:
        result = UserResource(client).get(args.id)

    print_json(result)


def cmd_create(args, client: HubSpotClient):
    """Handle the create command."""
    resource = args.resource
    data = load_json_argument(args.data, "--data")

    if resource == "notes":
        associations = [parse_association(a, ObjectType.NOTES) for a in args.associate or []]
        result = object_resource(client, resource).create(data, associations or None)
    elif resource in OBJECT_RESOURCES:
        result = object_resource(client, resource).create(data)
    elif resource == "pipelines":
        result = PipelineResource(client, _require_type(args, resource)).create(data)
    elif resource == "properties":
        result = PropertyResource(client, _require_type(args, resource)).create(data)
    elif resource == "users":
        result = UserResource(client).create(args.email, role_id=args.role_id)
    else:
        raise ValidationError("Owners are read-only in the HubSpot API")

    print_json(result)


def cmd_update(args, client: HubSpotClient):
    """Handle the update command."""
    resource = args.resource
    data = load_json_argument(args.data, "--data")

    if resource in OBJECT_RESOURCES:
        result = object_resource(client, resource).update(args.id, data)
    elif resource == "pipelines":
        result = PipelineResource(client, _require_type(args, resource)).update(args.id, data)
    elif resource == "properties":
        result = PropertyResource(client, _require_type(args, resource)).update(args.id, data)
    else:
        raise ValidationError(f"{resource} cannot be updated through this toolkit")

    print_json(result)


def cmd_delete(args, client: HubSpotClient):
    """Handle the delete command."""
    resource = args.resource
    if args.force and resource != "pipelines":
        raise ValidationError("--force only applies to pipelines")

    if resource in OBJECT_RESOURCES:
        result = object_resource(client, resource).delete(args.id)
    elif resource == "pipelines":
        result = PipelineResource(client, _require_type(args, resource)).delete(args.id, force=args.force)
    elif resource == "properties":
        result = PropertyResource(client, _require_type(args, resource)).delete(args.id)
    elif resource == "users":
        result = UserResource(client).delete(args.id)
    else:
        raise ValidationError("Owners are read-only in the HubSpot API")

    print(f"✓ Deleted {resource} {args.id}")
    if result:
        print_json(result)


def cmd_associations(args, client: HubSpotClient):
    """Handle the associations command."""
    resource = AssociationResource(client, args.from_type, args.to_type)

    if args.action == "types":
        result = resource.get_types()
    elif args.action == "get":
        result = resource.get(args.ids)
    else:
        associations = [
            parse_association(a, resource.from_object_type, resource.to_object_type)
            for a in args.edges
        ]
        if args.action == "create":
            result = resource.create(associations)
        else:
            result = resource.delete(associations)

    if result:
        print_json(result)


def cmd_resolve_owner(args, client: HubSpotClient):
    """Handle the resolve-owner command."""
    print_json(OwnerResource(client).resolve(args.id))


def cmd_search(args, client: HubSpotClient):
    """Handle the search command."""
    query = load_json_argument(args.query, "--query") or {}
    if not isinstance(query, dict):
        raise ValidationError("--query must be a JSON object")
    query.setdefault("limit", args.limit)

    records = object_resource(client, args.type).search(query)
    logger.info(f"Retrieved {len(records)} records")
    print_json(records)


def run_command(args) -> int:
    """Run a parsed command and translate toolkit errors into an exit code."""
    try:
        client = build_client(args)
    except HubSpotToolkitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        with client:
            args.func(args, client)
        return 0
    except HubSpotToolkitError as e:
        if isinstance(e, RequestFailed):
            print(f"API error: {e}", file=sys.stderr)
            if e.status_code:
                print(f"HTTP Status: {e.status_code}", file=sys.stderr)
        else:
            print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hubspot-toolkit",
        description="HubSpot CRM toolkit CLI",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Verbose diagnostics (-vv for extra verbose)",
    )
    parser.add_argument("--token", help="Private app token (or set HUBSPOT_TOOLKIT_TOKEN)")
    parser.add_argument("--base-url", help="API base URL (or set HUBSPOT_TOOLKIT_BASE_URL)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Connect command
    connect_parser = subparsers.add_parser("connect", help="Verify the token against the account")
    connect_parser.set_defaults(func=cmd_connect)

    # Get command
    get_parser = subparsers.add_parser("get", help="Fetch a record or list records")
    get_parser.add_argument("resource", choices=RESOURCES)
    get_parser.add_argument("--id", help="Record id (or property name); omit to list")
    get_parser.add_argument("--type", help="Object type for pipelines and properties")
    get_parser.add_argument("--properties", help="Comma-separated properties to return")
    get_parser.add_argument("--associations", help="Comma-separated object types to expand")
    get_parser.add_argument("--archived", action="store_true", help="Return archived records")
    get_parser.add_argument("--limit", type=int, help="Page size for list calls")
    get_parser.set_defaults(func=cmd_get)

    # Create command
    create_parser = subparsers.add_parser("create", help="Create a record")
    create_parser.add_argument("resource", choices=RESOURCES)
    create_parser.add_argument("--type", help="Object type for pipelines and properties")
    create_parser.add_argument("--data", help="JSON body, or @file")
    create_parser.add_argument(
        "--associate", action="append",
        help="Note association as TO_TYPE:TO_ID:TYPE_ID (repeatable)",
    )
    create_parser.add_argument("--email", help="Email for a new user")
    create_parser.add_argument("--role-id", help="Role for a new user")
    create_parser.set_defaults(func=cmd_create)

    # Update command
    update_parser = subparsers.add_parser("update", help="Update a record")
    update_parser.add_argument("resource", choices=RESOURCES)
    update_parser.add_argument("--id", required=True, help="Record id (or property name)")
    update_parser.add_argument("--type", help="Object type for pipelines and properties")
    update_parser.add_argument("--data", required=True, help="JSON body, or @file")
    update_parser.set_defaults(func=cmd_update)

    # Delete command
    delete_parser = subparsers.add_parser("delete", help="Delete a record")
    delete_parser.add_argument("resource", choices=RESOURCES)
    delete_parser.add_argument("--id", required=True, help="Record id (or property name)")
    delete_parser.add_argument("--type", help="Object type for pipelines and properties")
    delete_parser.add_argument("--force", action="store_true", help="Delete pipelines without reference checks")
    delete_parser.set_defaults(func=cmd_delete)

    # Associations command
    assoc_parser = subparsers.add_parser("associations", help="Read, create or remove associations")
    assoc_parser.add_argument("action", choices=["types", "get", "create", "delete"])
    assoc_parser.add_argument("--from-type", required=True, choices=[t.value for t in ObjectType])
    assoc_parser.add_argument("--to-type", required=True, choices=[t.value for t in ObjectType])
    assoc_parser.add_argument(
        "--id", dest="ids", action="append", default=[],
        help="Record id to read associations for (repeatable, for 'get')",
    )
    assoc_parser.add_argument(
        "--edge", dest="edges", action="append", default=[],
        help="Association as FROM_ID:TO_ID:TYPE (repeatable, for 'create' and 'delete')",
    )
    assoc_parser.set_defaults(func=cmd_associations)

    # Resolve-owner command
    owner_parser = subparsers.add_parser("resolve-owner", help="Resolve an owner and its user")
    owner_parser.add_argument("--id", required=True, help="Owner id")
    owner_parser.set_defaults(func=cmd_resolve_owner)

    # Search command
    search_parser = subparsers.add_parser("search", help="Search records of one object type")
    search_parser.add_argument("--type", required=True, choices=[t.value for t in ObjectType])
    search_parser.add_argument("--query", help="Search body as JSON, or @file")
    search_parser.add_argument("--limit", type=int, default=200, help="Page size (max 200)")
    search_parser.set_defaults(func=cmd_search)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(run_command(args))


if __name__ == "__main__":
    main()
