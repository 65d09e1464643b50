"""Offset-based paging for CRM search endpoints."""

import copy
import logging
import time
from typing import Any

from ..core.models import (
    HttpMethod,
    ObjectType,
    ResultPages,
    ValidationError,
    parse_object_type,
)
from .executor import HubSpotClient

logger = logging.getLogger(__name__)

# Largest page the search endpoints accept
MAX_SEARCH_LIMIT = 200

# Search endpoints refuse to page past this many records
SEARCH_RESULT_CEILING = 10_000


def _read_page(client: HubSpotClient, endpoint: str, query: dict[str, Any]) -> tuple[int | None, list[Any]]:
    """POST one search page and return its declared total and records."""
    result = client.execute(endpoint, HttpMethod.POST, query)

    if isinstance(result, ResultPages):
        return None, result.results

    data = result.data if isinstance(result.data, dict) else {}
    return data.get("total"), list(data.get("results") or [])


def search_all(
    client: HubSpotClient,
    object_type: "ObjectType | str",
    query: dict[str, Any],
    delay_seconds: float | None = None,
) -> list[Any]:
    """
    Retrieve every record matching a search query.

    The first page is requested with the caller's query as given. While
    fewer records than the declared ``total`` have been collected, the
    original query is copied, ``after`` is set to the number of records
    collected so far, and the next page is requested after a short pause.

    Totals above 10,000 are not truncated here; the API rejects the
    out-of-range ``after`` and that RequestFailed is raised.

    Args:
        client: Client used to issue the requests
        object_type: Object type to search (e.g., "deals")
        query: Search body (filterGroups, properties, limit, ...)
        delay_seconds: Pause before each follow-up page
            (defaults to the client's search_delay_seconds)

    Returns:
        All matching records in page-arrival order

    Raises:
        ValidationError: If the object type or query is invalid
        RequestFailed: If any page fails; no partial results are returned
    """
    object_type = parse_object_type(object_type)

    if not isinstance(query, dict):
        raise ValidationError("Search query must be a JSON object")

    limit = query.get("limit")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= MAX_SEARCH_LIMIT):
        raise ValidationError(f"Search limit must be between 1 and {MAX_SEARCH_LIMIT}, got {limit!r}")

    if delay_seconds is None:
        delay_seconds = client.search_delay_seconds

    endpoint = f"/crm/v3/objects/{object_type.value}/search"
    original = copy.deepcopy(query)

    total, records = _read_page(client, endpoint, copy.deepcopy(original))
    if total is None:
        total = len(records)

    if total > SEARCH_RESULT_CEILING:
        logger.warning(
            f"Search on {object_type.value} matched {total} records; "
            f"the API only pages through the first {SEARCH_RESULT_CEILING}"
        )

    logger.info(f"Search on {object_type.value}: {total} matching records")

    while len(records) < total:
        page_query = copy.deepcopy(original)
        page_query["after"] = len(records)

        time.sleep(delay_seconds)
        _, page = _read_page(client, endpoint, page_query)
        if not page:
            logger.warning(
                f"Search on {object_type.value} returned an empty page at "
                f"after={page_query['after']} (total {total}); stopping"
            )
            break

        records.extend(page)
        logger.debug(f"Search on {object_type.value}: {len(records)}/{total} records")

    return records
