"""
Request executor.

Builds authenticated requests against the HubSpot API, dispatches them
and follows link-based pagination until the last page.
"""

import json
import logging
from typing import Any

import httpx

from ..core.config import DEFAULT_TIMEOUT_SECONDS, DEFAULT_SEARCH_DELAY_SECONDS
from ..core.models import (
    HttpMethod,
    Session,
    SingleObject,
    ResultPages,
    RequestDescriptor,
    PreconditionError,
    RequestFailed,
    ValidationError,
    parse_http_method,
)
from ..core.session import get_session

logger = logging.getLogger(__name__)


def next_page_link(response: Any) -> str | None:
    """
    Return the next-page link of a response envelope, if any.

    Args:
        response: Parsed response body

    Returns:
        The literal ``paging.next.link`` URL or None
    """
    if not isinstance(response, dict):
        return None
    paging = response.get("paging")
    if not isinstance(paging, dict):
        return None
    next_page = paging.get("next")
    if not isinstance(next_page, dict):
        return None
    return next_page.get("link") or None


class HubSpotClient:
    """
    Authenticated HubSpot API client.

    Features:
    - Bearer token authentication from a Session
    - Transparent next-page link following
    - Explicit request timeout
    - No automatic retries; every failure surfaces as RequestFailed
    """

    def __init__(
        self,
        session: Session | None = None,
        http_client: httpx.Client | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        search_delay_seconds: float = DEFAULT_SEARCH_DELAY_SECONDS,
    ):
        """
        Initialize the client.

        Args:
            session: Session to use (the default session from connect() if None)
            http_client: Optional httpx client (created if None)
            timeout_seconds: Request timeout in seconds
            search_delay_seconds: Pause between search pages in seconds
        """
        self.session = session
        self.timeout_seconds = timeout_seconds
        self.search_delay_seconds = search_delay_seconds

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.Client(timeout=timeout_seconds)
        else:
            self.http_client = http_client

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            self.http_client.close()

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager cleanup."""
        self.close()
        return False

    def _resolve_session(self) -> Session:
        """Return the client's session, falling back to the default session."""
        if self.session is not None:
            if not self.session.is_populated():
                raise PreconditionError("Session has no API key or base URL. Connect first.")
            return self.session
        return get_session()

    def _build_headers(self, session: Session) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {session.api_key}",
        }

    def _send(
        self,
        url: str,
        descriptor: RequestDescriptor,
        headers: dict[str, str],
    ) -> Any:
        """
        Issue one HTTP request.

        Args:
            url: Absolute URL to call
            descriptor: The logical request (used for method, body and error context)
            headers: Request headers

        Returns:
            Parsed response JSON ({} for an empty body)

        Raises:
            RequestFailed: On a transport error or non-2xx response
        """
        method = descriptor.http_method.value
        kwargs: dict[str, Any] = {
            "method": method,
            "url": url,
            "headers": headers,
            "timeout": self.timeout_seconds,
        }
        # Absent body is left out entirely rather than sent empty
        if descriptor.body is not None:
            kwargs["json"] = descriptor.body

        logger.info(f"{method} {url}")
        if descriptor.body is not None:
            logger.debug(f"Request body: {json.dumps(descriptor.body, default=str)}")

        try:
            response = self.http_client.request(**kwargs)
        except httpx.RequestError as e:
            raise RequestFailed(descriptor.endpoint, method, f"Request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise RequestFailed(
                descriptor.endpoint,
                method,
                _error_message(response),
                status_code=response.status_code,
            )

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise RequestFailed(
                descriptor.endpoint,
                method,
                f"Invalid JSON response: {e}",
                status_code=response.status_code,
            ) from e

    def execute(
        self,
        endpoint: str,
        method: "HttpMethod | str" = HttpMethod.GET,
        body: Any = None,
    ) -> SingleObject | ResultPages:
        """
        Perform one logical API operation, following next-page links.

        Args:
            endpoint: API path starting with '/' (e.g., "/crm/v3/objects/deals")
            method: GET, POST, DELETE or PATCH
            body: Optional JSON-serialisable request body

        Returns:
            SingleObject wrapping the raw response when no next-page link
            was returned, otherwise ResultPages with every page's results
            concatenated in arrival order

        Raises:
            ValidationError: If the endpoint or method is invalid
            PreconditionError: If no session is available
            RequestFailed: If any page request fails
        """
        if not isinstance(endpoint, str) or not endpoint.startswith("/"):
            raise ValidationError(f"Endpoint must start with '/', got {endpoint!r}")

        descriptor = RequestDescriptor(
            endpoint=endpoint,
            http_method=parse_http_method(method),
            body=body,
        )

        session = self._resolve_session()
        headers = self._build_headers(session)

        response = self._send(f"{session.base_url.rstrip('/')}{endpoint}", descriptor, headers)
        link = next_page_link(response)
        if link is None:
            return SingleObject(response)

        results = list(response.get("results") or [])
        pages = 1
        while link is not None:
            response = self._send(link, descriptor, headers)
            if isinstance(response, dict):
                results.extend(response.get("results") or [])
            pages += 1
            link = next_page_link(response)

        logger.debug(f"Followed {pages} pages for {endpoint}: {len(results)} results")
        return ResultPages(results=results, pages=pages)

    def request(
        self,
        endpoint: str,
        method: "HttpMethod | str" = HttpMethod.GET,
        body: Any = None,
    ) -> Any:
        """
        Like execute(), but returns the untagged value.

        Returns:
            The raw response object for a single page, or the list of
            results for a multi-page response
        """
        return self.execute(endpoint, method, body).unwrap()


def _error_message(response: httpx.Response) -> str:
    """Extract a readable message from an error response."""
    text = response.text
    try:
        data = json.loads(text) if text else None
    except (TypeError, ValueError):
        data = None

    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return text or "no response body"
