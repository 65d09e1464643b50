"""Tests for owners and owner resolution."""

import pytest

from hubspot_toolkit.core.models import CompositeLookupFailure, RequestFailed
from hubspot_toolkit.resources import OwnerResource


OWNER = {"id": "77", "email": "rep@test.com", "userId": 9001, "archived": False}
USERS = {"results": [{"id": "9000", "email": "other@test.com"}, {"id": "9001", "email": "rep@test.com"}]}


def urls(mock_http_client):
    return [c.kwargs["url"] for c in mock_http_client.request.call_args_list]


def test_get_owner(client, mock_http_client, make_response):
    """Test fetching one owner."""
    mock_http_client.request.return_value = make_response(OWNER)

    assert OwnerResource(client).get("77") == OWNER
    assert urls(mock_http_client) == ["https://api.test.com/crm/v3/owners/77"]


def test_list_owners_by_email(client, mock_http_client, make_response):
    """Test listing owners filtered by email."""
    mock_http_client.request.return_value = make_response({"results": [OWNER]})

    OwnerResource(client).get(email="rep@test.com", archived=False)

    assert urls(mock_http_client) == [
        "https://api.test.com/crm/v3/owners?archived=false&email=rep%40test.com"
    ]


def test_resolve_active_owner(client, mock_http_client, make_response):
    """Test resolving an active owner to its user."""
    mock_http_client.request.side_effect = [make_response(OWNER), make_response(USERS)]

    result = OwnerResource(client).resolve("77")

    assert result == {"owner": OWNER, "archived": False, "user": USERS["results"][1]}
    assert urls(mock_http_client) == [
        "https://api.test.com/crm/v3/owners/77",
        "https://api.test.com/settings/v3/users",
    ]


def test_resolve_falls_back_to_archived_owner(client, mock_http_client, make_response):
    """Test that a failed lookup issues exactly one archived lookup before matching users."""
    archived_owner = dict(OWNER, archived=True)
    mock_http_client.request.side_effect = [
        make_response({"message": "Owner not found"}, status_code=404),
        make_response(archived_owner),
        make_response(USERS),
    ]

    result = OwnerResource(client).resolve("77")

    assert result["archived"] is True
    assert result["owner"] == archived_owner
    assert result["user"]["id"] == "9001"
    called = urls(mock_http_client)
    assert called == [
        "https://api.test.com/crm/v3/owners/77",
        "https://api.test.com/crm/v3/owners/77?archived=true",
        "https://api.test.com/settings/v3/users",
    ]
    assert sum("archived=true" in u for u in called) == 1


def test_resolve_fails_when_fallback_fails(client, mock_http_client, make_response):
    """Test that a failed archived lookup propagates as a RequestFailed."""
    mock_http_client.request.side_effect = [
        make_response({"message": "Owner not found"}, status_code=404),
        make_response({"message": "Owner not found"}, status_code=404),
    ]

    with pytest.raises(CompositeLookupFailure) as exc_info:
        OwnerResource(client).resolve("77")

    assert isinstance(exc_info.value, RequestFailed)
    assert exc_info.value.status_code == 404
    assert exc_info.value.endpoint == "/crm/v3/owners/77?archived=true"
    assert mock_http_client.request.call_count == 2


def test_resolve_without_matching_user(client, mock_http_client, make_response):
    """Test that an owner without a matching user resolves with user None."""
    mock_http_client.request.side_effect = [
        make_response(dict(OWNER, userId=1)),
        make_response(USERS),
    ]

    result = OwnerResource(client).resolve("77")

    assert result["user"] is None


def test_resolve_owner_without_user_id(client, mock_http_client, make_response):
    """Test that owners with no userId skip the user lookup."""
    owner = {"id": "77", "email": "team@test.com"}
    mock_http_client.request.return_value = make_response(owner)

    result = OwnerResource(client).resolve("77")

    assert result == {"owner": owner, "archived": False, "user": None}
    assert mock_http_client.request.call_count == 1


def test_resolve_with_paged_users(client, mock_http_client, make_response):
    """Test that users spread over several pages are all searched."""
    mock_http_client.request.side_effect = [
        make_response(OWNER),
        make_response({"results": [{"id": "1"}], "paging": {"next": {"link": "https://api.test.com/settings/v3/users?after=1"}}}),
        make_response({"results": [{"id": "9001"}]}),
    ]

    result = OwnerResource(client).resolve("77")

    assert result["user"] == {"id": "9001"}
