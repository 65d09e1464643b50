"""Tests for query string options."""

import pytest

from hubspot_toolkit.core.models import ValidationError
from hubspot_toolkit.client.query import QueryOptions, append_query


def test_append_query_uses_question_mark_first():
    """Test that the first parameter is joined with '?'."""
    assert append_query("/crm/v3/objects/deals", "limit", 10) == "/crm/v3/objects/deals?limit=10"


def test_append_query_uses_ampersand_after():
    """Test that later parameters are joined with '&'."""
    path = append_query("/crm/v3/objects/deals?limit=10", "properties", ["dealname", "amount"])
    assert path == "/crm/v3/objects/deals?limit=10&properties=dealname,amount"


def test_append_query_booleans():
    """Test that booleans are lower-cased."""
    assert append_query("/x", "archived", True) == "/x?archived=true"
    assert append_query("/x", "archived", False) == "/x?archived=false"


def test_append_query_encodes_values():
    """Test that values are URL-encoded but commas are kept."""
    assert append_query("/x", "email", "a b@test.com") == "/x?email=a%20b%40test.com"


def test_query_options_order():
    """Test that options serialise in a fixed order."""
    options = QueryOptions(
        limit=50,
        archived=False,
        associations=["companies", "contacts"],
        properties=["dealname"],
    )

    assert options.apply("/crm/v3/objects/deals") == (
        "/crm/v3/objects/deals?properties=dealname"
        "&associations=companies,contacts&archived=false&limit=50"
    )


def test_query_options_empty():
    """Test that no options leave the path unchanged."""
    assert QueryOptions().apply("/crm/v3/objects/deals/1") == "/crm/v3/objects/deals/1"


def test_query_options_comma_string():
    """Test that comma-separated names are accepted."""
    options = QueryOptions(properties="dealname, amount")
    assert options.properties == ["dealname", "amount"]


def test_query_options_extends_existing_query():
    """Test that options append to a path that already has a query string."""
    options = QueryOptions(properties=["email"])
    assert options.apply("/x?idProperty=email") == "/x?idProperty=email&properties=email"


@pytest.mark.parametrize("kwargs", [
    {"limit": 0},
    {"limit": -1},
    {"limit": "10"},
    {"properties": []},
    {"properties": ["name", ""]},
    {"associations": ","},
    {"id_property": " "},
])
def test_query_options_validation(kwargs):
    """Test that invalid options are rejected."""
    with pytest.raises(ValidationError):
        QueryOptions(**kwargs)
