"""Tests for core data models."""

import pytest
from hubspot_toolkit.core.models import (
    ObjectType,
    HttpMethod,
    Verbosity,
    Session,
    RequestDescriptor,
    AssociationTuple,
    SingleObject,
    ResultPages,
    HubSpotToolkitError,
    PreconditionError,
    ValidationError,
    RequestFailed,
    CompositeLookupFailure,
    ConfigError,
    PIPELINE_OBJECT_TYPES,
    parse_object_type,
    parse_http_method,
)


def test_object_type_enum():
    """Test ObjectType enum values."""
    assert ObjectType.DEALS.value == "deals"
    assert ObjectType.CONTACTS.value == "contacts"
    assert ObjectType.COMPANIES.value == "companies"
    assert ObjectType.NOTES.value == "notes"
    assert ObjectType("tickets") == ObjectType.TICKETS


def test_verbosity_enum():
    """Test Verbosity enum values."""
    assert Verbosity("none") == Verbosity.NONE
    assert Verbosity("verbose") == Verbosity.VERBOSE
    assert Verbosity("extra-verbose") == Verbosity.EXTRA_VERBOSE


def test_session_is_populated():
    """Test Session population check."""
    assert Session(base_url="https://api.hubapi.com", api_key="key").is_populated()
    assert not Session(base_url="https://api.hubapi.com", api_key="").is_populated()
    assert not Session(base_url="", api_key="key").is_populated()


def test_request_descriptor_defaults_and_immutability():
    """Test RequestDescriptor defaults and that it is frozen."""
    descriptor = RequestDescriptor(endpoint="/crm/v3/owners")

    assert descriptor.http_method == HttpMethod.GET
    assert descriptor.body is None
    with pytest.raises(AttributeError):
        descriptor.endpoint = "/other"


def test_association_tuple_to_input():
    """Test AssociationTuple batch input conversion."""
    association = AssociationTuple(
        from_object_type=ObjectType.DEALS,
        from_id="1",
        to_object_type=ObjectType.COMPANIES,
        to_id="2",
        association_type="deal_to_company",
    )

    assert association.to_input() == {
        "from": {"id": "1"},
        "to": {"id": "2"},
        "type": "deal_to_company",
    }


def test_result_types_unwrap():
    """Test that tagged results unwrap to the compatible shapes."""
    assert SingleObject({"id": "1"}).unwrap() == {"id": "1"}
    assert ResultPages(results=[1, 2], pages=2).unwrap() == [1, 2]
    assert ResultPages().unwrap() == []


def test_parse_object_type():
    """Test parsing object types from strings and enums."""
    assert parse_object_type("Deals") == ObjectType.DEALS
    assert parse_object_type(ObjectType.NOTES) == ObjectType.NOTES

    with pytest.raises(ValidationError) as exc_info:
        parse_object_type("widgets")
    assert "deals" in str(exc_info.value)


def test_parse_object_type_allowed_subset():
    """Test restricting object types to a subset."""
    assert parse_object_type("tickets", allowed=PIPELINE_OBJECT_TYPES) == ObjectType.TICKETS

    with pytest.raises(ValidationError):
        parse_object_type("contacts", allowed=PIPELINE_OBJECT_TYPES)


def test_parse_http_method():
    """Test parsing HTTP methods."""
    assert parse_http_method("get") == HttpMethod.GET
    assert parse_http_method(HttpMethod.PATCH) == HttpMethod.PATCH

    with pytest.raises(ValidationError):
        parse_http_method("PUT")


def test_request_failed_carries_context():
    """Test RequestFailed stores endpoint, method and status."""
    error = RequestFailed("/crm/v3/objects/deals", "POST", "Bad Request", status_code=400)

    assert error.endpoint == "/crm/v3/objects/deals"
    assert error.method == "POST"
    assert error.status_code == 400
    assert error.message == "Bad Request"
    assert str(error) == "POST /crm/v3/objects/deals failed 400: Bad Request"


def test_request_failed_without_status_code():
    """Test RequestFailed works without status code."""
    error = RequestFailed("/test", "GET", "Network error")

    assert error.status_code is None
    assert str(error) == "GET /test failed: Network error"


def test_error_hierarchy():
    """Test that all toolkit errors share a base class."""
    for error_class in (PreconditionError, ValidationError, RequestFailed, ConfigError):
        assert issubclass(error_class, HubSpotToolkitError)

    assert issubclass(ValidationError, ValueError)
    assert issubclass(CompositeLookupFailure, RequestFailed)
