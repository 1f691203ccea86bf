"""Tests for domain exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DuplicateEmailException,
    PlacesException,
    ResourceNotFoundException,
    SearchUnavailableException,
    SqlNotConfiguredException,
    UserAlreadyExistsException,
    ValidationException,
)


def test_places_exception_default_error_code() -> None:
    """Base PlacesException uses class name as error_code when not provided."""
    exc = PlacesException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "PlacesException"
    assert exc.details == {}


def test_to_dict_shape() -> None:
    exc = PlacesException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception_field() -> None:
    exc = ValidationException("latitude out of range", field="latitude")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "latitude"}
    assert ValidationException("Invalid").details == {}


def test_authentication_exception_default_message() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_authorization_exception_resource_and_action() -> None:
    exc = AuthorizationException(resource="place", action="update")
    assert exc.message == "Permission denied: update on place"
    assert exc.details == {"resource": "place", "action": "update"}
    assert AuthorizationException().message == "Permission denied"


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("place", 42)
    assert exc.message == "place not found: 42"
    assert exc.details == {"resource_type": "place", "resource_id": "42"}


def test_conflict_exceptions() -> None:
    assert DuplicateEmailException().error_code == "DUPLICATE_EMAIL"
    assert UserAlreadyExistsException().error_code == "USER_ALREADY_EXISTS"


def test_search_unavailable_keeps_operation() -> None:
    exc = SearchUnavailableException("suggest")
    assert exc.error_code == "SEARCH_UNAVAILABLE"
    assert exc.details == {"operation": "suggest"}


def test_sql_not_configured() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"
