"""Error Hierarchy — every domain error carries a fixed wire contract.

Tests:
    - HTTP status per error kind
    - to_response envelope shape
    - Messages never echo secrets
"""

import pytest

from todo_api.core.errors import (
    AuthenticationFailedError, ConflictError, CredentialHashError, DatabaseError,
    ErrorContext, ErrorSeverity, InconsistentIdentifierError,
    InvalidIdentifierError, InvalidInputError, OwnerChangedError,
    OwnerMissingError, ResourceNotFoundError, ServiceUnavailableError,
    TodoApiError,
)


@pytest.mark.parametrize(
    "error, status, code",
    [
        (InvalidInputError("username is required", field="username"), 400, "INVALID_INPUT"),
        (InvalidIdentifierError("abc"), 400, "INVALID_IDENTIFIER"),
        (InconsistentIdentifierError("a", "b"), 400, "INCONSISTENT_IDENTIFIER"),
        (OwnerMissingError(), 400, "OWNER_MISSING"),
        (OwnerChangedError("t1"), 400, "OWNER_CHANGED"),
        (AuthenticationFailedError(), 401, "AUTHENTICATION_FAILED"),
        (ResourceNotFoundError("User", "alice"), 404, "RESOURCE_NOT_FOUND"),
        (ConflictError("Username 'alice' already exists"), 409, "CONFLICT"),
        (CredentialHashError("Stored password hash is malformed"), 500, "CREDENTIAL_HASH_ERROR"),
        (DatabaseError("boom", "commit"), 500, "DATABASE_ERROR"),
        (ServiceUnavailableError("database unreachable"), 503, "SERVICE_UNAVAILABLE"),
    ],
)
def test_error_wire_contract(error, status, code):
    assert isinstance(error, TodoApiError)
    assert error.http_status == status
    assert error.code == code


def test_to_response_envelope():
    body = ResourceNotFoundError("Todo", "123").to_response()
    assert set(body["error"]) == {"code", "message", "category", "severity", "timestamp"}
    assert body["error"]["message"] == "Todo '123' not found"
    assert body["error"]["category"] == "resource_not_found"


def test_not_found_records_resource_in_context():
    err = ResourceNotFoundError("User", "alice")
    assert err.context.resource_type == "User"
    assert err.context.resource_id == "alice"


def test_authentication_failure_message_is_generic():
    assert AuthenticationFailedError().message == "Authentication failed"


def test_severity_levels():
    assert {s.value for s in ErrorSeverity} == {"warning", "error", "critical"}
    assert OwnerMissingError().severity is ErrorSeverity.WARNING
    assert ServiceUnavailableError("down").severity is ErrorSeverity.CRITICAL


def test_error_context_fields():
    ctx = ErrorContext()
    assert ctx.timestamp.tzinfo is not None
    assert ctx.resource_type is None
    assert ctx.resource_id is None
