"""Error Hierarchy — tests for codes, statuses, and response envelopes.

Tests cover:
    - DatabaseError is critical, 503, and carries the operation
    - to_response prefers the user-facing message over the internal one
    - AuthenticationError carries its subtype tag
"""

from invoicing.core.domain_types import AuthErrorKind
from invoicing.core.errors import (
    AuthenticationError, DatabaseError, ErrorCategory, ErrorContext,
    ErrorSeverity, ResourceNotFoundError,
)


def test_database_error_is_critical_503():
    err = DatabaseError("Connection or operational error", "insert")
    assert err.http_status == 503
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.category == ErrorCategory.DATABASE
    assert err.operation == "insert"
    assert err.message == "Database insert failed: Connection or operational error"


def test_to_response_hides_internal_message_when_user_message_set():
    err = DatabaseError(
        "Integrity constraint violated", "update",
        ErrorContext(user_message="Database error occurred while updating the invoice.",
                     invoice_id="abc"),
    )
    body = err.to_response()["error"]
    assert body["message"] == "Database error occurred while updating the invoice."
    assert body["context"]["invoice_id"] == "abc"


def test_to_response_falls_back_to_message():
    err = ResourceNotFoundError("Invoice", "abc")
    assert err.http_status == 404
    assert err.to_response()["error"]["message"] == "Invoice 'abc' not found"


def test_authentication_error_keeps_kind():
    err = AuthenticationError(AuthErrorKind.CALLBACK_FAILED)
    assert err.kind is AuthErrorKind.CALLBACK_FAILED
    assert err.http_status == 401

