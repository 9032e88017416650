"""Error Hierarchy — verifies codes, statuses and the REST error envelope."""

from app.core.errors import (
    AuthenticationError, DatabaseError, ErrorCategory, ErrorSeverity,
    InvalidReferenceError, MuseumError, ResourceNotFoundError,
)


def test_not_found_carries_resource_context():
    err = ResourceNotFoundError("Artwork", "abc")
    body = err.to_response()["error"]
    assert err.http_status == 404
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["context"]["resource_type"] == "Artwork"
    assert body["context"]["resource_id"] == "abc"


def test_invalid_reference_is_validation_category():
    err = InvalidReferenceError("artworks", "xyz")
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response()["error"]["context"]["field"] == "artworks"


def test_authentication_error_is_warning_401():
    err = AuthenticationError("no token provided")
    assert err.http_status == 401
    assert err.severity == ErrorSeverity.WARNING
    assert err.code == "AUTHENTICATION_REQUIRED"


def test_database_error_is_critical_503():
    err = DatabaseError("Integrity constraint violated", "commit")
    assert err.http_status == 503
    assert err.severity == ErrorSeverity.CRITICAL
    assert "commit" in err.message


def test_all_errors_share_base():
    for err in (
        ResourceNotFoundError("Post", "1"),
        InvalidReferenceError("exhibition", "x"),
        AuthenticationError("expired"),
        DatabaseError("boom", "query"),
    ):
        assert isinstance(err, MuseumError)
        assert "timestamp" in err.to_response()["error"]


def test_envelope_omits_unset_context():
    body = AuthenticationError("no token provided").to_response()["error"]
    assert "context" not in body


def test_envelope_keeps_only_set_context_keys():
    body = InvalidReferenceError("exhibition", 12345).to_response()["error"]
    assert body["context"] == {"field": "exhibition"}
