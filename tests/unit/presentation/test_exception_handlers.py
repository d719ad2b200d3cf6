"""Unit tests for validation error flattening and status mapping."""

from farmbook.domain.shared.exceptions import ConflictError, ErrorCode, PersistenceError
from farmbook.presentation.api.exception_handlers import (
    _get_status_for_auth_error,
    _get_status_for_exception,
    flatten_validation_errors,
)
from farmbook_auth.exceptions import (
    ConfigurationError,
    CorruptCredentialError,
    InvalidCredentialsError,
    TokenExpiredError,
    WeakPasswordError,
)
from farmbook_identity.domain.user import DuplicateIdentityError, InvalidMobileError


class TestFlattenValidationErrors:
    def test_groups_messages_by_field(self):
        errors = [
            {
                "type": "value_error",
                "loc": ("body", "mobile"),
                "msg": "Value error, Mobile must be exactly 10 digits",
                "ctx": {"error": ValueError("Mobile must be exactly 10 digits")},
            },
            {"type": "missing", "loc": ("body", "name"), "msg": "Field required"},
        ]

        details = flatten_validation_errors(errors)

        assert details == {
            "formErrors": [],
            "fieldErrors": {
                "mobile": ["Mobile must be exactly 10 digits"],
                "name": ["Field required"],
            },
        }

    def test_body_level_errors_go_to_form_errors(self):
        errors = [
            {"type": "missing", "loc": ("body",), "msg": "Field required"},
            {"type": "json_invalid", "loc": ("body", 12), "msg": "JSON decode error"},
        ]

        details = flatten_validation_errors(errors)

        assert details["formErrors"] == ["Field required", "JSON decode error"]
        assert details["fieldErrors"] == {}


class TestStatusMapping:
    def test_duplicate_identity_is_conflict(self):
        assert _get_status_for_exception(DuplicateIdentityError("email")) == 409

    def test_invalid_mobile_is_bad_request(self):
        assert _get_status_for_exception(InvalidMobileError("bad")) == 400

    def test_persistence_failure_is_server_error(self):
        assert _get_status_for_exception(PersistenceError("lost")) == 500

    def test_status_comes_from_code_not_message(self):
        exc = ConflictError("something else entirely", ErrorCode.DUPLICATE_IDENTITY)
        assert _get_status_for_exception(exc) == 409


class TestAuthStatusMapping:
    def test_corrupt_credential_is_server_error(self):
        assert _get_status_for_auth_error(CorruptCredentialError()) == 500

    def test_configuration_error_is_server_error(self):
        assert _get_status_for_auth_error(ConfigurationError("JWT_SECRET")) == 500

    def test_credential_and_token_failures_are_unauthorized(self):
        assert _get_status_for_auth_error(InvalidCredentialsError()) == 401
        assert _get_status_for_auth_error(TokenExpiredError()) == 401

    def test_weak_password_is_bad_request(self):
        assert _get_status_for_auth_error(WeakPasswordError("too short")) == 400
