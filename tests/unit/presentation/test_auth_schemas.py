"""Unit tests for the auth request/response schemas."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from farmbook.presentation.api.schemas.auth import (
    LoginRequest,
    SignupRequest,
    UserResponse,
)
from farmbook_identity.domain.user import Gender, UserRole

VALID_SIGNUP = {
    "name": "Asha",
    "mobile": "9876543210",
    "password": "secret1",
}


def _errors(exc_info) -> dict[str, str]:
    return {
        err["loc"][0]: str(err["ctx"]["error"]) if "ctx" in err else err["msg"]
        for err in exc_info.value.errors()
    }


class TestSignupRequest:
    def test_minimal_signup_defaults(self):
        request = SignupRequest.model_validate(VALID_SIGNUP)

        assert request.role is UserRole.CONSUMER
        assert request.email is None
        assert request.gender is None
        assert request.address is None

    def test_normalizes_fields(self):
        request = SignupRequest.model_validate(
            {
                **VALID_SIGNUP,
                "name": "  Asha  ",
                "mobile": " 9876543210 ",
                "email": " Asha@Example.COM ",
                "gender": "female",
                "address": "  Village Road 12 ",
                "role": 1,
            },
        )

        assert request.name == "Asha"
        assert request.mobile == "9876543210"
        assert request.email == "asha@example.com"
        assert request.gender is Gender.FEMALE
        assert request.address == "Village Road 12"
        assert request.role is UserRole.ADMIN

    def test_empty_email_is_absent(self):
        request = SignupRequest.model_validate({**VALID_SIGNUP, "email": ""})
        assert request.email is None

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("name", "A", "Name must be at least 2 characters"),
            ("name", "x" * 101, "Name must be less than 100 characters"),
            ("email", "not-an-email", "Invalid email format"),
            ("password", "12345", "Password must be at least 6 characters"),
            ("mobile", "12345", "Mobile must be exactly 10 digits"),
            ("gender", "unknown", "Gender must be one of: male, female, other"),
            ("address", "abc", "Address must be at least 5 characters if provided"),
            ("role", 3, "Role must be one of: 0, 1, 2"),
            ("role", True, "Role must be one of: 0, 1, 2"),
        ],
    )
    def test_field_rules(self, field, value, message):
        with pytest.raises(ValidationError) as exc_info:
            SignupRequest.model_validate({**VALID_SIGNUP, field: value})

        assert _errors(exc_info)[field] == message


class TestLoginRequest:
    def test_accepts_camel_case_field(self):
        request = LoginRequest.model_validate(
            {"emailOrMobile": " 9876543210 ", "password": "secret1"},
        )
        assert request.email_or_mobile == "9876543210"

    def test_blank_identifier_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            LoginRequest.model_validate({"emailOrMobile": "   ", "password": "secret1"})

        assert _errors(exc_info)["emailOrMobile"] == "Email or mobile number is required"

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            LoginRequest.model_validate({"emailOrMobile": "9876543210", "password": "x"})

        assert "at least 6" in _errors(exc_info)["password"]


def test_user_response_serializes_camel_case_without_hash():
    now = datetime.now(tz=timezone.utc)
    response = UserResponse(
        id=uuid4(),
        name="Asha",
        email=None,
        mobile="9876543210",
        gender=None,
        address=None,
        role=2,
        is_active=True,
        created_at=now,
        updated_at=now,
    )

    data = response.model_dump(by_alias=True)

    assert {"isActive", "createdAt", "updatedAt"} <= set(data)
    assert not any("password" in key.lower() for key in data)
