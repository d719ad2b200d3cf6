"""Authentication schemas for request/response models.

Wire names are camelCase (``emailOrMobile``, ``isActive``); Python code
uses the snake_case attribute names.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from farmbook_auth import PasswordHashingService, WeakPasswordError
from farmbook_identity.domain.user import Email, Gender, MobileNumber, UserRole

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
ADDRESS_MIN_LENGTH = 5

_password_rules = PasswordHashingService()


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignupRequest(CamelModel):
    """Request schema for user signup."""

    name: str
    email: str | None = None
    password: str
    mobile: str
    gender: Gender | None = None
    address: str | None = None
    role: UserRole = Field(default=UserRole.CONSUMER)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Asha",
                "email": "asha@example.com",
                "password": "secret1",
                "mobile": "9876543210",
                "gender": "female",
                "address": "Village Road 12",
                "role": 2,
            },
        },
    )

    @field_validator("name")
    @classmethod
    def _validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "Name is required"
            raise ValueError(msg)
        if len(v) < NAME_MIN_LENGTH:
            msg = f"Name must be at least {NAME_MIN_LENGTH} characters"
            raise ValueError(msg)
        if len(v) > NAME_MAX_LENGTH:
            msg = f"Name must be less than {NAME_MAX_LENGTH} characters"
            raise ValueError(msg)
        return v

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return Email(v).value

    @field_validator("password")
    @classmethod
    def _validate_password(cls, v: str) -> str:
        try:
            _password_rules.validate_strength(v)
        except WeakPasswordError as e:
            raise ValueError(e.message) from e
        return v

    @field_validator("mobile")
    @classmethod
    def _validate_mobile(cls, v: str) -> str:
        return MobileNumber(v).value

    @field_validator("gender", mode="before")
    @classmethod
    def _validate_gender(cls, v: Any) -> Any:
        if v is None:
            return None
        if not isinstance(v, str) or v not in {g.value for g in Gender}:
            msg = "Gender must be one of: male, female, other"
            raise ValueError(msg)
        return v

    @field_validator("address")
    @classmethod
    def _validate_address(cls, v: str | None) -> str | None:
        if not v:
            return None
        v = v.strip()
        if len(v) < ADDRESS_MIN_LENGTH:
            msg = f"Address must be at least {ADDRESS_MIN_LENGTH} characters if provided"
            raise ValueError(msg)
        return v

    @field_validator("role", mode="before")
    @classmethod
    def _validate_role(cls, v: Any) -> Any:
        if v is None:
            return UserRole.CONSUMER
        if isinstance(v, bool) or not isinstance(v, int) or v not in set(UserRole):
            msg = "Role must be one of: 0, 1, 2"
            raise ValueError(msg)
        return v


class LoginRequest(CamelModel):
    """Request schema for login with either an email or a mobile number."""

    email_or_mobile: str
    password: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "emailOrMobile": "9876543210",
                "password": "secret1",
            },
        },
    )

    @field_validator("email_or_mobile")
    @classmethod
    def _validate_email_or_mobile(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "Email or mobile number is required"
            raise ValueError(msg)
        return v

    @field_validator("password")
    @classmethod
    def _validate_password(cls, v: str) -> str:
        if not v:
            msg = "Password is required"
            raise ValueError(msg)
        if len(v) < PasswordHashingService.MIN_LENGTH:
            msg = (
                f"Password must be at least {PasswordHashingService.MIN_LENGTH} "
                "characters"
            )
            raise ValueError(msg)
        return v


class UserResponse(CamelModel):
    """Public view of a stored user. Never includes the password hash."""

    id: UUID
    name: str
    email: str | None
    mobile: str
    gender: Gender | None
    address: str | None
    role: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class LoginUserSummary(CamelModel):
    """The user fields returned alongside a session token."""

    id: UUID
    name: str
    email: str | None
    mobile: str
    role: int


class LoginResponse(CamelModel):
    """Response schema for a successful login."""

    token: str
    token_type: str = Field(default="Bearer")
    expires_in: int
    user: LoginUserSummary

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "tokenType": "Bearer",
                "expiresIn": 604800,
                "user": {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "name": "Asha",
                    "email": None,
                    "mobile": "9876543210",
                    "role": 2,
                },
            },
        },
    )


class MeResponse(CamelModel):
    """The identity decoded from the caller's bearer token."""

    id: UUID
    name: str
    email: str
    mobile: str
    role: int
    is_admin: bool
