"""Pydantic schemas for API request/response models."""

from farmbook.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    LoginUserSummary,
    MeResponse,
    SignupRequest,
    UserResponse,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "LoginUserSummary",
    "MeResponse",
    "SignupRequest",
    "UserResponse",
]
