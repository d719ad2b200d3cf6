"""Authentication router for signup, login and the current identity."""

import logging

from fastapi import APIRouter, status

from farmbook.presentation.api.dependencies import AuthService, CurrentUser, DBSession
from farmbook.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    LoginUserSummary,
    MeResponse,
    SignupRequest,
    UserResponse,
)
from farmbook_identity.domain.user import User

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        mobile=user.mobile,
        gender=user.gender,
        address=user.address,
        role=int(user.role),
        is_active=user.is_active,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User created"},
        400: {"description": "Validation failed"},
        409: {"description": "Email or mobile already in use"},
    },
)
async def signup(
    request: SignupRequest,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    """
    Create a user account.

    The role defaults to consumer (2). The response never includes the
    password hash.
    """
    try:
        user = await auth_service.signup(
            name=request.name,
            mobile=request.mobile,
            password=request.password,
            email=request.email,
            gender=request.gender,
            address=request.address,
            role=request.role,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _to_user_response(user)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Validation failed"},
        401: {"description": "Invalid credentials"},
        500: {"description": "Stored credential is corrupt"},
    },
)
async def login(request: LoginRequest, auth_service: AuthService) -> LoginResponse:
    """
    Authenticate with an email or mobile number and a password.

    A value containing ``@`` is treated as an email. Returns a bearer token
    to send as ``Authorization: Bearer <token>`` on protected routes.
    """
    user, token = await auth_service.login(
        email_or_mobile=request.email_or_mobile,
        password=request.password,
    )

    return LoginResponse(
        token=token,
        expires_in=auth_service.token_lifetime_seconds,
        user=LoginUserSummary(
            id=user.id,
            name=user.name,
            email=user.email,
            mobile=user.mobile,
            role=int(user.role),
        ),
    )


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Identity carried by the token"},
        401: {"description": "Missing, expired or invalid token"},
    },
)
async def get_me(user: CurrentUser) -> MeResponse:
    """
    Return the identity decoded from the caller's bearer token.

    Requires a valid token in the Authorization header.
    """
    return MeResponse(
        id=user.user_id,
        name=user.name,
        email=user.email,
        mobile=user.mobile,
        role=int(user.role),
        is_admin=user.is_admin,
    )
