"""FastAPI dependency injection for the Farmbook API.

Provides dependencies for:
- Database sessions (from the ``Database`` resource on ``app.state``)
- Token and password services
- The authentication service
- The protected-request gate (``require_auth``)
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from farmbook.infrastructure.persistence.sqlalchemy import Database
from farmbook_auth import (
    JWTService,
    MissingTokenError,
    PasswordHashingService,
    TokenError,
    extract_bearer_token,
)
from farmbook_identity.application.context import UserContext
from farmbook_identity.application.services import AuthenticationService
from farmbook_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Application resources
# -----------------------------------------------------------------------------


def get_database(request: Request) -> Database:
    """The shared database resource opened in the app lifespan."""
    return request.app.state.database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with database.session() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(request: Request) -> JWTService:
    """Token service built (and validated) when the app was created."""
    return request.app.state.jwt_service


def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates signup, login and token verification.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Protected-request gate
# -----------------------------------------------------------------------------


def require_auth(
    request: Request,
    auth_service: AuthService,
    authorization: Annotated[str | None, Header()] = None,
) -> UserContext:
    """
    Authenticate the request from its ``Authorization: Bearer`` header.

    Verification is pure computation: no query is issued. On success the
    identity is also stored on ``request.state.user`` for downstream
    handlers.

    Raises
    ------
    MissingTokenError
        If the header is absent or does not start with ``"Bearer "``
    TokenError
        If the token is expired, invalid or cannot be decoded
    """
    token = extract_bearer_token(authorization)
    if token is None:
        logger.debug("Rejected %s: no bearer token", request.url.path)
        raise MissingTokenError

    try:
        user = auth_service.authenticate(token)
    except TokenError as e:
        logger.debug("Rejected %s: %s", request.url.path, e.message)
        raise

    request.state.user = user
    return user


# Type alias for the authenticated caller
CurrentUser = Annotated[UserContext, Depends(require_auth)]
