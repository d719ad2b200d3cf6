"""Authentication service for user signup and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from farmbook_auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenClaims,
)
from farmbook_identity.application.context import UserContext
from farmbook_identity.domain.user import Gender, User, UserRole

if TYPE_CHECKING:
    from farmbook_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates farmbook_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - Signup against the credential store
    - Login with email or mobile and password
    - Turning a bearer token into a request-scoped UserContext
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    @property
    def token_lifetime_seconds(self) -> int:
        return self._jwt_service.expires_in_seconds

    async def signup(  # noqa: PLR0913
        self,
        name: str,
        mobile: str,
        password: str,
        email: str | None = None,
        gender: Gender | str | None = None,
        address: str | None = None,
        role: UserRole | int = UserRole.CONSUMER,
    ) -> User:
        """Register a new user and return the stored record.

        The returned aggregate still carries the password hash; callers must
        not send it past the request boundary.

        Raises
        ------
        WeakPasswordError
            If the password does not meet the length rules
        DuplicateIdentityError
            If the email or mobile is already registered
        PersistenceFailureError
            If the new record cannot be read back
        """
        password_hash = self._password_service.hash(password)
        user = User.create(
            name=name,
            mobile=mobile,
            password_hash=password_hash,
            email=email,
            gender=gender,
            address=address,
            role=role,
        )
        stored = await self._user_repo.create(user)

        logger.info("User signed up: %s (mobile: %s)", stored.id, stored.mobile)
        return stored

    async def login(self, email_or_mobile: str, password: str) -> tuple[User, str]:
        """Check credentials and issue a session token.

        Unknown identities, inactive users and wrong passwords all raise the
        same ``InvalidCredentialsError``.

        Raises
        ------
        InvalidCredentialsError
            If the credentials do not match an active user
        CorruptCredentialError
            If the stored password hash is malformed
        """
        identifier = email_or_mobile.strip()
        if "@" in identifier:
            user = await self._user_repo.find_by_email(identifier)
        else:
            user = await self._user_repo.find_by_mobile(identifier)

        if user is None or not user.is_active:
            logger.info("Failed login attempt")
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError

        token = self._jwt_service.issue(
            TokenClaims(
                user_id=user.id,
                email=user.email or "",
                mobile=user.mobile,
                name=user.name,
                role=int(user.role),
            ),
        )

        logger.info("User logged in: %s", user.id)
        return user, token

    def authenticate(self, token: str) -> UserContext:
        """Verify a bearer token and return the identity it carries.

        Raises
        ------
        TokenExpiredError, TokenVerificationError
            Propagated from the token service
        InvalidTokenError
            If the signature or payload is invalid
        """
        payload = self._jwt_service.verify(token)
        try:
            return UserContext.from_payload(payload)
        except ValueError as e:
            # Signed by us but carrying an unknown role code
            raise InvalidTokenError from e
