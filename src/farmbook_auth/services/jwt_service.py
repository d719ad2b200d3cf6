"""JWT token service.

Issues and verifies the signed, time-limited bearer tokens that
authenticate every protected request. Tokens are stateless: there is no
server-side revocation, logout is the client discarding its token.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from farmbook_auth.durations import parse_duration
from farmbook_auth.exceptions import (
    ConfigurationError,
    InvalidTokenError,
    TokenExpiredError,
    TokenVerificationError,
)
from farmbook_auth.schemas import TokenClaims, TokenPayload

REQUIRED_CLAIMS = ["sub", "email", "mobile", "name", "role", "iat", "exp"]


class JWTService:
    """Service for JWT token creation and verification.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key", expires_in="7d")
    >>> token = service.issue(claims)
    >>> payload = service.verify(token)
    >>> print(payload.user_id)
    """

    ALGORITHM = "HS256"

    def __init__(self, secret_key: str | None, expires_in: str | int | None):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        expires_in
            Token lifetime, e.g. ``"7d"``, ``"12h"`` or seconds

        Raises
        ------
        ConfigurationError
            If the secret or lifetime is missing or the lifetime is invalid
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty (set JWT_SECRET)"
            raise ConfigurationError(msg)
        if expires_in is None or expires_in == "":
            msg = "JWT lifetime cannot be empty (set JWT_EXPIRES_IN)"
            raise ConfigurationError(msg)

        try:
            self._expires_delta = parse_duration(expires_in)
        except ValueError as e:
            msg = f"Invalid JWT lifetime: {e}"
            raise ConfigurationError(msg) from e

        self._secret_key = secret_key

    @property
    def expires_in_seconds(self) -> int:
        """Lifetime of newly issued tokens, in whole seconds."""
        return int(self._expires_delta.total_seconds())

    def issue(
        self,
        claims: TokenClaims,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed token for the given identity.

        Parameters
        ----------
        claims
            The identity to embed
        expires_delta
            Custom expiration time (optional, mainly for tests)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        if expires_delta is None:
            expires_delta = self._expires_delta
        expire = now + expires_delta

        payload = {
            "sub": str(claims.user_id),
            "email": claims.email,
            "mobile": claims.mobile,
            "name": claims.name,
            "role": int(claims.role),
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        TokenExpiredError
            If the token's expiry has passed
        InvalidTokenError
            If the signature does not verify or the payload is malformed
        TokenVerificationError
            For any other decoding failure
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError from e
        except Exception as e:
            raise TokenVerificationError from e

        try:
            return TokenPayload(
                user_id=UUID(payload["sub"]),
                email=str(payload["email"]),
                mobile=str(payload["mobile"]),
                name=str(payload["name"]),
                role=int(payload["role"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError from e
