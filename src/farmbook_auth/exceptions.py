"""Authentication exceptions.

These exceptions are raised by the farmbook_auth package and should be
caught and handled by the application or presentation layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(AuthError):
    """Raised when the token service is missing its secret or lifetime.

    Treated as fatal: the application must not start without it.
    """

    def __init__(self, message: str = "Authentication is not configured"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when the login identity or password is incorrect.

    Unknown users and wrong passwords share this error on purpose.
    """

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class CorruptCredentialError(AuthError):
    """Raised when a stored password hash is not in ``salt:digest`` form."""

    def __init__(self, message: str = "Stored credential is corrupt"):
        super().__init__(message)


class TokenError(AuthError):
    """Base exception for bearer token failures."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class MissingTokenError(TokenError):
    """Raised when a protected request carries no bearer token."""

    def __init__(self, message: str = "No token provided"):
        super().__init__(message)


class TokenExpiredError(TokenError):
    """Raised when a token's expiry lies in the past."""

    def __init__(self, message: str = "Token expired"):
        super().__init__(message)


class InvalidTokenError(TokenError):
    """Raised when a token's signature or payload is invalid."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class TokenVerificationError(TokenError):
    """Raised for any other failure while decoding a token."""

    def __init__(self, message: str = "Token verification failed"):
        super().__init__(message)
