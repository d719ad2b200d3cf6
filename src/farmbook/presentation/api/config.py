"""API configuration adapter.

Bridges the centralized farmbook_config settings with the API layer.
"""

from farmbook_auth import JWTService
from farmbook_config.settings import Settings, get_settings


def get_api_settings() -> Settings:
    """Get settings from centralized configuration."""
    return get_settings()


def build_jwt_service(settings: Settings) -> JWTService:
    """Build the token service from settings.

    Raises
    ------
    ConfigurationError
        If ``JWT_SECRET`` or ``JWT_EXPIRES_IN`` is missing or invalid
    """
    secret = settings.jwt_secret.get_secret_value() if settings.jwt_secret else None
    return JWTService(secret_key=secret, expires_in=settings.jwt_expires_in)
