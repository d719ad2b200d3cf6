"""FastAPI application factory.

Creates and configures the FastAPI application with routers, middleware,
exception handlers and the database lifecycle.

Run with uvicorn in factory mode::

    uvicorn farmbook.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from farmbook import __version__
from farmbook.infrastructure.persistence.sqlalchemy import Database
from farmbook.presentation.api.config import build_jwt_service, get_api_settings
from farmbook.presentation.api.exception_handlers import setup_exception_handlers
from farmbook.presentation.api.routers import auth_router
from farmbook_config.settings import Settings

# Registers the users table on the shared metadata
from farmbook_identity.infrastructure.persistence.sqlalchemy import models  # noqa: F401


@lru_cache(maxsize=4)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the farmbook packages with:
    - Console output with timestamps and module names
    - Configurable log level for farmbook modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    for name in ("farmbook", "farmbook_auth", "farmbook_identity"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """User signup, login and session tokens.

**Signup & Login:**
- Sign up with name, 10-digit mobile, optional email and a password
- Log in with email or mobile to obtain a bearer token

**Security:**
- Passwords are hashed with scrypt and a per-user salt
- Stateless HS256 JWT tokens; logout is discarding the token
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    database: Database = app.state.database

    logger.info("Starting %s API v%s...", app.state.settings.app_name, __version__)
    try:
        await database.connect()
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    yield

    logger.info("Shutting down %s API...", app.state.settings.app_name)
    await database.disconnect()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.

    Raises
    ------
    ConfigurationError
        If the token secret or lifetime is missing; the app must not start
    """
    if settings is None:
        settings = get_api_settings()

    _configure_logging(settings.log_level)

    # Fails fast on a missing JWT_SECRET / JWT_EXPIRES_IN
    jwt_service = build_jwt_service(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Authentication backend for farm bookkeeping.",
        version=__version__,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.settings = settings
    app.state.jwt_service = jwt_service
    app.state.database = Database(settings.database_url, echo=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(auth_router, prefix="/auth", tags=["Authentication"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "ok"}

    return app
