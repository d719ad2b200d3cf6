"""REST API presentation layer for Farmbook.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── config.py             # API configuration
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Error to HTTP response mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from farmbook.presentation.api.app import create_app

__all__ = ["create_app"]
