"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (no database)
    │   ├── farmbook_auth/
    │   ├── farmbook_config/
    │   ├── farmbook_identity/
    │   └── presentation/
    └── integration/       # SQLAlchemy + API tests on in-memory SQLite
        ├── persistence/
        └── api/
"""

import pytest

from farmbook_config import clear_settings_cache


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch):
    """Keep real deployment configuration out of the tests."""
    for name in ("JWT_SECRET", "JWT_EXPIRES_IN", "DATABASE_URL", "FARMBOOK_ENV_FILE"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
