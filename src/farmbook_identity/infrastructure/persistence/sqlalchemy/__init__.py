"""SQLAlchemy persistence for identity management."""

from farmbook_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from farmbook_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = ["UserModel", "UserRepositorySQLAlchemy"]
