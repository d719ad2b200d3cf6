"""SQLAlchemy persistence: declarative base and the database resource."""

from farmbook.infrastructure.persistence.sqlalchemy.database import Database
from farmbook.infrastructure.persistence.sqlalchemy.models import Base, TimestampMixin

__all__ = [
    "Base",
    "Database",
    "TimestampMixin",
]
