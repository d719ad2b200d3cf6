"""SQLAlchemy models shared by farmbook packages."""

from farmbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

__all__ = ["Base", "TimestampMixin"]
