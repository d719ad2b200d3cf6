from enum import IntEnum


class UserRole(IntEnum):
    """User roles, stored and sent on the wire as their integer codes."""

    SUPER_ADMIN = 0
    ADMIN = 1
    CONSUMER = 2

    @property
    def is_admin(self) -> bool:
        return self in (UserRole.SUPER_ADMIN, UserRole.ADMIN)
