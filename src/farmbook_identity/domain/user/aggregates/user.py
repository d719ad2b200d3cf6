"""User aggregate for identity concerns only."""

from datetime import datetime
from uuid import UUID, uuid4

from farmbook.domain.shared.time import utc_now
from farmbook_identity.domain.user.value_objects import (
    Email,
    Gender,
    MobileNumber,
    UserRole,
)


class User:
    """
    User aggregate root.

    Carries the salted password hash, which must never leave the
    credential store boundary: presentation code builds its responses
    from the public attributes only.
    """

    def __init__(
        self,
        name: str,
        mobile: str | MobileNumber,
        password_hash: str,
        email: str | Email | None = None,
        gender: str | Gender | None = None,
        address: str | None = None,
        role: int | UserRole = UserRole.CONSUMER,
        is_active: bool = True,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        name = (name or "").strip()
        if not name:
            msg = "Name is required"
            raise ValueError(msg)

        self._name = name
        self._mobile = mobile if isinstance(mobile, MobileNumber) else MobileNumber(mobile)
        self._email = self._coerce_email(email)
        self._gender = Gender(gender) if gender else None
        self._address = address.strip() if address and address.strip() else None
        self._role = UserRole(role)
        self._password_hash = password_hash
        self._is_active = is_active
        self._id = id or uuid4()
        now = utc_now()
        self._created_at = created_at or now
        self._updated_at = updated_at or self._created_at

    @staticmethod
    def _coerce_email(email: str | Email | None) -> Email | None:
        if isinstance(email, Email):
            return email
        if email is None or not email.strip():
            return None
        return Email(email)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str | None:
        return self._email.value if self._email else None

    @property
    def mobile(self) -> str:
        return self._mobile.value

    @property
    def gender(self) -> Gender | None:
        return self._gender

    @property
    def address(self) -> str | None:
        return self._address

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role.is_admin

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(
        cls,
        name: str,
        mobile: str | MobileNumber,
        password_hash: str,
        email: str | Email | None = None,
        gender: str | Gender | None = None,
        address: str | None = None,
        role: int | UserRole = UserRole.CONSUMER,
    ) -> "User":
        return cls(
            name=name,
            mobile=mobile,
            password_hash=password_hash,
            email=email,
            gender=gender,
            address=address,
            role=role,
        )

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        mobile: str,
        password_hash: str,
        email: str | None,
        gender: str | None,
        address: str | None,
        role: int,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            mobile=mobile,
            password_hash=password_hash,
            email=email,
            gender=gender,
            address=address,
            role=role,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, mobile={self.mobile}, role={self._role.name})"
