"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from farmbook.domain.shared.exceptions import (
    ConflictError,
    ErrorCode,
    PersistenceError,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL)


class InvalidMobileError(ValidationError):
    """Raised when a mobile number is not exactly 10 digits."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_MOBILE)


class DuplicateIdentityError(ConflictError):
    """Email or mobile already belongs to another user.

    ``field`` names the identity that collided: ``"email"`` or ``"mobile"``.
    """

    FIELD_LABELS = {"email": "Email", "mobile": "Mobile"}

    def __init__(self, field: str, value: str | None = None) -> None:
        self.field = field
        self.value = value
        label = self.FIELD_LABELS.get(field, field.capitalize())
        super().__init__(
            f"{label} already in use",
            ErrorCode.DUPLICATE_IDENTITY,
            details={"field": field},
        )


class PersistenceFailureError(PersistenceError):
    """A freshly written user could not be read back."""

    def __init__(self, message: str = "Failed to retrieve created user") -> None:
        super().__init__(message)
