"""Value objects for the user domain having identity concerns only."""

from farmbook_identity.domain.user.value_objects.email import Email
from farmbook_identity.domain.user.value_objects.gender import Gender
from farmbook_identity.domain.user.value_objects.mobile_number import MobileNumber
from farmbook_identity.domain.user.value_objects.user_role import UserRole

__all__ = [
    "Email",
    "Gender",
    "MobileNumber",
    "UserRole",
]
