"""Mobile number value object."""

import re
from dataclasses import dataclass

from farmbook_identity.domain.user.exceptions import InvalidMobileError

MOBILE_PATTERN = re.compile(r"^[0-9]{10}$")


@dataclass(frozen=True)
class MobileNumber:
    """A trimmed mobile number of exactly 10 digits."""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip()

        if not normalized:
            msg = "Mobile number is required"
            raise InvalidMobileError(msg)

        if not MOBILE_PATTERN.match(normalized):
            msg = "Mobile must be exactly 10 digits"
            raise InvalidMobileError(msg)

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"MobileNumber('{self.value}')"
