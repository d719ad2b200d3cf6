"""Bearer token extraction from the ``Authorization`` header."""

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from a ``Bearer <token>`` header value.

    The prefix is matched case-sensitively with a single space. A missing
    header or any other scheme yields ``None`` rather than an error.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX) :]
