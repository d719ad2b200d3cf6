"""Password hashing service using scrypt.

Stored hashes have the form ``salt:digest`` where ``salt`` is 16 random
bytes as 32 hex characters and ``digest`` is a 64-byte scrypt key as 128
hex characters. The hex text of the salt (not its raw bytes) is the KDF
salt, with N=16384, r=8, p=1, so existing stored hashes keep verifying.
"""

import hmac
import re
import secrets

from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from farmbook_auth.exceptions import CorruptCredentialError, WeakPasswordError

_HEX = re.compile(r"[0-9a-fA-F]+")


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> stored = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", stored)
    True
    >>> service.verify("wrong_password", stored)
    False
    """

    # Password requirements
    MIN_LENGTH = 6
    MAX_LENGTH = 100

    SALT_BYTES = 16
    KEY_LENGTH = 64
    SEPARATOR = ":"

    def __init__(self, n: int = 2**14, r: int = 8, p: int = 1):
        """Initialize the password hashing service.

        Parameters
        ----------
        n
            scrypt CPU/memory cost (power of two)
        r
            scrypt block size
        p
            scrypt parallelisation factor
        """
        self._n = n
        self._r = r
        self._p = p

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The ``salt:digest`` string to store

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = secrets.token_hex(self.SALT_BYTES)
        digest = self._derive(password, salt)
        return f"{salt}{self.SEPARATOR}{digest}"

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a stored ``salt:digest`` hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The stored hash to verify against

        Returns
        -------
        True if password matches, False otherwise

        Raises
        ------
        CorruptCredentialError
            If the stored hash is not two ``:``-separated hex fields
        """
        salt, digest = self._split(password_hash)
        candidate = self._derive(password, salt)
        return hmac.compare_digest(candidate.encode("ascii"), digest.encode("ascii"))

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Current requirements:
        - Minimum 6 characters
        - Maximum 100 characters

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password is required"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password) > self.MAX_LENGTH:
            msg = f"Password must be less than {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)

    def _derive(self, password: str, salt: str) -> str:
        kdf = Scrypt(
            salt=salt.encode("utf-8"),
            length=self.KEY_LENGTH,
            n=self._n,
            r=self._r,
            p=self._p,
        )
        return kdf.derive(password.encode("utf-8")).hex()

    def _split(self, password_hash: str) -> tuple[str, str]:
        parts = (password_hash or "").split(self.SEPARATOR)
        if len(parts) != 2 or not all(_HEX.fullmatch(part) for part in parts):
            raise CorruptCredentialError
        return parts[0], parts[1]
