"""Unit tests for AuthenticationService."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock
from uuid import UUID

import pytest

from farmbook_auth import (
    CorruptCredentialError,
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenExpiredError,
    TokenPayload,
    WeakPasswordError,
)
from farmbook_identity.application.services import AuthenticationService
from farmbook_identity.domain.user import DuplicateIdentityError, User, UserRole

TEST_USER_ID = UUID("12345678-1234-5678-1234-567812345678")
TEST_MOBILE = "9876543210"
TEST_PASSWORD = "secret1"


def _user(**overrides) -> User:
    values = {
        "id": TEST_USER_ID,
        "name": "Asha",
        "mobile": TEST_MOBILE,
        "password_hash": "salt:digest",
    }
    values.update(overrides)
    return User(**values)


class _ServiceFixture:
    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.jwt_service = Mock(spec=JWTService)

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )


class TestAuthenticationServiceSignup(_ServiceFixture):
    """Tests for user signup."""

    async def test_signup_hashes_password_and_creates_user(self):
        self.password_service.hash.return_value = "salt:digest"
        self.user_repo.create.side_effect = lambda user: user

        user = await self.service.signup(
            name="Asha",
            mobile=TEST_MOBILE,
            password=TEST_PASSWORD,
        )

        assert user.password_hash == "salt:digest"
        assert user.role is UserRole.CONSUMER
        self.password_service.hash.assert_called_once_with(TEST_PASSWORD)
        self.user_repo.create.assert_awaited_once()

    async def test_signup_passes_optional_fields(self):
        self.password_service.hash.return_value = "salt:digest"
        self.user_repo.create.side_effect = lambda user: user

        user = await self.service.signup(
            name="Ravi",
            mobile=TEST_MOBILE,
            password=TEST_PASSWORD,
            email="Ravi@Example.com",
            gender="male",
            address="Main Street 4",
            role=UserRole.ADMIN,
        )

        assert user.email == "ravi@example.com"
        assert user.role is UserRole.ADMIN

    async def test_signup_propagates_duplicate_identity(self):
        self.password_service.hash.return_value = "salt:digest"
        self.user_repo.create.side_effect = DuplicateIdentityError("mobile")

        with pytest.raises(DuplicateIdentityError) as exc_info:
            await self.service.signup(
                name="Asha",
                mobile=TEST_MOBILE,
                password=TEST_PASSWORD,
            )

        assert exc_info.value.field == "mobile"
        assert exc_info.value.message == "Mobile already in use"

    async def test_signup_rejects_weak_password_before_writing(self):
        self.password_service.hash.side_effect = WeakPasswordError("Too short")

        with pytest.raises(WeakPasswordError):
            await self.service.signup(name="Asha", mobile=TEST_MOBILE, password="x")

        self.user_repo.create.assert_not_called()


class TestAuthenticationServiceLogin(_ServiceFixture):
    """Tests for login."""

    async def test_login_by_mobile_returns_user_and_token(self):
        self.user_repo.find_by_mobile.return_value = _user()
        self.password_service.verify.return_value = True
        self.jwt_service.issue.return_value = "token"

        user, token = await self.service.login(TEST_MOBILE, TEST_PASSWORD)

        assert user.id == TEST_USER_ID
        assert token == "token"
        self.user_repo.find_by_email.assert_not_called()
        claims = self.jwt_service.issue.call_args.args[0]
        assert claims.user_id == TEST_USER_ID
        assert claims.email == ""
        assert claims.role == 2

    async def test_login_with_at_sign_looks_up_email(self):
        self.user_repo.find_by_email.return_value = _user(email="asha@example.com")
        self.password_service.verify.return_value = True
        self.jwt_service.issue.return_value = "token"

        await self.service.login(" asha@example.com ", TEST_PASSWORD)

        self.user_repo.find_by_email.assert_awaited_once_with("asha@example.com")
        self.user_repo.find_by_mobile.assert_not_called()

    async def test_unknown_user_raises_invalid_credentials(self):
        self.user_repo.find_by_mobile.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_MOBILE, TEST_PASSWORD)

        self.password_service.verify.assert_not_called()

    async def test_wrong_password_raises_same_error(self):
        self.user_repo.find_by_mobile.return_value = _user()
        self.password_service.verify.return_value = False

        with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
            await self.service.login(TEST_MOBILE, "wrong-password")

        self.jwt_service.issue.assert_not_called()

    async def test_inactive_user_cannot_log_in(self):
        self.user_repo.find_by_mobile.return_value = _user(is_active=False)

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_MOBILE, TEST_PASSWORD)

    async def test_corrupt_stored_hash_propagates(self):
        self.user_repo.find_by_mobile.return_value = _user(password_hash="broken")
        self.password_service.verify.side_effect = CorruptCredentialError

        with pytest.raises(CorruptCredentialError):
            await self.service.login(TEST_MOBILE, TEST_PASSWORD)


class TestAuthenticationServiceAuthenticate(_ServiceFixture):
    """Tests for turning a token into a UserContext."""

    def _payload(self, role: int = 1) -> TokenPayload:
        now = datetime.now(tz=timezone.utc)
        return TokenPayload(
            user_id=TEST_USER_ID,
            email="asha@example.com",
            mobile=TEST_MOBILE,
            name="Asha",
            role=role,
            issued_at=now,
            expires_at=now,
        )

    def test_authenticate_builds_user_context(self):
        self.jwt_service.verify.return_value = self._payload(role=1)

        context = self.service.authenticate("token")

        assert context.user_id == TEST_USER_ID
        assert context.mobile == TEST_MOBILE
        assert context.role is UserRole.ADMIN
        assert context.is_admin

    def test_authenticate_propagates_expiry(self):
        self.jwt_service.verify.side_effect = TokenExpiredError

        with pytest.raises(TokenExpiredError):
            self.service.authenticate("token")

    def test_unknown_role_code_is_an_invalid_token(self):
        self.jwt_service.verify.return_value = self._payload(role=7)

        with pytest.raises(InvalidTokenError):
            self.service.authenticate("token")
