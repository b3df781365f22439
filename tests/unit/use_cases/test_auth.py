"""Unit tests for authentication use cases

Tests cover:
- RegisterUser validation, duplicate email and token issuance
- LoginUser uniform failure for unknown email and wrong password
- AuthorizeRequest credential verification
- GetCurrentUser
"""

import pytest
import threading
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import IntegrityError

from src.app.services.token_service import InvalidTokenError, TokenClaims
from src.app.use_cases.auth import (
    AuthorizeRequest,
    GetCurrentUser,
    LoginCommandDTO,
    LoginUser,
    RegisterCommandDTO,
    RegisterUser,
)
from src.domain.user import User


def make_user(user_id=1, email="jane@acme.com"):
    return User(
        id=user_id,
        name="Jane",
        email=email,
        password_hash="hashed:secret1",
        created_at=datetime.utcnow(),
    )


@pytest.fixture
def mock_user_repo():
    repo = MagicMock()
    repo.get_by_email = AsyncMock(return_value=None)

    async def create(user):
        user.id = 1
        return user

    repo.create = AsyncMock(side_effect=create)
    repo.get_by_id = AsyncMock(return_value=make_user())
    return repo


@pytest.fixture
def mock_password_hasher():
    hasher = MagicMock()
    hasher.hash = MagicMock(side_effect=lambda password: f"hashed:{password}")
    hasher.verify = MagicMock(side_effect=lambda password, hashed: hashed == f"hashed:{password}")
    return hasher


@pytest.fixture
def mock_token_service():
    service = MagicMock()
    service.issue = MagicMock(return_value="signed-token")
    service.verify = MagicMock(return_value=TokenClaims(tenant_id=1, email="jane@acme.com"))
    return service


@pytest.fixture
def register_use_case(mock_uow, mock_user_repo, mock_password_hasher, mock_token_service):
    return RegisterUser(
        uow=mock_uow,
        user_repo=mock_user_repo,
        password_hasher=mock_password_hasher,
        token_service=mock_token_service,
    )


@pytest.fixture
def login_use_case(mock_user_repo, mock_password_hasher, mock_token_service):
    return LoginUser(
        user_repo=mock_user_repo,
        password_hasher=mock_password_hasher,
        token_service=mock_token_service,
    )


@pytest.mark.asyncio
class TestRegisterUser:

    async def test_register_success(self, register_use_case, mock_user_repo, mock_uow, mock_token_service):
        """
        Given: An unused email
        When: Registering
        Then: User is stored with a hashed password and a token is returned
        """
        result = await register_use_case.execute(
            RegisterCommandDTO(name=" Jane ", email=" Jane@Acme.com ", password="secret1")
        )

        assert result.is_ok()
        assert result.value.token == "signed-token"
        assert result.value.user.email == "jane@acme.com"
        assert result.value.user.name == "Jane"

        stored = mock_user_repo.create.call_args.args[0]
        assert stored.password_hash == "hashed:secret1"
        mock_uow.commit.assert_awaited_once()
        mock_token_service.issue.assert_called_once_with(1, "jane@acme.com")

    @pytest.mark.parametrize(
        "name, email, password",
        [("", "a@b.co", "secret1"), ("Jane", "", "secret1"), ("Jane", "a@b.co", "")],
    )
    async def test_missing_fields(self, name, email, password, register_use_case):
        result = await register_use_case.execute(
            RegisterCommandDTO(name=name, email=email, password=password)
        )

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"

    async def test_short_password(self, register_use_case, mock_user_repo):
        result = await register_use_case.execute(
            RegisterCommandDTO(name="Jane", email="a@b.co", password="12345")
        )

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert "at least 6" in result.error.message
        mock_user_repo.create.assert_not_called()

    async def test_invalid_email(self, register_use_case):
        result = await register_use_case.execute(
            RegisterCommandDTO(name="Jane", email="not-an-email", password="secret1")
        )

        assert result.is_err()
        assert result.error.message == "Invalid email format"

    async def test_duplicate_email(self, register_use_case, mock_user_repo, mock_uow):
        mock_user_repo.get_by_email = AsyncMock(return_value=make_user())

        result = await register_use_case.execute(
            RegisterCommandDTO(name="Jane", email="jane@acme.com", password="secret1")
        )

        assert result.is_err()
        assert result.error.code == "CONFLICT"
        mock_user_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_duplicate_email_race(self, register_use_case, mock_user_repo, mock_uow):
        """Unique index violation from a concurrent registration maps to CONFLICT"""
        mock_user_repo.create = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("duplicate key"))
        )

        result = await register_use_case.execute(
            RegisterCommandDTO(name="Jane", email="jane@acme.com", password="secret1")
        )

        assert result.is_err()
        assert result.error.code == "CONFLICT"
        mock_uow.rollback.assert_awaited_once()

    async def test_hashing_runs_off_the_event_loop_thread(self, register_use_case, mock_password_hasher):
        hashing_threads = []

        def record_thread(password):
            hashing_threads.append(threading.get_ident())
            return f"hashed:{password}"

        mock_password_hasher.hash = MagicMock(side_effect=record_thread)

        result = await register_use_case.execute(
            RegisterCommandDTO(name="Jane", email="jane@acme.com", password="secret1")
        )

        assert result.is_ok()
        assert hashing_threads and hashing_threads[0] != threading.get_ident()

@pytest.mark.asyncio
class TestLoginUser:

    async def test_login_success(self, login_use_case, mock_user_repo):
        mock_user_repo.get_by_email = AsyncMock(return_value=make_user())

        result = await login_use_case.execute(
            LoginCommandDTO(email="JANE@acme.com", password="secret1")
        )

        assert result.is_ok()
        assert result.value.user.id == 1
        assert result.value.token == "signed-token"
        mock_user_repo.get_by_email.assert_awaited_once_with("jane@acme.com")

    async def test_wrong_password_and_unknown_email_fail_identically(
        self, login_use_case, mock_user_repo
    ):
        mock_user_repo.get_by_email = AsyncMock(return_value=make_user())
        wrong_password = await login_use_case.execute(
            LoginCommandDTO(email="jane@acme.com", password="nope123")
        )

        mock_user_repo.get_by_email = AsyncMock(return_value=None)
        unknown_email = await login_use_case.execute(
            LoginCommandDTO(email="ghost@acme.com", password="secret1")
        )

        for result in (wrong_password, unknown_email):
            assert result.is_err()
            assert result.error.code == "UNAUTHORIZED"
            assert result.error.message == "Invalid email or password"

    async def test_verification_runs_off_the_event_loop_thread(
        self, login_use_case, mock_user_repo, mock_password_hasher
    ):
        mock_user_repo.get_by_email = AsyncMock(return_value=make_user())
        verifying_threads = []

        def record_thread(password, hashed):
            verifying_threads.append(threading.get_ident())
            return True

        mock_password_hasher.verify = MagicMock(side_effect=record_thread)

        result = await login_use_case.execute(
            LoginCommandDTO(email="jane@acme.com", password="secret1")
        )

        assert result.is_ok()
        assert verifying_threads and verifying_threads[0] != threading.get_ident()

    async def test_missing_credentials(self, login_use_case):
        result = await login_use_case.execute(LoginCommandDTO(email="", password=""))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"


class TestAuthorizeRequest:

    def test_valid_token_resolves_tenant(self, mock_token_service):
        result = AuthorizeRequest(mock_token_service).execute("signed-token")

        assert result.is_ok()
        assert result.value.tenant_id == 1
        assert result.value.email == "jane@acme.com"

    @pytest.mark.parametrize("credential", [None, ""])
    def test_missing_credential(self, credential, mock_token_service):
        result = AuthorizeRequest(mock_token_service).execute(credential)

        assert result.is_err()
        assert result.error.code == "UNAUTHORIZED"
        mock_token_service.verify.assert_not_called()

    def test_invalid_token(self, mock_token_service):
        mock_token_service.verify = MagicMock(side_effect=InvalidTokenError("Signature has expired"))

        result = AuthorizeRequest(mock_token_service).execute("expired-token")

        assert result.is_err()
        assert result.error.code == "UNAUTHORIZED"
        assert result.error.message == "Unauthorized"


@pytest.mark.asyncio
class TestGetCurrentUser:

    async def test_returns_user(self, mock_user_repo):
        result = await GetCurrentUser(mock_user_repo).execute(1)

        assert result.is_ok()
        assert result.value.email == "jane@acme.com"

    async def test_vanished_user(self, mock_user_repo):
        mock_user_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetCurrentUser(mock_user_repo).execute(1)

        assert result.is_err()
        assert result.error.code == "NOT_FOUND"
