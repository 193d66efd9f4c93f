"""Unit tests for AuthService."""

import pytest

from booknet.domain.error import (
    AccountDisabledError,
    AccountLockedError,
    BadCredentialsError,
)
from booknet.domain.service import AccountStatusChecker, AuthService
from booknet.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_role, make_user
from tests.di import PlainTextCredentialVerifier


def _service(
    user_repo: InMemoryUserRepository, verifier: PlainTextCredentialVerifier
) -> AuthService:
    return AuthService(user_repo, verifier, AccountStatusChecker())


class TestAuthenticate:
    """Tests for AuthService.authenticate()."""

    @pytest.mark.asyncio
    async def test_active_user_with_right_secret(self):
        """Should return the user for an active account and matching secret."""
        # Arrange
        user_repo = InMemoryUserRepository()
        verifier = PlainTextCredentialVerifier()
        service = _service(user_repo, verifier)
        user = make_user(
            "reader@example.com",
            password="s3cret",
            roles=[make_role("ADMIN"), make_role("USER")],
        )
        await user_repo.save(user)

        # Act
        result = await service.authenticate("reader@example.com", "s3cret")

        # Assert
        assert result.id == user.id
        assert result.authorities() == ("ADMIN", "USER")
        assert verifier.calls == [("s3cret", "s3cret")]

    @pytest.mark.asyncio
    async def test_wrong_secret(self):
        user_repo = InMemoryUserRepository()
        service = _service(user_repo, PlainTextCredentialVerifier())
        await user_repo.save(make_user("reader@example.com", password="s3cret"))

        with pytest.raises(BadCredentialsError):
            await service.authenticate("reader@example.com", "wrong")

    @pytest.mark.asyncio
    async def test_unknown_email_looks_like_wrong_secret(self):
        """Should not reveal whether the email exists."""
        user_repo = InMemoryUserRepository()
        service = _service(user_repo, PlainTextCredentialVerifier())
        await user_repo.save(make_user("reader@example.com", password="s3cret"))

        with pytest.raises(BadCredentialsError) as unknown:
            await service.authenticate("nobody@example.com", "s3cret")
        with pytest.raises(BadCredentialsError) as wrong:
            await service.authenticate("reader@example.com", "wrong")

        assert str(unknown.value) == str(wrong.value)

    @pytest.mark.asyncio
    async def test_status_checked_before_secret(self):
        """A locked account is rejected without comparing the secret."""
        user_repo = InMemoryUserRepository()
        verifier = PlainTextCredentialVerifier()
        service = _service(user_repo, verifier)
        await user_repo.save(
            make_user("reader@example.com", password="s3cret", account_locked=True)
        )

        with pytest.raises(AccountLockedError):
            await service.authenticate("reader@example.com", "wrong")

        assert verifier.calls == []

    @pytest.mark.asyncio
    async def test_disabled_account_rejected_even_with_right_secret(self):
        user_repo = InMemoryUserRepository()
        verifier = PlainTextCredentialVerifier()
        service = _service(user_repo, verifier)
        await user_repo.save(
            make_user("reader@example.com", password="s3cret", enabled=False)
        )

        with pytest.raises(AccountDisabledError):
            await service.authenticate("reader@example.com", "s3cret")

        assert verifier.calls == []
