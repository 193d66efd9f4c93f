"""Authentication domain service."""

import logfire

from booknet.domain.error import BadCredentialsError
from booknet.domain.model import User
from booknet.domain.repository import UserRepository

from .account_status import AccountStatusChecker
from .base import Service


class CredentialVerifier:
    """Compares a submitted secret with the stored credential.

    The hashing scheme belongs to the implementation; the identity model
    treats the stored credential as opaque.
    """

    def verify(self, submitted_secret: str, stored_secret: str) -> bool:
        """Check a submitted secret against the stored one.

        Args:
            submitted_secret: Secret supplied with the login attempt
            stored_secret: Value returned by ``credential_secret()``

        Returns:
            True if the secret matches
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service deciding login attempts.

    Account status is checked before the secret is compared, so a
    rejected account never reveals whether its password was right.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_verifier: CredentialVerifier,
        status_checker: AccountStatusChecker,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            credential_verifier: Verifier owning the credential algorithm
            status_checker: Account status gate
        """
        self.user_repository = user_repository
        self.credential_verifier = credential_verifier
        self.status_checker = status_checker

    async def authenticate(self, login_identifier: str, secret: str) -> User:
        """Authenticate a user by login identifier and secret.

        Args:
            login_identifier: Email the user logs in with
            secret: Submitted secret

        Returns:
            The authenticated user

        Raises:
            BadCredentialsError: If no user has this email or the secret is wrong
            AccountExpiredError: If the account has expired
            AccountDisabledError: If the account is not enabled
            AccountLockedError: If the account is locked
            CredentialsExpiredError: If the credentials have expired
        """
        with logfire.span(
            "auth_service.authenticate", login_identifier=login_identifier
        ):
            user = await self.user_repository.find_by_email(login_identifier)
            if not user:
                logfire.warn(
                    "Login rejected - unknown user", login_identifier=login_identifier
                )
                raise BadCredentialsError()

            self.status_checker.check(user)

            if not self.credential_verifier.verify(secret, user.credential_secret()):
                logfire.warn(
                    "Login rejected - bad credentials",
                    login_identifier=login_identifier,
                    user_id=str(user.id),
                )
                raise BadCredentialsError()

            logfire.info(
                "User authenticated",
                user_id=str(user.id),
                authorities=list(user.authorities()),
            )
            return user
