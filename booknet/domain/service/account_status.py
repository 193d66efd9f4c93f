"""Account status checks run by the authentication gate."""

from collections.abc import Callable

import logfire

from booknet.domain.error import (
    AccountDisabledError,
    AccountExpiredError,
    AccountLockedError,
    AuthenticationError,
    CredentialsExpiredError,
)
from booknet.domain.model.principal import AuthSubject
from booknet.domain.value import StatusCheck

from .base import Service

# Order in which a failing check becomes the reported error
STATUS_CHECK_ORDER: tuple[StatusCheck, ...] = (
    StatusCheck.ACCOUNT_EXPIRED,
    StatusCheck.DISABLED,
    StatusCheck.LOCKED,
    StatusCheck.CREDENTIALS_EXPIRED,
)

_PREDICATES: dict[StatusCheck, Callable[[AuthSubject], bool]] = {
    StatusCheck.ACCOUNT_EXPIRED: lambda subject: subject.account_not_expired(),
    StatusCheck.DISABLED: lambda subject: subject.is_enabled(),
    StatusCheck.LOCKED: lambda subject: subject.account_not_locked(),
    StatusCheck.CREDENTIALS_EXPIRED: lambda subject: subject.credentials_not_expired(),
}

_ERRORS: dict[StatusCheck, type[AuthenticationError]] = {
    StatusCheck.ACCOUNT_EXPIRED: AccountExpiredError,
    StatusCheck.DISABLED: AccountDisabledError,
    StatusCheck.LOCKED: AccountLockedError,
    StatusCheck.CREDENTIALS_EXPIRED: CredentialsExpiredError,
}


class AccountStatusChecker(Service):
    """Turns the four account-status predicates into a login decision.

    All four predicates are evaluated on every check. When any fail, the
    error for the first failure in ``STATUS_CHECK_ORDER`` is raised and
    carries the full list of failures, so a disabled and locked account
    is always reported as disabled.
    """

    def failed_checks(self, subject: AuthSubject) -> tuple[StatusCheck, ...]:
        """List the checks the subject fails, in check order.

        Args:
            subject: Account being authenticated

        Returns:
            Failed checks, empty if the account may log in
        """
        return tuple(
            check for check in STATUS_CHECK_ORDER if not _PREDICATES[check](subject)
        )

    def is_usable(self, subject: AuthSubject) -> bool:
        """Whether the subject passes every status check."""
        return not self.failed_checks(subject)

    def check(self, subject: AuthSubject) -> None:
        """Reject the subject if any status check fails.

        Args:
            subject: Account being authenticated

        Raises:
            AccountExpiredError: If the account has expired
            AccountDisabledError: If the account is not enabled
            AccountLockedError: If the account is locked
            CredentialsExpiredError: If the credentials have expired
        """
        failed = self.failed_checks(subject)
        if not failed:
            return

        logfire.warn(
            "Account status check failed",
            login_identifier=subject.login_identifier(),
            failed_checks=[check.value for check in failed],
        )
        raise _ERRORS[failed[0]](failed_checks=failed)
