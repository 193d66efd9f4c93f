"""Domain layer errors."""

from booknet.domain.value import StatusCheck


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateEmailError(BusinessRuleViolationError):
    """Raised when an email is already used by another user."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class AuthenticationError(DomainError):
    """Base error for a rejected login attempt.

    Attributes:
        reason: The status check that caused the rejection, or None
            when the credentials themselves were rejected
        failed_checks: Every status check that failed, in check order
    """

    reason: StatusCheck | None = None
    default_message = "Authentication failed"

    def __init__(
        self,
        message: str | None = None,
        failed_checks: tuple[StatusCheck, ...] = (),
    ):
        self.failed_checks = failed_checks
        super().__init__(message or self.default_message)


class AccountExpiredError(AuthenticationError):
    """Raised when the account has expired."""

    reason = StatusCheck.ACCOUNT_EXPIRED
    default_message = "User account has expired"


class AccountDisabledError(AuthenticationError):
    """Raised when the account is not enabled."""

    reason = StatusCheck.DISABLED
    default_message = "User account is disabled"


class AccountLockedError(AuthenticationError):
    """Raised when the account is locked."""

    reason = StatusCheck.LOCKED
    default_message = "User account is locked"


class CredentialsExpiredError(AuthenticationError):
    """Raised when the user's credentials have expired."""

    reason = StatusCheck.CREDENTIALS_EXPIRED
    default_message = "User credentials have expired"


class BadCredentialsError(AuthenticationError):
    """Raised for an unknown login identifier or a wrong secret.

    Both cases share one message so callers cannot tell which it was.
    """

    default_message = "Bad credentials"
