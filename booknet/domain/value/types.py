"""Domain value objects for the identity subsystem.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from booknet.domain.value.common import RootValueObject


class RoleName(RootValueObject[str]):
    """Name of a role, used verbatim as the granted authority.

    Examples: 'USER', 'ADMIN'
    """

    @field_validator("root")
    @classmethod
    def validate_role_name(cls, v: str) -> str:
        """Validate role name is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Role name must not be blank")
        if len(v) > 100:
            raise ValueError("Role name must be at most 100 characters")
        return v


class AccountStatus(str, Enum):
    """Observable account status collapsed from the enabled/locked flags.

    Only ACTIVE passes the authentication gate.
    """

    ACTIVE = "active"
    LOCKED = "locked"
    DISABLED = "disabled"
    DISABLED_AND_LOCKED = "disabled_and_locked"

    @classmethod
    def from_flags(cls, enabled: bool, account_locked: bool) -> "AccountStatus":
        """Derive the status from the two independent flags."""
        if enabled:
            return cls.LOCKED if account_locked else cls.ACTIVE
        return cls.DISABLED_AND_LOCKED if account_locked else cls.DISABLED


class StatusCheck(str, Enum):
    """One named account-status predicate checked by the authentication gate."""

    ACCOUNT_EXPIRED = "account_expired"
    DISABLED = "disabled"
    LOCKED = "locked"
    CREDENTIALS_EXPIRED = "credentials_expired"
