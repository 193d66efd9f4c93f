"""User aggregate root.

A registered member of the book network: profile data, an opaque
credential, the roles granted to them and two account-status flags.
The aggregate performs no I/O and never raises from its queries; the
authentication gate turns its predicates into login decisions.
"""

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import Field, field_validator, model_validator

from booknet.domain.model.common import DomainModel, utcnow
from booknet.domain.model.role import Role
from booknet.domain.value import AccountStatus, UserId


class User(DomainModel):
    """User aggregate root.

    Satisfies both the ``AuthSubject`` and ``Principal`` capabilities.
    Owned books and transaction histories are not embedded; they are
    looked up by user ID through their own repositories.
    """

    id: UserId
    firstname: str
    lastname: str
    date_of_birth: Optional[date] = None
    email: str  # Login identifier, unique across users
    password: str = Field(repr=False)  # Already hashed, opaque here
    account_locked: bool = False
    enabled: bool = False
    roles: tuple[Role, ...] = ()
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)  # Stamped on save

    @field_validator("roles")
    @classmethod
    def validate_unique_role_names(cls, v: tuple[Role, ...]) -> tuple[Role, ...]:
        """Reject a role set that names the same role twice."""
        names = [role.name.root for role in v]
        if len(names) != len(set(names)):
            raise ValueError("Roles must have unique names")
        return v

    @field_validator("created_at", "updated_at")
    @classmethod
    def validate_timezone(cls, v: datetime) -> datetime:
        """Read naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @model_validator(mode="after")
    def validate_timestamps(self) -> "User":
        """Ensure the record was not modified before it was created."""
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self

    @property
    def full_name(self) -> str:
        """First and last name joined by a single space, untrimmed."""
        return self.firstname + " " + self.lastname

    @property
    def account_status(self) -> AccountStatus:
        """Status derived from the enabled and locked flags."""
        return AccountStatus.from_flags(self.enabled, self.account_locked)

    def authorities(self) -> tuple[str, ...]:
        """Authorities granted by the user's roles, in role order."""
        return tuple(role.authority() for role in self.roles)

    def credential_secret(self) -> str:
        """Stored credential, returned exactly as persisted."""
        return self.password

    def login_identifier(self) -> str:
        """Canonical identity key used by the authentication gate."""
        return self.email

    def name(self) -> str:
        """Principal name; the same value as the login identifier."""
        return self.email

    def account_not_expired(self) -> bool:
        # Account expiry is not tracked yet
        return True

    def account_not_locked(self) -> bool:
        return not self.account_locked

    def credentials_not_expired(self) -> bool:
        # Credential expiry is not tracked yet
        return True

    def is_enabled(self) -> bool:
        return self.enabled
