"""Capabilities consumed by the authentication layer.

Both are structural: any object with the right methods satisfies them,
so the User aggregate implements them without inheriting from either.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Principal(Protocol):
    """Something with a canonical identity name."""

    def name(self) -> str: ...


@runtime_checkable
class AuthSubject(Protocol):
    """Everything the authentication gate needs to decide a login."""

    def authorities(self) -> tuple[str, ...]: ...

    def credential_secret(self) -> str: ...

    def login_identifier(self) -> str: ...

    def account_not_expired(self) -> bool: ...

    def account_not_locked(self) -> bool: ...

    def credentials_not_expired(self) -> bool: ...

    def is_enabled(self) -> bool: ...
