"""Domain model entities for the book network identity subsystem."""

from booknet.domain.model.principal import AuthSubject, Principal
from booknet.domain.model.role import Role
from booknet.domain.model.user import User

__all__ = [
    "User",
    "Role",
    "AuthSubject",
    "Principal",
]
