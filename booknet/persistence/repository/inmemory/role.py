"""In-memory role repository."""

from typing import Optional

from booknet.domain.model.role import Role
from booknet.domain.repository.role import RoleRepository
from booknet.domain.value import RoleId, RoleName


class InMemoryRoleRepository(RoleRepository):
    """In-memory implementation of RoleRepository."""

    def __init__(self, roles: list[Role] | None = None) -> None:
        self._roles: dict[RoleId, Role] = {role.id: role for role in roles or []}

    async def find_by_name(self, name: RoleName) -> Optional[Role]:
        """Find a role by its name."""
        for role in self._roles.values():
            if role.name == name:
                return role
        return None

    async def find_all(self) -> list[Role]:
        """List every known role."""
        return list(self._roles.values())
