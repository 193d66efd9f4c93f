"""Role repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from booknet.domain.model.role import Role
from booknet.domain.value import RoleName


class RoleRepository(ABC):
    """Read access to the roles supplied by the role provider."""

    @abstractmethod
    async def find_by_name(self, name: RoleName) -> Optional[Role]:
        """Find a role by its name.

        Args:
            name: Role name

        Returns:
            The role if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Role]:
        """List every known role."""
        pass
