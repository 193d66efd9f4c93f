"""Role entity.

Roles are owned and stored by the role provider. Users hold shared
references to them and only ever read the name.
"""

from datetime import datetime

from pydantic import Field

from booknet.domain.model.common import DomainModel, utcnow
from booknet.domain.value import RoleId, RoleName


class Role(DomainModel):
    """Named role granted to users."""

    id: RoleId
    name: RoleName
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def authority(self) -> str:
        """Authority string granted by this role (the name, verbatim)."""
        return self.name.root
