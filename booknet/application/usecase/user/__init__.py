"""User use cases."""

from .assign_roles import AssignRolesUseCase
from .change_account_status import ChangeAccountStatusUseCase
from .get_user_profile import GetUserProfileUseCase
from .register_user import RegisterUserUseCase
from .update_user_profile import UpdateUserProfileUseCase

__all__ = [
    "AssignRolesUseCase",
    "ChangeAccountStatusUseCase",
    "GetUserProfileUseCase",
    "RegisterUserUseCase",
    "UpdateUserProfileUseCase",
]
