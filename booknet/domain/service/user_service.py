"""User domain service."""

import logfire
import pydantic

from booknet.domain.error import DuplicateEmailError, NotFoundError, ValidationError
from booknet.domain.model import Role, User
from booknet.domain.repository import (
    BookRepository,
    RoleRepository,
    TransactionHistoryRepository,
    UserRepository,
)
from booknet.domain.value import BookId, RoleName, TransactionHistoryId, UserId


class UserService:
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        book_repository: BookRepository,
        history_repository: TransactionHistoryRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            role_repository: Role repository
            book_repository: Lookup of books owned by users
            history_repository: Lookup of users' transaction histories
        """
        self.user_repository = user_repository
        self.role_repository = role_repository
        self.book_repository = book_repository
        self.history_repository = history_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id))
            return user

    async def ensure_email_available(
        self, email: str, user_id: UserId | None = None
    ) -> None:
        """Fail if another user already uses the email.

        Args:
            email: Email to check
            user_id: User allowed to hold the email already (for updates)

        Raises:
            DuplicateEmailError: If the email belongs to someone else
        """
        if user_id is None:
            taken = await self.user_repository.exists_by_email(email)
        else:
            existing = await self.user_repository.find_by_email(email)
            taken = existing is not None and existing.id != user_id
        if taken:
            logfire.warn("Email already registered", email=email)
            raise DuplicateEmailError(email)

    async def resolve_roles(self, role_names: list[str]) -> tuple[Role, ...]:
        """Resolve role names to roles, keeping order and dropping repeats.

        Args:
            role_names: Role names in the order they should be granted

        Returns:
            Resolved roles

        Raises:
            ValidationError: If a role name is blank
            NotFoundError: If a role name is unknown
        """
        roles: list[Role] = []
        for name in dict.fromkeys(role_names):
            try:
                role_name = RoleName(name)
            except pydantic.ValidationError as e:
                logfire.warn("Invalid role name", role_name=name)
                raise ValidationError(f"Invalid role name: {name!r}") from e
            role = await self.role_repository.find_by_name(role_name)
            if not role:
                logfire.warn("Role not found", role_name=name)
                raise NotFoundError("Role", name)
            roles.append(role)
        return tuple(roles)

    async def assign_roles(self, user_id: UserId, role_names: list[str]) -> User:
        """Replace a user's roles.

        Args:
            user_id: User ID
            role_names: Role names in grant order

        Returns:
            Saved user

        Raises:
            NotFoundError: If the user or any role is not found
            ValidationError: If a role name is blank
        """
        with logfire.span(
            "user_service.assign_roles", user_id=str(user_id), role_names=role_names
        ):
            user = await self.get_by_id(user_id)
            roles = await self.resolve_roles(role_names)
            saved = await self.save(user.model_copy(update={"roles": roles}))
            logfire.info(
                "Roles assigned",
                user_id=str(user_id),
                authorities=list(saved.authorities()),
            )
            return saved

    async def change_status(
        self,
        user_id: UserId,
        enabled: bool | None = None,
        account_locked: bool | None = None,
    ) -> User:
        """Change the account flags in one save.

        Each flag left as None keeps its current value.

        Args:
            user_id: User ID
            enabled: New value of the enabled flag
            account_locked: New value of the locked flag

        Returns:
            Saved user, or the unchanged user when no flag was given

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.change_status",
            user_id=str(user_id),
            enabled=enabled,
            account_locked=account_locked,
        ):
            user = await self.get_by_id(user_id)
            updates: dict[str, bool] = {}
            if enabled is not None:
                updates["enabled"] = enabled
            if account_locked is not None:
                updates["account_locked"] = account_locked
            if not updates:
                return user

            saved = await self.save(user.model_copy(update=updates))
            logfire.info(
                "Account status changed",
                user_id=str(user_id),
                account_status=saved.account_status.value,
            )
            return saved

    async def set_enabled(self, user_id: UserId, enabled: bool) -> User:
        """Enable or disable an account."""
        return await self.change_status(user_id, enabled=enabled)

    async def set_account_locked(self, user_id: UserId, account_locked: bool) -> User:
        """Lock or unlock an account."""
        return await self.change_status(user_id, account_locked=account_locked)

    async def activate(self, user_id: UserId) -> User:
        """Enable an account, e.g. after its email was verified."""
        return await self.set_enabled(user_id, True)

    async def disable(self, user_id: UserId) -> User:
        """Disable an account."""
        return await self.set_enabled(user_id, False)

    async def lock(self, user_id: UserId) -> User:
        """Lock an account."""
        return await self.set_account_locked(user_id, True)

    async def unlock(self, user_id: UserId) -> User:
        """Unlock an account."""
        return await self.set_account_locked(user_id, False)

    async def get_owned_book_ids(self, user_id: UserId) -> list[BookId]:
        """List IDs of books the user owns."""
        with logfire.span("user_service.get_owned_book_ids", user_id=str(user_id)):
            return await self.book_repository.find_ids_by_owner(user_id)

    async def get_history_ids(self, user_id: UserId) -> list[TransactionHistoryId]:
        """List IDs of the user's transaction history entries."""
        with logfire.span("user_service.get_history_ids", user_id=str(user_id)):
            return await self.history_repository.find_ids_by_user(user_id)

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            DuplicateEmailError: If another user already has the email
        """
        with logfire.span("user_service.save", user_id=str(user.id)):
            saved = await self.user_repository.save(user)
            logfire.info(
                "User saved",
                user_id=str(saved.id),
                account_status=saved.account_status.value,
            )
            return saved
