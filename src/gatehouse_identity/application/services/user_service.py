"""User service for registration, login, roles and password lifecycle."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from gatehouse_identity.domain.role import Role
from gatehouse_identity.domain.shared import ExecutionContext, utc_now
from gatehouse_identity.domain.user import RoleName, User
from gatehouse_identity.exceptions import (
    EmailAlreadyTakenError,
    InvalidCredentialsError,
    PasswordHashingFailedError,
    RoleCreationFailedError,
    RoleListFailedError,
    RoleNotFoundError,
    SamePasswordError,
    TokenGenerationFailedError,
    UserCreationFailedError,
    UserDeletionFailedError,
    UserListFailedError,
    UserNotFoundError,
    UserUpdateFailedError,
)

if TYPE_CHECKING:
    from gatehouse_identity.application.dtos import LoginInput, RegisterInput
    from gatehouse_identity.domain.role import RoleRepository
    from gatehouse_identity.domain.security import PasswordHasher, Tokenizer
    from gatehouse_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for user and role management.

    Stateless facade over the injected repositories and credential services.
    Every operation runs its dependency calls one after another, passes the
    caller's ``ctx`` to each repository call unchanged and stops at the first
    failure. Nothing is retried and multi-step operations are not atomic:
    the caller owns any transaction around them.

    Lookups are not inspected: any exception raised by ``get_by_*`` counts
    as "not found".
    """

    def __init__(
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        password_hasher: PasswordHasher,
        tokenizer: Tokenizer,
    ):
        self._user_repo = user_repository
        self._role_repo = role_repository
        self._hasher = password_hasher
        self._tokenizer = tokenizer

    async def register(self, ctx: ExecutionContext, data: RegisterInput) -> User:
        """Create a user with the default role.

        The default ``user`` role is created on first use. Only the email
        is checked for uniqueness here; usernames are left to the
        repository.

        Raises
        ------
        PasswordHashingFailedError
            If the password cannot be hashed. The hasher also enforces the
            password policy, so a too short or too long password shows up
            here with ``cause`` set to the hasher's rejection (for
            ``PasswordHashingService``, a ``WeakPasswordError``)
        EmailAlreadyTakenError
            If a user with this email exists
        RoleCreationFailedError
            If the default role is missing and cannot be created
        UserCreationFailedError
            If the repository rejects the new user
        """
        try:
            hashed_password = self._hasher.hash(data.password)
        except Exception as e:
            raise PasswordHashingFailedError(e) from e

        try:
            existing = await self._user_repo.get_by_email(ctx, data.email)
        except Exception as e:
            logger.debug("No user found for email %s: %s", data.email, e)
            existing = None
        if existing is not None:
            raise EmailAlreadyTakenError

        role = await self._ensure_default_role(ctx)

        user = User(
            email=data.email,
            username=data.username,
            hashed_password=hashed_password,
            last_seen=utc_now(),
            role_id=role.id,
        )
        try:
            created = await self._user_repo.create(ctx, user)
        except Exception as e:
            raise UserCreationFailedError(e) from e

        logger.info("User registered: %s (id: %s)", created.email, created.id)
        return created

    async def _ensure_default_role(self, ctx: ExecutionContext) -> Role:
        try:
            return await self._role_repo.get_by_name(ctx, RoleName.USER.value)
        except Exception as e:
            logger.debug("Default role lookup failed, creating it: %s", e)

        try:
            role = await self._role_repo.create(ctx, Role(name=RoleName.USER.value))
        except Exception as e:
            raise RoleCreationFailedError(e) from e

        logger.info("Created default role %r (id: %s)", role.name, role.id)
        return role

    async def login(self, ctx: ExecutionContext, data: LoginInput) -> str:
        """Check credentials and return a bearer token.

        Raises
        ------
        UserNotFoundError
            If no user has this email
        InvalidCredentialsError
            If the password does not match
        TokenGenerationFailedError
            If the tokenizer fails
        """
        try:
            user = await self._user_repo.get_by_email(ctx, data.email)
        except Exception:
            raise UserNotFoundError from None

        if not self._hasher.verify(user.hashed_password, data.password):
            logger.warning("Rejected login for user: %s", user.id)
            raise InvalidCredentialsError

        try:
            token = self._tokenizer.generate_token(user.email, user.id)
        except Exception as e:
            raise TokenGenerationFailedError(e) from e

        logger.info("User logged in: %s", user.id)
        return token

    async def get_user_by_id(self, ctx: ExecutionContext, user_id: str) -> User:
        try:
            return await self._user_repo.get_by_id(ctx, user_id)
        except Exception:
            raise UserNotFoundError from None

    async def update_user(self, ctx: ExecutionContext, user: User) -> User:
        try:
            return await self._user_repo.update(ctx, user)
        except Exception as e:
            raise UserUpdateFailedError(e) from e

    async def list_users(self, ctx: ExecutionContext) -> list[User]:
        try:
            return await self._user_repo.list(ctx)
        except Exception as e:
            raise UserListFailedError(e) from e

    async def delete_user(self, ctx: ExecutionContext, user_id: str) -> None:
        try:
            await self._user_repo.delete(ctx, user_id)
        except Exception as e:
            raise UserDeletionFailedError(e) from e
        logger.info("Deleted user: %s", user_id)

    async def get_role_by_id(self, ctx: ExecutionContext, role_id: str) -> Role:
        try:
            return await self._role_repo.get_by_id(ctx, role_id)
        except Exception:
            raise RoleNotFoundError from None

    async def create_role(self, ctx: ExecutionContext, role: Role) -> Role:
        try:
            return await self._role_repo.create(ctx, role)
        except Exception as e:
            raise RoleCreationFailedError(e) from e

    async def list_roles(self, ctx: ExecutionContext) -> list[Role]:
        try:
            return await self._role_repo.list(ctx)
        except Exception as e:
            raise RoleListFailedError(e) from e

    async def assign_role_to_user(
        self,
        ctx: ExecutionContext,
        user_id: str,
        role_id: str,
    ) -> User:
        """Point a user's ``role_id`` at an existing role.

        Raises
        ------
        UserNotFoundError
            If the user lookup fails
        RoleNotFoundError
            If the role lookup fails
        UserUpdateFailedError
            If persisting the change fails
        """
        user = await self.get_user_by_id(ctx, user_id)
        role = await self.get_role_by_id(ctx, role_id)

        updated = await self.update_user(ctx, replace(user, role_id=role.id))
        logger.info("Assigned role %r to user %s", role.name, updated.id)
        return updated

    async def is_admin(self, user: User) -> bool:
        """Return whether the user's role is the admin role.

        Takes no execution context: the role lookup runs under a fresh
        background context, so callers cannot cancel or bound it. Any
        lookup failure (including a dangling ``role_id``) yields False.
        """
        if not user.role_id:
            return False

        try:
            role = await self._role_repo.get_by_id(
                ExecutionContext.background(),
                user.role_id,
            )
        except Exception as e:
            logger.debug("Role lookup for admin check failed: %s", e)
            return False

        return role.name == RoleName.ADMIN

    async def update_last_seen(self, ctx: ExecutionContext, user_id: str) -> None:
        user = await self.get_user_by_id(ctx, user_id)
        await self.update_user(ctx, replace(user, last_seen=utc_now()))

    async def change_password(
        self,
        ctx: ExecutionContext,
        user_id: str,
        old_password: str,
        new_password: str,
    ) -> User:
        """Replace a user's password after checking the current one.

        The plaintext equality check runs before the old password is
        verified, so identical inputs are rejected even when they are not
        the current password.

        Raises
        ------
        UserNotFoundError
            If the user lookup fails
        SamePasswordError
            If ``old_password == new_password``
        InvalidCredentialsError
            If ``old_password`` does not match the stored hash
        PasswordHashingFailedError
            If the new password cannot be hashed or the hasher rejects it
            under its password policy (see ``register``)
        UserUpdateFailedError
            If persisting the new hash fails
        """
        user = await self.get_user_by_id(ctx, user_id)

        if old_password == new_password:
            raise SamePasswordError

        if not self._hasher.verify(user.hashed_password, old_password):
            logger.warning("Rejected password change for user: %s", user_id)
            raise InvalidCredentialsError

        updated = await self._store_new_password(ctx, user, new_password)
        logger.info("Password changed for user: %s", user_id)
        return updated

    async def reset_password(
        self,
        ctx: ExecutionContext,
        user_id: str,
        new_password: str,
    ) -> User:
        """Set a new password without checking the old one (admin flows).

        Raises
        ------
        UserNotFoundError
            If the user lookup fails
        PasswordHashingFailedError
            If the new password cannot be hashed or the hasher rejects it
            under its password policy (see ``register``)
        UserUpdateFailedError
            If persisting the new hash fails
        """
        user = await self.get_user_by_id(ctx, user_id)

        updated = await self._store_new_password(ctx, user, new_password)
        logger.info("Password reset for user: %s", user_id)
        return updated

    async def _store_new_password(
        self,
        ctx: ExecutionContext,
        user: User,
        new_password: str,
    ) -> User:
        try:
            hashed_password = self._hasher.hash(new_password)
        except Exception as e:
            raise PasswordHashingFailedError(e) from e

        return await self.update_user(
            ctx,
            replace(user, hashed_password=hashed_password),
        )
