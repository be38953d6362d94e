"""User repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from gatehouse_identity.domain.shared.execution_context import ExecutionContext
from gatehouse_identity.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for users.

    Every method receives the caller's execution context as-is. Lookups
    raise ``RecordNotFoundError`` when nothing matches; other failures
    surface as whatever the implementation raises.
    """

    @abstractmethod
    async def create(self, ctx: ExecutionContext, user: User) -> User:
        """Persist a new user and return it with its assigned ID."""

    @abstractmethod
    async def update(self, ctx: ExecutionContext, user: User) -> User:
        """Overwrite the stored user that has ``user.id``."""

    @abstractmethod
    async def get_by_id(self, ctx: ExecutionContext, user_id: str) -> User:
        """Find a user by their ID."""

    @abstractmethod
    async def get_by_email(self, ctx: ExecutionContext, email: str) -> User:
        """Find a user by their email address."""

    @abstractmethod
    async def get_by_username(self, ctx: ExecutionContext, username: str) -> User:
        """Find a user by their username."""

    @abstractmethod
    async def list(self, ctx: ExecutionContext) -> list[User]:
        """List all users."""

    @abstractmethod
    async def delete(self, ctx: ExecutionContext, user_id: str) -> None:
        """Delete a user by ID."""
