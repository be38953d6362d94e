"""Role repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from gatehouse_identity.domain.role.aggregates.role import Role
from gatehouse_identity.domain.shared.execution_context import ExecutionContext


class RoleRepository(ABC):
    """Repository interface for roles.

    Same conventions as ``UserRepository``: the context is passed through
    unchanged and lookups raise ``RecordNotFoundError`` on absence.
    """

    @abstractmethod
    async def create(self, ctx: ExecutionContext, role: Role) -> Role:
        """Persist a new role and return it with its assigned ID."""

    @abstractmethod
    async def update(self, ctx: ExecutionContext, role: Role) -> Role:
        """Overwrite the stored role that has ``role.id``."""

    @abstractmethod
    async def delete(self, ctx: ExecutionContext, role_id: str) -> None:
        """Delete a role by ID."""

    @abstractmethod
    async def get_by_id(self, ctx: ExecutionContext, role_id: str) -> Role:
        """Find a role by its ID."""

    @abstractmethod
    async def get_by_name(self, ctx: ExecutionContext, name: str) -> Role:
        """Find a role by its unique name."""

    @abstractmethod
    async def list(self, ctx: ExecutionContext) -> list[Role]:
        """List all roles."""
