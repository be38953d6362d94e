"""Role domain: named roles users can be assigned to."""

from gatehouse_identity.domain.role.aggregates import Role
from gatehouse_identity.domain.role.repositories import RoleRepository

__all__ = [
    "Role",
    "RoleRepository",
]
