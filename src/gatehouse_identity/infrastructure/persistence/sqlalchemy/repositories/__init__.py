"""SQLAlchemy repository implementations for identity persistence."""

from gatehouse_identity.infrastructure.persistence.sqlalchemy.repositories.role_repository import (  # noqa: E501
    RoleRepositorySQLAlchemy,
)
from gatehouse_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "RoleRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
