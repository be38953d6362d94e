"""SQLAlchemy implementation for gatehouse_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel / RoleModel: SQLAlchemy models
- UserRepositorySQLAlchemy / RoleRepositorySQLAlchemy: Repository implementations
"""

from gatehouse_identity.infrastructure.persistence.sqlalchemy.base import (
    IdentityBase,
    TimestampMixin,
)
from gatehouse_identity.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserModel,
)
from gatehouse_identity.infrastructure.persistence.sqlalchemy.repositories import (
    RoleRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "RoleModel",
    "RoleRepositorySQLAlchemy",
    "TimestampMixin",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
