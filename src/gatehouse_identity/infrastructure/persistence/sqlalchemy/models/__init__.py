"""SQLAlchemy models for identity persistence."""

from gatehouse_identity.infrastructure.persistence.sqlalchemy.models.role_model import (
    RoleModel,
)
from gatehouse_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "RoleModel",
    "UserModel",
]
