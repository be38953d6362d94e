"""SQLAlchemy model for roles."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from gatehouse_identity.infrastructure.persistence.sqlalchemy.base import (
    IdentityBase,
    TimestampMixin,
)


class RoleModel(IdentityBase, TimestampMixin):
    """SQLAlchemy model for persisting roles."""

    __tablename__ = "roles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<RoleModel(id={self.id}, name={self.name})>"
