"""Wiring of the user service from settings and a database session."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse_auth import JWTService, PasswordHashingService
from gatehouse_config import Settings, get_settings
from gatehouse_identity.application.services import UserService
from gatehouse_identity.infrastructure.persistence.sqlalchemy.repositories import (
    RoleRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


def build_user_service(
    session: AsyncSession,
    settings: Settings | None = None,
) -> UserService:
    """
    Assemble a UserService backed by SQLAlchemy, bcrypt and JWT.

    The repositories only flush. Run the service calls inside
    ``session.begin()`` (or commit afterwards) to make a multi-step
    operation such as role assignment a single transaction.
    """
    settings = settings or get_settings()

    service = UserService(
        user_repository=UserRepositorySQLAlchemy(session),
        role_repository=RoleRepositorySQLAlchemy(session),
        password_hasher=PasswordHashingService(rounds=settings.password_hash_rounds),
        tokenizer=JWTService(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            access_token_expire_hours=settings.jwt_access_token_expire_hours,
        ),
    )
    logger.debug("Built user service for %s", settings.app_name)
    return service
