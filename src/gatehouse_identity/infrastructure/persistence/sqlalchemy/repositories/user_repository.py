"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

import logging

from sqlalchemy import ColumnElement, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse_identity.domain.shared import ExecutionContext, RecordNotFoundError
from gatehouse_identity.domain.user import User, UserRepository
from gatehouse_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from gatehouse_identity.infrastructure.persistence.sqlalchemy.repositories._utils import (
    new_id,
    translate_user_integrity_error,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Only flushes; committing is up to whoever owns the session.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, ctx: ExecutionContext, user: User) -> User:
        model = self._map_to_model(user)
        if not model.id:
            model.id = new_id()

        self._session.add(model)
        await self._flush(ctx)
        logger.info("Created user: %s (email: %s)", model.id, model.email)

        return self._map_to_domain(model)

    async def update(self, ctx: ExecutionContext, user: User) -> User:
        model = await self._find_model(ctx, UserModel.id == user.id)
        if model is None:
            raise RecordNotFoundError("User", user.id)

        self._update_model(model, user)
        await self._flush(ctx)
        logger.debug("Updated user: %s", user.id)

        return self._map_to_domain(model)

    async def get_by_id(self, ctx: ExecutionContext, user_id: str) -> User:
        return await self._get(ctx, UserModel.id == user_id, user_id)

    async def get_by_email(self, ctx: ExecutionContext, email: str) -> User:
        return await self._get(ctx, UserModel.email == email, email)

    async def get_by_username(self, ctx: ExecutionContext, username: str) -> User:
        return await self._get(ctx, UserModel.username == username, username)

    async def list(self, ctx: ExecutionContext) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at)
        async with ctx.timeout():
            result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def delete(self, ctx: ExecutionContext, user_id: str) -> None:
        model = await self._find_model(ctx, UserModel.id == user_id)

        if model:
            async with ctx.timeout():
                await self._session.delete(model)
                await self._session.flush()
            logger.info("Deleted user: %s", user_id)

    async def _get(
        self,
        ctx: ExecutionContext,
        condition: ColumnElement[bool],
        key: str,
    ) -> User:
        model = await self._find_model(ctx, condition)
        if model is None:
            raise RecordNotFoundError("User", key)
        return self._map_to_domain(model)

    async def _find_model(
        self,
        ctx: ExecutionContext,
        condition: ColumnElement[bool],
    ) -> UserModel | None:
        stmt = select(UserModel).where(condition)
        async with ctx.timeout():
            result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _flush(self, ctx: ExecutionContext) -> None:
        try:
            async with ctx.timeout():
                await self._session.flush()
        except IntegrityError as e:
            translated = translate_user_integrity_error(e)
            if translated is e:
                raise
            raise translated from e

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            username=model.username,
            hashed_password=model.hashed_password,
            role_id=model.role_id or "",
            last_seen=model.last_seen,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            username=user.username,
            hashed_password=user.hashed_password,
            role_id=user.role_id or None,
            last_seen=user.last_seen,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.username = user.username
        model.hashed_password = user.hashed_password
        model.role_id = user.role_id or None
        model.last_seen = user.last_seen
