"""SQLAlchemy implementation of RoleRepository."""

from __future__ import annotations

import logging

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse_identity.domain.role import Role, RoleRepository
from gatehouse_identity.domain.shared import ExecutionContext, RecordNotFoundError
from gatehouse_identity.infrastructure.persistence.sqlalchemy.models import RoleModel
from gatehouse_identity.infrastructure.persistence.sqlalchemy.repositories._utils import (
    new_id,
)

logger = logging.getLogger(__name__)


class RoleRepositorySQLAlchemy(RoleRepository):
    """SQLAlchemy implementation of the RoleRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, ctx: ExecutionContext, role: Role) -> Role:
        model = RoleModel(id=role.id or new_id(), name=role.name)

        self._session.add(model)
        async with ctx.timeout():
            await self._session.flush()
        logger.info("Created role: %s (name: %s)", model.id, model.name)

        return self._map_to_domain(model)

    async def update(self, ctx: ExecutionContext, role: Role) -> Role:
        model = await self._find_model(ctx, RoleModel.id == role.id)
        if model is None:
            raise RecordNotFoundError("Role", role.id)

        model.name = role.name
        async with ctx.timeout():
            await self._session.flush()
        logger.debug("Updated role: %s", role.id)

        return self._map_to_domain(model)

    async def delete(self, ctx: ExecutionContext, role_id: str) -> None:
        model = await self._find_model(ctx, RoleModel.id == role_id)

        if model:
            async with ctx.timeout():
                await self._session.delete(model)
                await self._session.flush()
            logger.info("Deleted role: %s", role_id)

    async def get_by_id(self, ctx: ExecutionContext, role_id: str) -> Role:
        return await self._get(ctx, RoleModel.id == role_id, role_id)

    async def get_by_name(self, ctx: ExecutionContext, name: str) -> Role:
        return await self._get(ctx, RoleModel.name == name, name)

    async def list(self, ctx: ExecutionContext) -> list[Role]:
        stmt = select(RoleModel).order_by(RoleModel.name)
        async with ctx.timeout():
            result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def _get(
        self,
        ctx: ExecutionContext,
        condition: ColumnElement[bool],
        key: str,
    ) -> Role:
        model = await self._find_model(ctx, condition)
        if model is None:
            raise RecordNotFoundError("Role", key)
        return self._map_to_domain(model)

    async def _find_model(
        self,
        ctx: ExecutionContext,
        condition: ColumnElement[bool],
    ) -> RoleModel | None:
        stmt = select(RoleModel).where(condition)
        async with ctx.timeout():
            result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: RoleModel) -> Role:
        return Role(id=model.id, name=model.name)
