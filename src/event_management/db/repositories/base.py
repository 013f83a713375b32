"""
event_management.db.repositories.base

Generic repository shared by every entity collection.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from event_management.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, entity: ModelT) -> ModelT:
        # Flush so the generated key is populated and constraint errors raise here.
        self._session.add(entity)
        await self._session.flush()
        return entity

    async def get(self, pk: Any) -> ModelT | None:
        return await self._session.get(self.model, pk)

    async def list_all(self, *, limit: int = 100, offset: int = 0) -> list[ModelT]:
        pk_col = self.model.__mapper__.primary_key[0]
        stmt = select(self.model).order_by(pk_col).limit(limit).offset(offset)
        return list((await self._session.execute(stmt)).scalars().all())

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return (await self._session.execute(stmt)).scalar_one()

    async def delete(self, pk: Any) -> bool:
        """
        Delete by key. Cascade and set-null dependents are deleted or nulled in the
        same flush, so the session keeps no stale copies. A restricted delete
        raises `IntegrityError` from the flush.
        """

        entity = await self._session.get(self.model, pk)
        if entity is None:
            return False
        await self._session.delete(entity)
        await self._session.flush()
        return True
