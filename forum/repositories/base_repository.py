from abc import ABC
from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from forum.dao.base_dao import BaseDAO

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    model: type[T] = None
    dao_class = BaseDAO

    def __init__(self, db: AsyncSession):
        self.dao = self.dao_class(self.model, db)

    async def insert_one(self, obj: Any) -> T | None:
        return await self.dao.insert_one(obj)
