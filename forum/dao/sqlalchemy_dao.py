from typing import Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.dao.base_dao import BaseDAO
from forum.logger import logger
from forum.utils.exceptions import IOFailure

T = TypeVar("T")


class SQLAlchemyDAO(BaseDAO, Generic[T]):
    def __init__(self, model: type[T], db: AsyncSession):
        self.model = model
        self.db = db

    async def execute(self, query):
        try:
            return await self.db.execute(query)
        except OperationalError as e:
            logger.error(f"Database unavailable while querying {self.model.__name__}: {e}")
            raise IOFailure("Database unavailable") from e

    async def find_one_or_none(self, **filter_by) -> T | None:
        query = select(self.model).filter_by(**filter_by)
        result = await self.execute(query)
        return result.scalar_one_or_none()

    async def insert_one(self, obj: T) -> T | None:
        try:
            self.db.add(obj)
            await self.db.commit()
            await self.db.refresh(obj)
            logger.info(f"Inserted new {self.model.__name__} with ID: {obj.id}")
            return obj
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(f"IntegrityError while inserting {self.model.__name__}: {e}")
            return None
        except OperationalError as e:
            await self.db.rollback()
            logger.error(f"Database unavailable while inserting {self.model.__name__}: {e}")
            raise IOFailure("Database unavailable") from e

    async def delete_where(self, **filter_by) -> int:
        """Stage a delete without committing; the caller owns the transaction."""
        query = delete(self.model).filter_by(**filter_by)
        result = await self.execute(query)
        if result.rowcount:
            logger.info(f"Deleted {result.rowcount} {self.model.__name__} row(s) for {filter_by}")
        return result.rowcount
