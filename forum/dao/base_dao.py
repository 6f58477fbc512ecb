from abc import ABC, abstractmethod
from typing import Any


class BaseDAO(ABC):
    @abstractmethod
    async def find_one_or_none(self, **filter_by) -> Any | None:
        raise NotImplementedError

    @abstractmethod
    async def insert_one(self, obj: Any) -> Any | None:
        raise NotImplementedError

    @abstractmethod
    async def delete_where(self, **filter_by) -> int:
        raise NotImplementedError
