from forum.dao.sqlalchemy_dao import SQLAlchemyDAO
from forum.models.user import User
from forum.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User
    dao_class = SQLAlchemyDAO

    async def find_by_email(self, email: str) -> User | None:
        return await self.dao.find_one_or_none(email=email)
