from collections.abc import Sequence

from sqlalchemy import Row, select

from forum.dao.sqlalchemy_dao import SQLAlchemyDAO
from forum.models.comment import Comment
from forum.models.user import User
from forum.repositories.base_repository import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    model = Comment
    dao_class = SQLAlchemyDAO

    async def find_by_post_id(self, post_id: int) -> Sequence[Row]:
        """Comments of one post, oldest first, with the author's username"""
        query = (
            select(Comment.content, User.username, Comment.created_at)
            .join(User, Comment.user_id == User.id)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        result = await self.dao.execute(query)
        return result.all()
