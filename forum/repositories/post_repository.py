from collections.abc import Sequence

from sqlalchemy import Row, func, select

from forum.dao.sqlalchemy_dao import SQLAlchemyDAO
from forum.models.dislike import Dislike
from forum.models.like import Like
from forum.models.post import Post
from forum.models.user import User
from forum.repositories.base_repository import BaseRepository


class PostRepository(BaseRepository[Post]):
    model = Post
    dao_class = SQLAlchemyDAO

    async def find_all_with_reaction_counts(self) -> Sequence[Row]:
        """Posts newest first, joined with the author and per-post like/dislike counts"""
        likes = (
            select(func.count(Like.id))
            .where(Like.post_id == Post.id)
            .correlate(Post)
            .scalar_subquery()
        )
        dislikes = (
            select(func.count(Dislike.id))
            .where(Dislike.post_id == Post.id)
            .correlate(Post)
            .scalar_subquery()
        )
        query = (
            select(
                Post.id,
                Post.title,
                Post.content,
                User.username,
                Post.created_at,
                likes.label("likes"),
                dislikes.label("dislikes"),
            )
            .join(User, Post.user_id == User.id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        result = await self.dao.execute(query)
        return result.all()
