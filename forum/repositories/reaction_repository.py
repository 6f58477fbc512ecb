from typing import Optional

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.dao.sqlalchemy_dao import SQLAlchemyDAO
from forum.logger import logger
from forum.models.dislike import Dislike
from forum.models.like import Like
from forum.utils.exceptions import ConstraintViolation, IOFailure


class ReactionRepository:
    """Likes and dislikes share one session so a toggle commits once."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.likes = SQLAlchemyDAO(Like, db)
        self.dislikes = SQLAlchemyDAO(Dislike, db)

    async def find_like(self, user_id: int, post_id: int) -> Optional[Like]:
        return await self.likes.find_one_or_none(user_id=user_id, post_id=post_id)

    async def find_dislike(self, user_id: int, post_id: int) -> Optional[Dislike]:
        return await self.dislikes.find_one_or_none(user_id=user_id, post_id=post_id)

    async def replace_dislike_with_like(self, user_id: int, post_id: int) -> Like:
        return await self._replace(Like(user_id=user_id, post_id=post_id), self.likes, self.dislikes)

    async def replace_like_with_dislike(self, user_id: int, post_id: int) -> Dislike:
        return await self._replace(Dislike(user_id=user_id, post_id=post_id), self.dislikes, self.likes)

    async def _replace(self, reaction, own: SQLAlchemyDAO, opposite: SQLAlchemyDAO):
        name = type(reaction).__name__
        user_id, post_id = reaction.user_id, reaction.post_id
        try:
            self.db.add(reaction)
            await self.db.flush()
            await opposite.delete_where(user_id=user_id, post_id=post_id)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            # A concurrent request may have stored the same pair first.
            existing = await own.find_one_or_none(user_id=user_id, post_id=post_id)
            if existing is None:
                logger.error(f"IntegrityError while inserting {name}: {e}")
                raise ConstraintViolation(f"Unable to store {name.lower()} for post {post_id}") from e
            logger.info(f"{name} for user {user_id} on post {post_id} already exists")
            await self._delete_opposite(opposite, user_id, post_id)
            return existing
        except OperationalError as e:
            await self.db.rollback()
            logger.error(f"Database unavailable while inserting {name}: {e}")
            raise IOFailure("Database unavailable") from e
        except Exception:
            await self.db.rollback()
            raise
        logger.info(f"Inserted new {name} with ID: {reaction.id}")
        return reaction

    async def _delete_opposite(self, opposite: SQLAlchemyDAO, user_id: int, post_id: int) -> None:
        try:
            await opposite.delete_where(user_id=user_id, post_id=post_id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
