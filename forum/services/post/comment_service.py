from sqlalchemy.ext.asyncio import AsyncSession

from forum.models.comment import Comment
from forum.repositories.comment_repository import CommentRepository
from forum.schemas.post import CommentCreateDTO
from forum.utils.exceptions import ConstraintViolation


class CommentService:
    def __init__(self, db: AsyncSession):
        self.comment_repository = CommentRepository(db)

    async def create_comment(self, comment_data: CommentCreateDTO, user_id: int) -> Comment:
        new_comment = Comment(
            content=comment_data.content,
            post_id=comment_data.post_id,
            user_id=user_id,
        )

        created_comment = await self.comment_repository.insert_one(new_comment)
        if not created_comment:
            raise ConstraintViolation(
                f"Post {comment_data.post_id} or user {user_id} does not exist"
            )
        return created_comment
