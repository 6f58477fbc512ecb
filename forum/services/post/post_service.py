from sqlalchemy.ext.asyncio import AsyncSession

from forum.models.post import Post
from forum.repositories.comment_repository import CommentRepository
from forum.repositories.post_repository import PostRepository
from forum.schemas.post import (
    CommentResponseDTO,
    PostCreateDTO,
    PostListResponseDTO,
    PostResponseDTO,
)
from forum.utils.exceptions import ConstraintViolation


class PostService:
    def __init__(self, db: AsyncSession):
        self.post_repository = PostRepository(db)
        self.comment_repository = CommentRepository(db)

    async def create_post(self, post_data: PostCreateDTO, user_id: int) -> Post:
        """Create new post"""
        new_post = Post(
            title=post_data.title,
            content=post_data.content,
            user_id=user_id,
        )

        created_post = await self.post_repository.insert_one(new_post)
        if not created_post:
            raise ConstraintViolation(f"User {user_id} does not exist")
        return created_post

    async def list_posts(self) -> PostListResponseDTO:
        """All posts newest first, each with its comments oldest first"""
        rows = await self.post_repository.find_all_with_reaction_counts()

        posts = []
        for row in rows:
            comments = await self.comment_repository.find_by_post_id(row.id)
            posts.append(
                PostResponseDTO(
                    id=row.id,
                    title=row.title,
                    content=row.content,
                    username=row.username,
                    created_at=row.created_at,
                    likes=row.likes,
                    dislikes=row.dislikes,
                    comments=[
                        CommentResponseDTO(
                            content=comment.content,
                            username=comment.username,
                            created_at=comment.created_at,
                        )
                        for comment in comments
                    ],
                )
            )

        return PostListResponseDTO(posts=posts)
