from sqlalchemy.ext.asyncio import AsyncSession

from forum.repositories.reaction_repository import ReactionRepository
from forum.schemas.post import ReactionResponseDTO


class ReactionService:
    """Per (user, post) the state is none, liked or disliked.

    Liking an already liked post is a no-op, not an unlike; the same holds for
    dislikes. Switching sides inserts the new row and deletes the opposite one
    in a single transaction.
    """

    def __init__(self, db: AsyncSession):
        self.reaction_repository = ReactionRepository(db)

    async def like(self, post_id: int, user_id: int) -> ReactionResponseDTO:
        existing_like = await self.reaction_repository.find_like(user_id, post_id)
        if not existing_like:
            await self.reaction_repository.replace_dislike_with_like(user_id, post_id)

        return ReactionResponseDTO(post_id=post_id, user_id=user_id, liked=True, disliked=False)

    async def dislike(self, post_id: int, user_id: int) -> ReactionResponseDTO:
        existing_dislike = await self.reaction_repository.find_dislike(user_id, post_id)
        if not existing_dislike:
            await self.reaction_repository.replace_like_with_dislike(user_id, post_id)

        return ReactionResponseDTO(post_id=post_id, user_id=user_id, liked=False, disliked=True)
