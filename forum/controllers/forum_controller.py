import logging

from fastapi import APIRouter, Form, HTTPException, Request, status
from starlette.responses import RedirectResponse

from forum.dependencies import CurrentUserDep, DBSessionDep
from forum.schemas.post import CommentCreateDTO, PostCreateDTO
from forum.services.post.comment_service import CommentService
from forum.services.post.post_service import PostService
from forum.services.post.reaction_service import ReactionService
from forum.utils.exceptions import IOFailure
from forum.utils.templating import render

logger = logging.getLogger(__name__)

router = APIRouter()


def redirect_to_forum() -> RedirectResponse:
    return RedirectResponse("/forum", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/forum")
async def forum_page(request: Request, db: DBSessionDep):
    """Render every post with its reactions and comments"""
    try:
        post_service = PostService(db)
        posts = await post_service.list_posts()
    except IOFailure:
        raise
    except Exception as e:
        logger.error(f"Error loading posts: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to load posts"
        )

    return render(request, "index.html", {"posts": posts.posts})


@router.post("/createPost")
async def create_post(
    db: DBSessionDep,
    current_user: CurrentUserDep,
    title: str = Form(""),
    content: str = Form(""),
) -> RedirectResponse:
    try:
        post_data = PostCreateDTO(title=title, content=content)
        post_service = PostService(db)
        await post_service.create_post(post_data, current_user.id)
    except IOFailure:
        raise
    except Exception as e:
        logger.error(f"Error creating post: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to create post"
        )

    return redirect_to_forum()


@router.post("/like")
async def like_post(
    db: DBSessionDep,
    current_user: CurrentUserDep,
    post_id: int = Form(...),
) -> RedirectResponse:
    try:
        await ReactionService(db).like(post_id, current_user.id)
    except IOFailure:
        raise
    except Exception as e:
        logger.error(f"Error liking post {post_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to like post"
        )

    return redirect_to_forum()


@router.post("/dislike")
async def dislike_post(
    db: DBSessionDep,
    current_user: CurrentUserDep,
    post_id: int = Form(...),
) -> RedirectResponse:
    try:
        await ReactionService(db).dislike(post_id, current_user.id)
    except IOFailure:
        raise
    except Exception as e:
        logger.error(f"Error disliking post {post_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to dislike post"
        )

    return redirect_to_forum()


@router.post("/comment")
async def comment_post(
    db: DBSessionDep,
    current_user: CurrentUserDep,
    post_id: int = Form(...),
    comment: str = Form(""),
) -> RedirectResponse:
    try:
        comment_data = CommentCreateDTO(post_id=post_id, content=comment)
        comment_service = CommentService(db)
        await comment_service.create_comment(comment_data, current_user.id)
    except IOFailure:
        raise
    except Exception as e:
        logger.error(f"Error adding comment to post {post_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to add comment"
        )

    return redirect_to_forum()
