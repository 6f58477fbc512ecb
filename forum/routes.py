from fastapi import APIRouter

from forum.controllers.auth_controller import router as auth_router
from forum.controllers.forum_controller import router as forum_router
from forum.controllers.fallthrough_controller import router as fallthrough_router


router = APIRouter(
    responses={
            401: {"description": "Unauthorized"},
            403: {"description": "Guest users cannot perform this action"},
            500: {"description": "Internal server error"},
    }
)

router.include_router(auth_router, tags=["auth"])
router.include_router(forum_router, tags=["forum"])
router.include_router(fallthrough_router)
