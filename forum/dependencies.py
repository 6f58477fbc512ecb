from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from forum.config import settings
from forum.database import get_db_session
from forum.models import User
from forum.services.user.user_service import UserService
from forum.utils.exceptions import Forbidden
from forum.utils.session_util import get_session

DBSessionDep = Annotated[AsyncSession, Depends(get_db_session)]


def get_session_identity(request: Request) -> str:
    return get_session(request, settings.SESSION_COOKIE_NAME)


def authorize(identity: str = Depends(get_session_identity)) -> str:
    """Block guest sessions from mutating actions.

    Any other value passes through; whether it names a real user is checked
    only where an acting user is needed.
    """
    if identity == settings.GUEST_IDENTITY:
        raise Forbidden("Guest users cannot perform this action")
    return identity


async def get_current_user(
    db: DBSessionDep,
    identity: str = Depends(authorize),
) -> User:
    """Resolve the acting user from the session email"""
    user = await UserService(db).get_user_by_email(identity)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown session user"
        )
    return user


AuthorizedDep = Annotated[str, Depends(authorize)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]
