import logging

from fastapi import APIRouter, Form, HTTPException, Request, status
from starlette.responses import RedirectResponse

from forum.config import settings
from forum.database import ping
from forum.dependencies import DBSessionDep
from forum.schemas.user import UserLogInDTO, UserSignUpDTO
from forum.services.user.user_service import UserService
from forum.utils.exceptions import (
    ConstraintViolation,
    ForumError,
    InvalidCredential,
    NotFound,
)
from forum.utils.session_util import set_session
from forum.utils.templating import render

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def login_page(request: Request):
    """Render the login form"""
    return render(request, "login.html")


@router.post("/")
async def login(
    db: DBSessionDep,
    email: str = Form(...),
    password: str = Form(...),
) -> RedirectResponse:
    """Authenticate user and start a session"""
    try:
        user_data = UserLogInDTO(email=email, password=password)
        user_service = UserService(session=db)
        user = await user_service.authenticate_user(user_data=user_data)
    except (NotFound, InvalidCredential) as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except HTTPException:
        raise
    except ForumError:
        raise
    except Exception as e:
        logger.error(f"Error during login: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error during login: {e}"
        )

    response = RedirectResponse("/forum", status_code=status.HTTP_303_SEE_OTHER)
    set_session(response, settings.SESSION_COOKIE_NAME, user.email)
    return response


@router.get("/register")
async def register_page(request: Request):
    """Render the registration form"""
    return render(request, "register.html")


@router.post("/register")
async def register(
    db: DBSessionDep,
    email: str = Form(...),
    username: str = Form(...),
    password: str = Form(...),
) -> RedirectResponse:
    """Register a new user"""
    try:
        user_data = UserSignUpDTO(email=email, username=username, password=password)
        user_service = UserService(session=db)
        await user_service.create_user(user_data=user_data)
    except ConstraintViolation as e:
        logger.error(f"Error during signup: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to register user"
        )
    except HTTPException:
        raise
    except ForumError:
        raise
    except Exception as e:
        logger.error(f"Error during signup: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to register user"
        )

    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/guestLogin")
async def guest_login(db: DBSessionDep) -> RedirectResponse:
    """Start a read-only guest session"""
    try:
        await ping(db)
    except Exception as e:
        logger.warning(f"Database ping failed during guest login: {e}")

    response = RedirectResponse("/forum", status_code=status.HTTP_303_SEE_OTHER)
    set_session(response, settings.SESSION_COOKIE_NAME, settings.GUEST_IDENTITY)
    return response
