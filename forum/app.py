from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.responses import JSONResponse

from forum.database import sessionmanager
from forum.logger import logger
from forum.routes import router
from forum.utils.exceptions import ForumError, format_validation_error


@asynccontextmanager
async def lifespan(app: FastAPI):
    await sessionmanager.create_tables()
    yield
    await sessionmanager.close()


app = FastAPI(title="Forum", lifespan=lifespan)
app.include_router(router)


@app.exception_handler(ForumError)
async def forum_error_handler(request: Request, exc: ForumError) -> JSONResponse:
    logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse({"detail": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        format_validation_error(exc),
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )
