from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from starlette.responses import HTMLResponse

from forum.config import settings
from forum.logger import logger
from forum.utils.exceptions import TemplateFailure

templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)


def render(request: Request, name: str, context: dict[str, Any] | None = None) -> HTMLResponse:
    # TemplateNotFound and TemplateSyntaxError both derive from TemplateError.
    try:
        return templates.TemplateResponse(request, name, context or {})
    except TemplateError as e:
        logger.error(f"Unable to render template {name}: {e}")
        raise TemplateFailure(f"Unable to render template {name}") from e
