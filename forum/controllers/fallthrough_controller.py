from fastapi import APIRouter, Response

from forum.controllers.auth_controller import login, login_page
from forum.dependencies import AuthorizedDep

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# Methods each path already answers elsewhere; everything else is ignored.
OPEN_PATHS = {
    "/": {"GET", "POST"},
    "/register": {"GET", "POST"},
    "/guestLogin": {"GET"},
    "/forum": {"GET"},
}
GATED_PATHS = {
    "/createPost": {"POST"},
    "/like": {"POST"},
    "/dislike": {"POST"},
    "/comment": {"POST"},
}

router = APIRouter(include_in_schema=False)


def unhandled_methods(handled: set[str]) -> list[str]:
    return [method for method in ALL_METHODS if method not in handled]


async def ignore_request() -> Response:
    return Response(status_code=200)


async def ignore_member_request(identity: AuthorizedDep) -> Response:
    return Response(status_code=200)


for path, handled in OPEN_PATHS.items():
    router.add_api_route(path, ignore_request, methods=unhandled_methods(handled))

for path, handled in GATED_PATHS.items():
    router.add_api_route(path, ignore_member_request, methods=unhandled_methods(handled))

# Any other path behaves like the login page, so this router is included last.
router.add_api_route("/{path:path}", login_page, methods=["GET"])
router.add_api_route("/{path:path}", login, methods=["POST"])
router.add_api_route("/{path:path}", ignore_request, methods=unhandled_methods({"GET", "POST"}))
