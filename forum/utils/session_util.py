from fastapi import Request, Response


def set_session(response: Response, key: str, value: str) -> None:
    # No expiry and no signature: the cookie lives for the browser session.
    response.set_cookie(key=key, value=value, path="/")


def get_session(request: Request, key: str) -> str:
    return request.cookies.get(key, "")
