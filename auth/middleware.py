"""
HTTP Basic Auth gate.

Runs before every route handler. Requests pass through untouched when they
are CORS preflights (OPTIONS) or target the API-docs prefix; everything else
must carry valid Basic credentials or is answered with a bare 401.

On success the verified username is stored on `request.state.user` for the
lifetime of that request. There is no session: every request is verified on
its own against a read-only credential table.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from .config import USERS
from .service import AuthSuccess, authenticate


def unauthorized_response() -> Response:
    """The single rejection every auth failure collapses to."""
    return JSONResponse(
        {"detail": "Unauthorized"},
        status_code=401,
        headers={"WWW-Authenticate": "Basic"},
    )


class BasicAuthMiddleware(BaseHTTPMiddleware):
    """
    Verify Basic credentials on every non-exempt request.

    Args:
        app: The ASGI app to wrap.
        users (Mapping[str, str], optional): Credential table. Defaults to the
            demo table from `auth.config`.
        docs_prefix (str, optional): Path prefix of the API documentation UI;
            requests under it skip the check.
    """

    def __init__(self, app, users: Optional[Mapping[str, str]] = None, docs_prefix: str = "/swagger"):
        super().__init__(app)
        self.users = MappingProxyType(dict(USERS if users is None else users))
        self.docs_prefix = docs_prefix.rstrip("/")

    def is_exempt(self, request: Request) -> bool:
        if request.method == "OPTIONS":
            return True
        path = request.url.path
        if self.docs_prefix and (path == self.docs_prefix or path.startswith(self.docs_prefix + "/")):
            return True
        return False

    async def dispatch(self, request: Request, call_next) -> Response:
        if self.is_exempt(request):
            return await call_next(request)

        result = authenticate(self.users, request.headers.get("authorization"))
        if not isinstance(result, AuthSuccess):
            return unauthorized_response()

        request.state.user = result.principal
        return await call_next(request)
