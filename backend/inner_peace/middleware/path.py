"""
Inner Peace Backend — Path Normalization Middleware
====================================================

What:  Rewrites the request path to its non-empty segments joined by "/",
       so `//posts/` and `/posts` route identically.
How:   Edits the ASGI scope before the router sees it. Trailing-slash
       redirects are switched off in the app factory, so this is the only
       place slashes are reconciled.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


def normalize_path(path: str) -> str:
    """'/posts//1/' → '/posts/1'; '' and '///' → '/'."""
    segments = [segment for segment in path.split("/") if segment]
    return "/" + "/".join(segments)


class PathNormalizationMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request.scope["path"] = normalize_path(request.scope["path"])
        return await call_next(request)
