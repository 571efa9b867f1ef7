"""
Inner Peace Backend — CORS Middleware
======================================

What:  Adds permissive cross-origin headers to every response and answers
       every OPTIONS request itself with an empty 200.
How:   Starlette BaseHTTPMiddleware; preflights never reach the router.

Headers (on every response, errors included):
    Access-Control-Allow-Origin:  settings.cors_allow_origin (default "*")
    Access-Control-Allow-Methods: GET,POST,DELETE,OPTIONS
    Access-Control-Allow-Headers: Content-Type

Starlette's CORSMiddleware only decorates requests that carry an Origin
header, which the client contract does not guarantee, hence this class.
"""

from typing import Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from inner_peace.config import settings

ALLOWED_METHODS = "GET,POST,DELETE,OPTIONS"
ALLOWED_HEADERS = "Content-Type"


def cors_headers() -> Dict[str, str]:
    """The CORS header set shared by the middleware and the 500 fallback handler."""
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Short-circuits preflight requests and stamps CORS headers on the rest."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=cors_headers())

        response = await call_next(request)
        response.headers.update(cors_headers())
        return response
