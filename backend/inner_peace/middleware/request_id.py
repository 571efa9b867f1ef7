"""
Inner Peace Backend — Request ID Middleware
============================================

What:  Tags every request with a short correlation id and returns it in the
       X-Request-ID response header.
How:   Reuses the client's X-Request-ID when it is a plain token (letters,
       digits, '-', '_', '.', at most 64 chars); anything else is replaced by
       the first 8 characters of a UUID4. The id lives in a ContextVar so
       loggers and exception handlers can read it without the request object.
When:  Outermost middleware; everything downstream sees the id.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def resolve_request_id(incoming: Optional[str]) -> str:
    """Client-supplied id if it is safe to echo and log, else a fresh one."""
    if incoming and _SAFE_REQUEST_ID.match(incoming):
        return incoming
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(rid)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
