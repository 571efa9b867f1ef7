"""
Inner Peace Backend — Request Logging Middleware
=================================================

What:  One access-log line per HTTP request: method, path, status, duration,
       request id and client address.
How:   Times the downstream call with time.perf_counter and logs on the
       `inner_peace.access` logger at a level chosen by status class.
When:  Inside RequestIDMiddleware, so the correlation id is already set.

Example line:
    2024-01-15T12:00:00 [INFO] inner_peace.access: POST /posts 201 12.4ms [a1b2c3d4] from 10.0.0.7

Request bodies and query strings are never logged; the delete route
carries the admin secret in its query string.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from inner_peace.middleware.path import normalize_path
from inner_peace.middleware.request_id import request_id_var

logger = logging.getLogger("inner_peace.access")

_UNLOGGED_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request after the response is produced.

    The logged path is the normalized one the router matched, so
    `//posts/` and `/posts` share a log line shape. Levels come from
    level_for_status(). /health is skipped; probes hit it continuously.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = normalize_path(request.url.path)
        if path in _UNLOGGED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        rid = request_id_var.get("")
        client = request.client.host if request.client else "unknown"
        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            request.method, path, response.status_code, elapsed_ms, rid, client,
            extra={
                "request_id": rid,
                "route_path": path,
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
            },
        )
        return response
