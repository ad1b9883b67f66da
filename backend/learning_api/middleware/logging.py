"""
Backend Learning API — Request Logging Middleware
==================================================

What:  One access log line per request.
Why:   A minimal trace of traffic for development and debugging.
How:   Logs on arrival, before the handler runs, so a request that later fails
       or hangs is still recorded. The line never affects the response.

Log Format:
    [2024-01-15T12:00:00.000Z] GET /info

What we DON'T log: request bodies and headers (may contain credentials).
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from learning_api.services.runtime import utc_timestamp

logger = logging.getLogger("learning_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs timestamp, method and path for every request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        method = request.method
        path = request.url.path

        logger.info(
            "[%s] %s %s",
            utc_timestamp(),
            method,
            path,
            extra={"method": method, "path": path},
        )

        return await call_next(request)
