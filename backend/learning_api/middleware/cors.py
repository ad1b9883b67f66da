"""
Backend Learning API — Wildcard CORS Header Middleware
=======================================================

What:  Adds `Access-Control-Allow-Origin: *` to responses that lack it.
Why:   Starlette's CORSMiddleware only answers requests carrying an Origin
       header. With CORS_ORIGINS="*" every response is expected to carry the
       header, including same-origin requests, curl calls and health probes.
How:   Registered outside CORSMiddleware, and only when "*" is configured.
       Responses CORSMiddleware already decorated are left untouched.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

ALLOW_ORIGIN_HEADER = "Access-Control-Allow-Origin"


class WildcardOriginMiddleware(BaseHTTPMiddleware):
    """Ensures every response allows any origin."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        if ALLOW_ORIGIN_HEADER not in response.headers:
            response.headers[ALLOW_ORIGIN_HEADER] = "*"
        return response
