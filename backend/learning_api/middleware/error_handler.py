"""
Backend Learning API — Global Error Handling Middleware
========================================================

What:  Converts any exception escaping the inner middleware or a route
       handler into a 500 JSON response.
Why:   A single place where failures are logged and shaped, so handlers never
       need their own try/except for unexpected errors.
How:   Wraps call_next; exceptions raised in sync handlers, awaited coroutines
       and the body parser all surface here.

Response:
    {"error": "Internal Server Error", "message": "<str(exc)>"}

No retries and no distinction between exception kinds: a parse error and a
programming error produce the same shape.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from learning_api.exceptions import LearningAPIError
from learning_api.schemas.system import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = "Internal Server Error"


def internal_error_response(exc: Exception) -> JSONResponse:
    """Build the 500 body for an exception."""
    message = exc.message if isinstance(exc, LearningAPIError) else str(exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=INTERNAL_SERVER_ERROR, message=message).to_content(),
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Catches every exception once, logs it with its traceback, answers 500."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            context = exc.context if isinstance(exc, LearningAPIError) else {}
            logger.error(
                "Error handling %s %s: %s | Context: %s",
                request.method,
                request.url.path,
                exc,
                context,
                exc_info=True,
            )
            return internal_error_response(exc)
