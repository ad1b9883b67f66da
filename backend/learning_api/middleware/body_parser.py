"""
Backend Learning API — Request Body Parsing Middleware
=======================================================

What:  Decodes JSON and URL-encoded request bodies before dispatch.
Why:   Handlers (present or future) read `request.state.parsed_body` instead of
       decoding bodies themselves, and a malformed body fails the same way on
       every route, including unknown ones.
How:   Reads the body once (Starlette caches it for downstream consumers),
       decodes it according to Content-Type, and stores the result.

Parsed forms:
    application/json                   → whatever json.loads returns
    application/x-www-form-urlencoded  → dict of field → value (last value wins)

Requests with other content types, or with an empty body, are passed through
untouched and leave parsed_body unset.
"""

import json
import logging
from urllib.parse import parse_qsl

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from learning_api.exceptions import RequestBodyParseError

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"


def media_type_of(request: Request) -> str:
    """Content-Type without parameters, lower-cased ("application/json")."""
    return request.headers.get("content-type", "").split(";", 1)[0].strip().lower()


def parse_json_body(body: bytes):
    try:
        return json.loads(body.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise RequestBodyParseError(
            message=f"Request body is not valid UTF-8: {e.reason}",
            content_type=JSON_MEDIA_TYPE,
        ) from e
    except json.JSONDecodeError as e:
        raise RequestBodyParseError(
            message=f"Invalid JSON in request body: {e.msg} (line {e.lineno} column {e.colno})",
            content_type=JSON_MEDIA_TYPE,
        ) from e


def parse_form_body(body: bytes) -> dict:
    try:
        return dict(parse_qsl(body.decode("utf-8"), keep_blank_values=True))
    except (UnicodeDecodeError, ValueError) as e:
        raise RequestBodyParseError(
            message=f"Invalid URL-encoded request body: {e}",
            content_type=FORM_MEDIA_TYPE,
        ) from e


class BodyParserMiddleware(BaseHTTPMiddleware):
    """Stores the decoded body on request.state.parsed_body."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        media_type = media_type_of(request)

        if media_type in (JSON_MEDIA_TYPE, FORM_MEDIA_TYPE):
            body = await request.body()
            if body:
                if media_type == JSON_MEDIA_TYPE:
                    request.state.parsed_body = parse_json_body(body)
                else:
                    request.state.parsed_body = parse_form_body(body)
                logger.debug("Parsed %d-byte %s body", len(body), media_type)

        return await call_next(request)
