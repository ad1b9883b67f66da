"""
Backend Learning API — Health & Info Routes
============================================

What:  GET / (liveness) and GET /info (runtime introspection).
Why:   The cheapest possible checks that the process is up and what it runs on.
How:   Both build their response from the injected RuntimeContext; /info also
       reads live memory figures through psutil.
"""

from fastapi import APIRouter, Depends

from learning_api.dependencies import get_runtime_context
from learning_api.schemas.system import ErrorResponse, HealthResponse, InfoResponse
from learning_api.services.runtime import RuntimeContext, collect_runtime_info, utc_timestamp

router = APIRouter(tags=["System"])

READY_MESSAGE = "Ready"


@router.get(
    "/",
    response_model=HealthResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Health check",
    description="Returns a readiness message, the current UTC time and the deployment environment.",
)
async def health_check(
    context: RuntimeContext = Depends(get_runtime_context),
) -> HealthResponse:
    return HealthResponse(
        message=READY_MESSAGE,
        timestamp=utc_timestamp(),
        environment=context.environment,
        version=context.version,
    )


@router.get("/info/", include_in_schema=False)
@router.get(
    "/info",
    response_model=InfoResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Runtime information",
    description=(
        "Returns the application name, interpreter version, platform, process uptime "
        "in seconds and memory usage in megabytes."
    ),
)
async def runtime_info(
    context: RuntimeContext = Depends(get_runtime_context),
) -> InfoResponse:
    """
    Report live process state.

    Values change between calls (uptime, memory); nothing is cached.
    """
    return collect_runtime_info(context)
