"""
Backend Learning API — Database Probe Route
============================================

What:  GET /db-test: checks connectivity and reports user/post counts.
Why:   Lets a developer confirm the DATABASE_URL credentials work end to end
       without opening a SQL console.

Responses:
    200: {"message": "Database connection successful", "database": "...",
          "userCount": 3, "postCount": 5, "timestamp": "..."}
    500: {"error": "Database connection failed", "message": "<driver error>"}

Only DatabaseError is answered here. Any other exception is a bug and goes
to the error-handling middleware like everywhere else.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from learning_api.dependencies import get_database_client, get_runtime_context
from learning_api.exceptions import DatabaseError
from learning_api.schemas.system import DbProbeResponse, ErrorResponse
from learning_api.services.db_client import DatabaseClient
from learning_api.services.db_probe import probe_database
from learning_api.services.runtime import RuntimeContext

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Database"])

DATABASE_FAILURE = "Database connection failed"


@router.get("/db-test/", include_in_schema=False)
@router.get(
    "/db-test",
    response_model=DbProbeResponse,
    responses={
        200: {"description": "Database reachable", "model": DbProbeResponse},
        500: {"description": "Database unreachable or query failed", "model": ErrorResponse},
    },
    summary="Database connectivity probe",
    description="Connects to the database and counts the rows in the users and posts tables.",
)
async def db_test(
    client: DatabaseClient = Depends(get_database_client),
    context: RuntimeContext = Depends(get_runtime_context),
):
    try:
        return await probe_database(client, context.database_label)
    except DatabaseError as e:
        logger.error("Database probe failed: %s | Context: %s", e.message, e.context)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error=DATABASE_FAILURE,
                message=e.message or type(e).__name__,
            ).to_content(),
        )
