"""
Backend Learning API — Database Probe
======================================

What:  The connectivity check behind GET /db-test.
How:   connect() first, then one count per entity. Any DatabaseError
       propagates unchanged; the route decides how to present it.
"""

import logging

from learning_api.schemas.system import DbProbeResponse
from learning_api.services.db_client import DatabaseClient
from learning_api.services.runtime import utc_timestamp

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Database connection successful"


async def probe_database(client: DatabaseClient, database_label: str) -> DbProbeResponse:
    """
    Verify the database is reachable and report user and post counts.

    Raises:
        DatabaseConnectionError: connect() failed; no count query is attempted.
        DatabaseQueryError: a count query failed.
    """
    await client.connect()
    user_count = await client.count("user")
    post_count = await client.count("post")

    logger.debug("Database probe ok: %d users, %d posts", user_count, post_count)

    return DbProbeResponse(
        message=SUCCESS_MESSAGE,
        database=database_label,
        user_count=user_count,
        post_count=post_count,
        timestamp=utc_timestamp(),
    )
