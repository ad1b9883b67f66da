"""
Backend Learning API — FastAPI Dependencies
============================================

What:  Providers for the collaborators route handlers receive via Depends().
Why:   Handlers never reach for globals; tests replace any provider through
       app.dependency_overrides (e.g. a DatabaseClient that always fails).
"""

from fastapi import Request

from learning_api.database import get_session_factory
from learning_api.services.db_client import DatabaseClient, SQLAlchemyDatabaseClient
from learning_api.services.runtime import RuntimeContext


def get_runtime_context(request: Request) -> RuntimeContext:
    """The RuntimeContext create_app() stored on app.state."""
    return request.app.state.runtime


async def get_database_client(request: Request) -> DatabaseClient:
    """
    A SQLAlchemy-backed client over the application's session factory.

    The engine is built from the app's own Settings on first use, so only
    requests to /db-test ever touch the database. Declared async so the
    lazy creation runs on the event loop, never in two threads at once.
    """
    return SQLAlchemyDatabaseClient(get_session_factory(request.app.state))
