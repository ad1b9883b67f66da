"""
Backend Learning API — Database Engine & Session Factory
=========================================================

What:  Async SQLAlchemy engine, session factory and declarative base.
Why:   Centralizes all database connection logic in one place.
How:   Each application owns its engine, built lazily from the Settings the
       app was created with and cached on app.state. Importing or creating
       the application never opens a connection or requires a reachable server.
Who:   Used by the get_database_client dependency and by the application lifespan.

Connection Pooling Strategy:
    pool_size / max_overflow:  small; /db-test is the only consumer
    pool_pre_ping:             validates connections before use
    pool_recycle=1800:         Supabase's pooler drops idle connections, so
                               connections are recycled every 30 minutes
"""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from starlette.datastructures import State

from learning_api.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class to register with a shared metadata
    object (used by tests to create the schema on SQLite).
    """
    pass


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Build an async engine for settings.database_url.

    Pool arguments only apply to server databases; SQLite URLs (used by
    local tooling and tests) get the dialect's default pool.
    """
    engine_kwargs = {"echo": settings.log_level == "DEBUG"}
    if not settings.database_url.startswith("sqlite"):
        engine_kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=1800,
        )
    engine = create_async_engine(settings.database_url, **engine_kwargs)
    logger.debug("Created database engine for %s", engine.url.render_as_string(hide_password=True))
    return engine


def get_session_factory(state: State) -> async_sessionmaker[AsyncSession]:
    """
    Return the session factory cached on an application's state.

    On first call the engine is built from state.settings and both are stored
    on the state (db_engine, db_session_factory).

    expire_on_commit=False: objects stay readable after commit without a
    new round trip.
    """
    factory = getattr(state, "db_session_factory", None)
    if factory is None:
        state.db_engine = create_engine_from_settings(state.settings)
        factory = async_sessionmaker(
            state.db_engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        state.db_session_factory = factory
    return factory


async def dispose_engine(state: State) -> None:
    """
    What:  Gracefully closes all connections in the application's pool.
    When:  Called during application shutdown (lifespan handler).
    How:   No-op if the engine was never created (no request touched the database).
    """
    engine = getattr(state, "db_engine", None)
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    state.db_engine = None
    state.db_session_factory = None
