"""
Backend Learning API — Database Client Interface
=================================================

What:  Abstract capability interface over the database, plus the SQLAlchemy
       implementation used in production.
Why:   The probe route only needs two operations. Hiding the ORM behind them
       lets tests drive the route with stand-ins that succeed or fail on
       demand, without a live database.
How:   Concrete clients inherit from DatabaseClient and translate every
       driver-level failure into DatabaseConnectionError / DatabaseQueryError.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, Type

from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from learning_api.database import Base
from learning_api.exceptions import DatabaseConnectionError, DatabaseQueryError
from learning_api.models import Post, User

logger = logging.getLogger(__name__)

# Entity names accepted by DatabaseClient.count()
ENTITY_MODELS: Dict[str, Type[Base]] = {
    "user": User,
    "post": Post,
}


def _describe(exc: BaseException) -> str:
    """Prefer the DBAPI error text over SQLAlchemy's wrapper message."""
    original = getattr(exc, "orig", None)
    return str(original if original is not None else exc) or exc.__class__.__name__


class DatabaseClient(ABC):
    """
    Abstract interface for the database collaborator.

    Contract:
        - connect() succeeds silently or raises DatabaseConnectionError
        - count(entity) returns a non-negative int or raises DatabaseQueryError
        - No other exception types escape an implementation
    """

    @abstractmethod
    async def connect(self) -> None:
        """
        Verify that the database is reachable.

        Raises:
            DatabaseConnectionError: The database could not be reached.
        """

    @abstractmethod
    async def count(self, entity: str) -> int:
        """
        Count the rows of an entity.

        Args:
            entity: One of the names in ENTITY_MODELS ("user", "post").

        Raises:
            DatabaseQueryError: Unknown entity, or the query failed.
        """


class SQLAlchemyDatabaseClient(DatabaseClient):
    """
    DatabaseClient backed by an async SQLAlchemy session factory.

    Each call opens its own short-lived session, so a client instance holds
    no connection between requests.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def connect(self) -> None:
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.warning("Database connectivity check failed: %s", _describe(e))
            raise DatabaseConnectionError(
                message=_describe(e),
                context={"error_type": type(e).__name__},
            ) from e

    async def count(self, entity: str) -> int:
        model = ENTITY_MODELS.get(entity)
        if model is None:
            raise DatabaseQueryError(
                message=f"Unknown entity '{entity}'. Expected one of: {sorted(ENTITY_MODELS)}",
                entity=entity,
            )

        try:
            async with self._session_factory() as session:
                result = await session.scalar(select(func.count()).select_from(model))
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.warning("Count query failed for %s: %s", entity, _describe(e))
            raise DatabaseQueryError(
                message=_describe(e),
                entity=entity,
                context={"error_type": type(e).__name__},
            ) from e

        return int(result or 0)
