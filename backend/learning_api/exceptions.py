"""
Backend Learning API — Custom Exception Hierarchy
==================================================

What:  Application-specific exceptions for the few failures this service knows about.
Why:   Lets the database client and body parser report failures with a
       readable message while keeping driver details in a context dict.
How:   Each exception carries a message and optional context dict.
       The /db-test route catches DatabaseError; everything else reaches the
       error-handling middleware and becomes a generic 500.

Exception Hierarchy:
    LearningAPIError (base)
    ├── DatabaseError
    │   ├── DatabaseConnectionError  → 500 "Database connection failed"
    │   └── DatabaseQueryError       → 500 "Database connection failed"
    └── RequestBodyParseError        → 500 "Internal Server Error"

Wire taxonomy:
    Clients only ever see two shapes: 404 "Route not found" and a 500 carrying
    the exception message. Exception kinds are not distinguished on the wire.
"""

from typing import Any, Dict, Optional


class LearningAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable error description (returned in the 500 body)
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseError(LearningAPIError):
    """Raised by a DatabaseClient when the database cannot serve a request."""

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseConnectionError(DatabaseError):
    """
    Raised when the database is unreachable.

    When:  DNS failure, refused connection, bad credentials, pool timeout.
    """

    def __init__(
        self,
        message: str = "Could not connect to the database",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseQueryError(DatabaseError):
    """
    Raised when a query fails on an otherwise reachable database.

    When:  Missing table, permission denied, unknown entity name.
    """

    def __init__(
        self,
        message: str = "Database query failed",
        entity: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if entity:
            ctx["entity"] = entity
        super().__init__(message=message, context=ctx)
        self.entity = entity


class RequestBodyParseError(LearningAPIError):
    """
    Raised when a JSON or URL-encoded request body cannot be decoded.

    HTTP:  500 Internal Server Error. Malformed bodies are not singled out
           as client errors; they share the generic failure shape.
    """

    def __init__(
        self,
        message: str = "Request body could not be parsed",
        content_type: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if content_type:
            ctx["content_type"] = content_type
        super().__init__(message=message, context=ctx)
        self.content_type = content_type
