"""
Backend Learning API — Pydantic Response Schemas
=================================================

What:  Pydantic models defining every response body the API returns.
Why:   Automatic serialization and OpenAPI documentation from one definition.
How:   Attributes are snake_case in Python; `to_camel` aliases produce the
       camelCase field names clients already depend on (appName, userCount...).
       FastAPI serializes response models by alias.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class HealthResponse(BaseModel):
    """
    What:  Liveness payload returned by GET /.
    Why:   Confirms the process is up and reports which environment it runs in.
           No dependency is checked here; GET /db-test covers the database.
    """
    message: str = Field(description="Fixed readiness message", examples=["Ready"])
    timestamp: str = Field(description="Current UTC time (ISO 8601)")
    environment: str = Field(description="Deployment environment (NODE_ENV)")
    version: Optional[str] = Field(default=None, description="Application version")

    model_config = _CAMEL_CONFIG


class MemoryUsage(BaseModel):
    """Process memory, rounded to whole megabytes, e.g. "42 MB"."""
    rss: str = Field(description="Resident set size")
    heap_used: str = Field(description="Memory in use by the process heap")

    model_config = _CAMEL_CONFIG


class InfoResponse(BaseModel):
    """
    What:  Runtime introspection returned by GET /info.
    When:  Computed on every request; nothing is cached.

    The runtime version keeps the `nodeVersion` wire name so existing
    dashboards continue to parse the payload.
    """
    app_name: str = Field(description="Application display name")
    node_version: str = Field(description="Interpreter runtime version, e.g. v3.12.4")
    platform: str = Field(description="Runtime platform identifier, e.g. linux")
    uptime: float = Field(description="Seconds since the process started")
    memory_usage: MemoryUsage

    model_config = _CAMEL_CONFIG


class DbProbeResponse(BaseModel):
    """
    What:  Result of a successful GET /db-test.
    How:   One connectivity check plus two independent count queries.
    """
    message: str = Field(examples=["Database connection successful"])
    database: str = Field(description="Label of the connected database", examples=["Supabase PostgreSQL"])
    user_count: int = Field(ge=0)
    post_count: int = Field(ge=0)
    timestamp: str = Field(description="Current UTC time (ISO 8601)")

    model_config = _CAMEL_CONFIG


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by the 404 and 500 fallbacks.

    Shapes:
        404: {"error": "Route not found", "path": "/nope", "method": "GET"}
        500: {"error": "Internal Server Error", "message": "..."}
        500: {"error": "Database connection failed", "message": "..."}

    Unset fields are dropped from the body (see to_content()).
    """
    error: str = Field(description="Error summary")
    message: Optional[str] = Field(default=None, description="Exception message")
    path: Optional[str] = Field(default=None, description="Requested path (404 only)")
    method: Optional[str] = Field(default=None, description="Requested method (404 only)")

    def to_content(self) -> dict:
        return self.model_dump(exclude_none=True)
