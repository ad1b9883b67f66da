"""
Backend Learning API — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, middleware registration, route mounting,
       documentation and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (`uvicorn learning_api.main:app`) or by run().

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain (outermost first):                │
    │  ┌──────┐ ┌──────────┐ ┌─────────────┐ ┌─────────┐  │
    │  │ CORS │→│ Errors   │→│ Body Parser │→│ Access  │  │
    │  └──────┘ └──────────┘ └─────────────┘ └─────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  GET /   GET /info   GET /db-test                   │
    │  GET /api-docs   GET /api-docs.json                 │
    │                                                     │
    │  Fallbacks:                                         │
    │  unmatched → 404 "Route not found"                  │
    │  exception → 500 "Internal Server Error"            │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the startup banner
    Shutdown: dispose the database engine (if it was ever created)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from learning_api import __version__
from learning_api.config import Settings, settings as default_settings
from learning_api.database import dispose_engine
from learning_api.middleware.body_parser import BodyParserMiddleware
from learning_api.middleware.cors import WildcardOriginMiddleware
from learning_api.middleware.error_handler import ErrorHandlerMiddleware
from learning_api.middleware.logging import RequestLoggingMiddleware
from learning_api.openapi import API_DESCRIPTION, API_TITLE, install_openapi
from learning_api.routes import db_test, docs, system
from learning_api.schemas.system import ErrorResponse
from learning_api.services.runtime import RuntimeContext

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"
DOCS_URL = "/api-docs"
OPENAPI_URL = "/api-docs.json"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure logging for the entire application.

    When: Called once during app startup, before anything else logs.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # uvicorn's access log duplicates learning_api.access
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging and banner. Shutdown: close pooled database connections.
    """
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("Server is running!")
    logger.info("URL: %s", app_settings.development_server_url)
    logger.info("Environment: %s", app_settings.node_env)
    logger.info("API docs: %s%s", app_settings.development_server_url, DOCS_URL)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Shutting down...")
    await dispose_engine(app.state)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Fallback Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the not-found fallback.

    Handler hierarchy:
        404 (no path matched)        → 404 {"error": "Route not found", path, method}
        405 (path matched, not verb) → same 404; routes are (method, path) pairs
        any other HTTPException      → FastAPI default

    Unhandled exceptions are not registered here: ErrorHandlerMiddleware
    catches them inside the CORS layer so 500s keep their CORS headers.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_not_found(request: Request, exc: StarletteHTTPException):
        if exc.status_code not in (404, 405):
            return await http_exception_handler(request, exc)
        logger.debug("No route for %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(
                error=ROUTE_NOT_FOUND,
                path=request.url.path,
                method=request.method,
            ).to_content(),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to build the app with. Defaults to the
                      module-level singleton; tests pass their own.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=__version__,
        docs_url=None,             # Swagger UI is served by routes.docs
        redoc_url=None,
        openapi_url=OPENAPI_URL,
        lifespan=lifespan,
        # Paths match with or without one trailing slash (see routes); no 307s
        redirect_slashes=False,
    )

    # Captured once; handlers receive it through get_runtime_context
    app.state.settings = app_settings
    app.state.runtime = RuntimeContext.from_settings(app_settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = outermost. Execution order: CORS → Errors → Body → Access log,
    # with WildcardOriginMiddleware wrapping CORS when any origin is allowed
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(BodyParserMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if "*" in app_settings.cors_origins_list:
        app.add_middleware(WildcardOriginMiddleware)

    # ── Register Fallbacks ────────────────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(system.router)
    app.include_router(db_test.router)
    app.include_router(docs.router)

    install_openapi(app, app_settings)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` on HOST:PORT."""
    uvicorn.run(
        app,
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )
