"""
Backend Learning API — OpenAPI Document Generation
===================================================

What:  Builds the OpenAPI document served at /api-docs.json and rendered at /api-docs.
Why:   FastAPI derives paths and schemas from the route declarations; this
       module layers on the static metadata (contact, license, servers,
       security scheme) that cannot be inferred from code.
How:   install_openapi() replaces app.openapi with a builder that generates
       the document once and caches it on app.openapi_schema.

Security Scheme:
    A bearer JWT scheme is declared globally so the Swagger UI shows an
    "Authorize" button. No route enforces it.
"""

from typing import Any, Dict

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from learning_api import __version__
from learning_api.config import Settings

API_TITLE = "Backend Development API project"
API_DESCRIPTION = "REST API documentation for backend development project"

CONTACT = {
    "name": "Backend Learning API maintainers",
    "email": "maintainers@example.com",
}

LICENSE_INFO = {
    "name": "MIT",
    "url": "https://opensource.org/licenses/MIT",
}

SECURITY_SCHEMES = {
    "bearerAuth": {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    },
}


def server_list(settings: Settings) -> list:
    return [
        {"url": settings.development_server_url, "description": "Development server"},
        {"url": settings.production_server_url, "description": "Production server"},
    ]


def build_openapi_schema(app: FastAPI, settings: Settings) -> Dict[str, Any]:
    """
    Generate the full document for `app`.

    Routes declared with include_in_schema=False (the docs routes) are left out.
    """
    schema = get_openapi(
        title=API_TITLE,
        version=__version__,
        description=API_DESCRIPTION,
        routes=app.routes,
        tags=app.openapi_tags,
        servers=server_list(settings),
        contact=CONTACT,
        license_info=LICENSE_INFO,
    )

    components = schema.setdefault("components", {})
    components["securitySchemes"] = dict(SECURITY_SCHEMES)
    schema["security"] = [{"bearerAuth": []}]

    return schema


def install_openapi(app: FastAPI, settings: Settings) -> None:
    """Route app.openapi() (and therefore /api-docs.json) through build_openapi_schema."""

    def openapi() -> Dict[str, Any]:
        if app.openapi_schema is None:
            app.openapi_schema = build_openapi_schema(app, settings)
        return app.openapi_schema

    app.openapi = openapi
