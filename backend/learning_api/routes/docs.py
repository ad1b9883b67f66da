"""
Backend Learning API — Interactive Documentation Routes
========================================================

What:  GET /api-docs serves Swagger UI pointed at /api-docs.json.
How:   FastAPI's get_swagger_ui_html renders the page (assets from the CDN)
       with FastAPI's default Swagger UI parameters; a small stylesheet is
       spliced into <head> to hide the Swagger top bar (and the URL explorer
       it holds).

/api-docs.json itself is FastAPI's own openapi route. Only its trailing-slash
variant is declared here.
"""

from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse

router = APIRouter()

SITE_TITLE = "Backend Development Project API Docs"
CUSTOM_CSS = ".swagger-ui .topbar { display: none }"


@router.get("/api-docs/", include_in_schema=False)
@router.get("/api-docs", include_in_schema=False)
async def swagger_ui(request: Request) -> HTMLResponse:
    root_path = request.scope.get("root_path", "").rstrip("/")
    page = get_swagger_ui_html(
        openapi_url=f"{root_path}{request.app.openapi_url}",
        title=SITE_TITLE,
    )
    html = page.body.decode("utf-8").replace(
        "</head>", f"<style>{CUSTOM_CSS}</style>\n</head>", 1
    )
    return HTMLResponse(html)


@router.get("/api-docs.json/", include_in_schema=False)
async def openapi_document(request: Request) -> JSONResponse:
    return JSONResponse(request.app.openapi())
