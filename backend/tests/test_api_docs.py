"""
Backend Learning API — API Documentation Tests
===============================================

What we test:
    ✅ /api-docs.json is JSON, versioned 1.0.0, and documents every API route
    ✅ Static metadata (contact, license, servers, bearer scheme) is present
    ✅ Response schemas use the camelCase wire names
    ✅ /api-docs serves the Swagger UI page pointed at /api-docs.json
"""

import pytest

from learning_api.routes.docs import CUSTOM_CSS, SITE_TITLE


class TestOpenAPIDocument:
    """Tests for GET /api-docs.json."""

    @pytest.mark.asyncio
    async def test_document_version_and_paths(self, test_client):
        response = await test_client.get("/api-docs.json")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        document = response.json()
        assert document["info"]["version"] == "1.0.0"
        assert {"/", "/info", "/db-test"} <= set(document["paths"])

    @pytest.mark.asyncio
    async def test_docs_routes_are_not_documented(self, test_client):
        document = (await test_client.get("/api-docs.json")).json()

        assert "/api-docs" not in document["paths"]
        assert "/api-docs.json" not in document["paths"]

    @pytest.mark.asyncio
    async def test_static_metadata(self, test_client):
        document = (await test_client.get("/api-docs.json")).json()

        info = document["info"]
        assert info["title"] == "Backend Development API project"
        assert info["license"]["name"] == "MIT"
        assert "email" in info["contact"]

        assert [server["url"] for server in document["servers"]] == [
            "http://localhost:3000",
            "https://your-production-url.com",
        ]

        assert document["components"]["securitySchemes"]["bearerAuth"] == {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
        assert document["security"] == [{"bearerAuth": []}]

    @pytest.mark.asyncio
    async def test_schemas_use_wire_names(self, test_client):
        schemas = (await test_client.get("/api-docs.json")).json()["components"]["schemas"]

        assert {"userCount", "postCount"} <= set(schemas["DbProbeResponse"]["properties"])
        assert {"appName", "nodeVersion", "memoryUsage"} <= set(schemas["InfoResponse"]["properties"])

    @pytest.mark.asyncio
    async def test_db_test_documents_failure_response(self, test_client):
        document = (await test_client.get("/api-docs.json")).json()

        assert "500" in document["paths"]["/db-test"]["get"]["responses"]

    def test_document_is_cached(self, app):
        assert app.openapi() is app.openapi()


class TestSwaggerUI:
    """Tests for GET /api-docs."""

    @pytest.mark.asyncio
    async def test_serves_html(self, test_client):
        response = await test_client.get("/api-docs")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert f"<title>{SITE_TITLE}</title>" in response.text
        assert "/api-docs.json" in response.text
        assert CUSTOM_CSS in response.text

    @pytest.mark.asyncio
    async def test_uses_default_swagger_options(self, test_client):
        html = (await test_client.get("/api-docs")).text

        for option in ("persistAuthorization", "displayRequestDuration", '"filter"'):
            assert option not in html
