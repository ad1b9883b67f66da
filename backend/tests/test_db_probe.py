"""
Backend Learning API — Database Probe Tests
============================================

What:  Tests for GET /db-test and the probe_database service.
How:   AsyncMock DatabaseClients injected through dependency_overrides
       (no real database).

What we test:
    ✅ Reachable database with 3 users / 5 posts → 200 with counts
    ✅ Unreachable database → 500 "Database connection failed", no count queries
    ✅ Failing count query → 500 with the query error message
    ✅ Non-database bug in the client → generic 500 from the error middleware
"""

from datetime import datetime

import pytest

from learning_api.exceptions import DatabaseConnectionError, DatabaseQueryError
from learning_api.services.db_probe import probe_database


class TestDbTestRoute:
    """Tests for GET /db-test."""

    @pytest.mark.asyncio
    async def test_probe_success(self, test_client, fake_db_client, use_db_client):
        use_db_client(fake_db_client)

        response = await test_client.get("/db-test")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Database connection successful"
        assert body["database"] == "Supabase PostgreSQL"
        assert body["userCount"] == 3
        assert body["postCount"] == 5
        datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))
        fake_db_client.connect.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unreachable_database(self, test_client, fake_db_client, use_db_client):
        fake_db_client.connect.side_effect = DatabaseConnectionError(
            message="connection refused"
        )
        use_db_client(fake_db_client)

        response = await test_client.get("/db-test")

        assert response.status_code == 500
        assert response.json() == {
            "error": "Database connection failed",
            "message": "connection refused",
        }
        fake_db_client.count.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_count_query(self, test_client, fake_db_client, use_db_client):
        fake_db_client.count.side_effect = DatabaseQueryError(
            message='relation "posts" does not exist', entity="post"
        )
        use_db_client(fake_db_client)

        response = await test_client.get("/db-test")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Database connection failed"
        assert "posts" in body["message"]

    @pytest.mark.asyncio
    async def test_client_bug_is_internal_error(self, test_client, fake_db_client, use_db_client):
        fake_db_client.connect.side_effect = AttributeError("'NoneType' has no attribute 'execute'")
        use_db_client(fake_db_client)

        response = await test_client.get("/db-test")

        assert response.status_code == 500
        assert response.json()["error"] == "Internal Server Error"


class TestProbeDatabase:
    """Tests for the probe_database service function."""

    @pytest.mark.asyncio
    async def test_counts_both_entities(self, fake_db_client):
        result = await probe_database(fake_db_client, "Local PostgreSQL")

        assert result.database == "Local PostgreSQL"
        assert (result.user_count, result.post_count) == (3, 5)
        assert [call.args[0] for call in fake_db_client.count.await_args_list] == ["user", "post"]

    @pytest.mark.asyncio
    async def test_connection_error_propagates(self, fake_db_client):
        fake_db_client.connect.side_effect = DatabaseConnectionError()

        with pytest.raises(DatabaseConnectionError):
            await probe_database(fake_db_client, "Supabase PostgreSQL")
