"""
Test the Supabase record store against a mocked client.
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, call

import pytest

from uptime_dashboard.core.exceptions import IdentityUnavailable, StoreUnavailable
from uptime_dashboard.core.store.supabase import SupabaseRecordStore


def mock_client(data=None):
    """A client whose query builder chains and executes to ``data``."""
    query = MagicMock()
    for method in ("select", "eq", "order", "limit", "insert", "update", "delete"):
        getattr(query, method).return_value = query
    query.execute = AsyncMock(return_value=SimpleNamespace(data=data))

    client = MagicMock()
    client.table.return_value = query
    client.auth.get_user = AsyncMock()
    return client, query


class TestSupabaseRecordStore:
    """Test query building and error mapping."""

    async def test_list_builds_query(self):
        client, query = mock_client(data=[{"id": "r1"}])
        store = SupabaseRecordStore(client)

        records = await store.list(
            "resources", where={"userId": "u1"}, order_by="createdAt", limit=5
        )

        assert records == [{"id": "r1"}]
        client.table.assert_called_once_with("resources")
        query.select.assert_called_once_with("*")
        query.eq.assert_called_once_with("userId", "u1")
        query.order.assert_called_once_with("createdAt", desc=True)
        query.limit.assert_called_once_with(5)

    async def test_list_empty_response(self):
        client, _ = mock_client(data=None)
        assert await SupabaseRecordStore(client).list("events") == []

    async def test_create_returns_first_row(self):
        client, query = mock_client(data=[{"id": "r1", "name": "Site"}])

        record = await SupabaseRecordStore(client).create("resources", {"id": "r1", "name": "Site"})

        assert record == {"id": "r1", "name": "Site"}
        query.insert.assert_called_once_with({"id": "r1", "name": "Site"})

    async def test_create_without_row_raises(self):
        client, _ = mock_client(data=[])
        with pytest.raises(StoreUnavailable):
            await SupabaseRecordStore(client).create("resources", {"id": "r1"})

    async def test_update_scopes_by_id(self):
        client, query = mock_client(data=[{"id": "r1", "status": "online"}])

        record = await SupabaseRecordStore(client).update("resources", "r1", {"status": "online"})

        assert record["status"] == "online"
        query.update.assert_called_once_with({"status": "online"})
        query.eq.assert_called_once_with("id", "r1")

    async def test_update_and_delete_scope_by_owner(self):
        client, query = mock_client(data=[{"id": "r1", "name": "Site"}])
        store = SupabaseRecordStore(client)

        await store.update("resources", "r1", {"name": "Site"}, where={"userId": "u1"})
        await store.delete("resources", "r1", where={"userId": "u1"})

        assert query.eq.call_args_list == [
            call("id", "r1"),
            call("userId", "u1"),
            call("id", "r1"),
            call("userId", "u1"),
        ]

    async def test_update_missing_row_raises(self):
        client, _ = mock_client(data=[])
        with pytest.raises(StoreUnavailable):
            await SupabaseRecordStore(client).update("resources", "missing", {"name": "x"})

    async def test_delete(self):
        client, query = mock_client(data=[])

        await SupabaseRecordStore(client).delete("checks", "c1")

        query.delete.assert_called_once_with()
        query.eq.assert_called_once_with("id", "c1")

    async def test_current_user(self):
        client, _ = mock_client()
        client.auth.get_user.return_value = SimpleNamespace(user=SimpleNamespace(id="user-1"))

        assert (await SupabaseRecordStore(client).current_user()).id == "user-1"

    async def test_current_user_without_session(self):
        client, _ = mock_client()
        client.auth.get_user.return_value = None

        with pytest.raises(IdentityUnavailable):
            await SupabaseRecordStore(client).current_user()
