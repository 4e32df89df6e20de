"""
Test configuration and fixtures for the Uptime Dashboard tests.
"""
import asyncio
import os
from typing import Any, Dict, List, Mapping, Optional

os.environ["ENVIRONMENT"] = "testing"

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient

from uptime_dashboard.api.deps import get_gateway
from uptime_dashboard.core.database import create_store_engine
from uptime_dashboard.core.exceptions import IdentityUnavailable, StoreUnavailable
from uptime_dashboard.core.settings.testing import TestingSettings
from uptime_dashboard.core.store.base import Record, RecordStore
from uptime_dashboard.core.store.sql import SqlRecordStore
from uptime_dashboard.crud.gateway import Gateway
from uptime_dashboard.main import app
from uptime_dashboard.schemas.common import Identity

# Use in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"

TEST_USER_ID = "user-123"
OTHER_USER_ID = "user-456"


class StubAvailability:
    """Availability capability with a fixed (but switchable) answer."""

    def __init__(self, available: bool):
        self.available = available
        self.calls = 0

    async def is_available(self) -> bool:
        self.calls += 1
        return self.available


class FailingStore(RecordStore):
    """A store where every call fails, including identity."""

    def __init__(self):
        self.calls = 0

    async def list(self, table, *, where=None, order_by=None, descending=True, limit=None):
        self.calls += 1
        raise StoreUnavailable("connection refused")

    async def create(self, table, record):
        self.calls += 1
        raise StoreUnavailable("connection refused")

    async def update(self, table, id, record, *, where=None):
        self.calls += 1
        raise StoreUnavailable("connection refused")

    async def delete(self, table, id, *, where=None):
        self.calls += 1
        raise StoreUnavailable("connection refused")

    async def current_user(self) -> Identity:
        raise IdentityUnavailable("no session")


class HangingStore(RecordStore):
    """A store whose calls never return."""

    async def _hang(self):
        await asyncio.Event().wait()

    async def list(self, table, *, where=None, order_by=None, descending=True, limit=None):
        await self._hang()

    async def create(self, table, record):
        await self._hang()

    async def update(self, table, id, record, *, where=None):
        await self._hang()

    async def delete(self, table, id, *, where=None):
        await self._hang()

    async def current_user(self) -> Identity:
        await self._hang()


class FlakyStore(RecordStore):
    """
    Wraps a working store; ``down`` makes every call fail and
    ``writes_fail`` makes only writes fail. Writes are counted per table.
    """

    def __init__(self, inner: RecordStore):
        self.inner = inner
        self.down = False
        self.writes_fail = False
        self.writes: Dict[str, int] = {}

    def _check(self, write: bool = False) -> None:
        if self.down or (write and self.writes_fail):
            raise StoreUnavailable("store is down")

    async def list(
        self,
        table: str,
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = True,
        limit: Optional[int] = None,
    ) -> List[Record]:
        self._check()
        return await self.inner.list(
            table, where=where, order_by=order_by, descending=descending, limit=limit
        )

    async def create(self, table: str, record: Mapping[str, Any]) -> Record:
        self._check(write=True)
        self.writes[table] = self.writes.get(table, 0) + 1
        return await self.inner.create(table, record)

    async def update(
        self,
        table: str,
        id: str,
        record: Mapping[str, Any],
        *,
        where: Optional[Mapping[str, Any]] = None,
    ) -> Record:
        self._check(write=True)
        self.writes[table] = self.writes.get(table, 0) + 1
        return await self.inner.update(table, id, record, where=where)

    async def delete(
        self, table: str, id: str, *, where: Optional[Mapping[str, Any]] = None
    ) -> None:
        self._check(write=True)
        self.writes[table] = self.writes.get(table, 0) + 1
        await self.inner.delete(table, id, where=where)

    async def current_user(self) -> Identity:
        return await self.inner.current_user()


@pytest.fixture
def test_settings() -> TestingSettings:
    """Settings with short store timeouts."""
    return TestingSettings()


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database for each test."""
    engine = create_store_engine(TEST_DATABASE_URL)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine) -> SqlRecordStore:
    """SQL record store bound to the test user, tables created."""
    store = SqlRecordStore(engine, user_id=TEST_USER_ID)
    store.create_tables()
    return store


@pytest.fixture
def gateway(store, test_settings) -> Gateway:
    """Gateway on the live (reachable) store."""
    return Gateway(store, settings=test_settings)


@pytest.fixture
def degraded_availability() -> StubAvailability:
    return StubAvailability(False)


@pytest.fixture
def degraded_gateway(store, test_settings, degraded_availability) -> Gateway:
    """Gateway whose availability probe always says the store is down."""
    return Gateway(store, settings=test_settings, availability=degraded_availability)


@pytest.fixture
def failing_gateway(test_settings) -> Gateway:
    """Gateway on a store that rejects every call."""
    return Gateway(FailingStore(), settings=test_settings)


@pytest.fixture
def flaky_store(store) -> FlakyStore:
    return FlakyStore(store)


@pytest.fixture
def flaky_gateway(flaky_store, test_settings) -> Gateway:
    return Gateway(flaky_store, settings=test_settings)


@pytest_asyncio.fixture
async def async_client(store, test_settings):
    """Async HTTP client wired to the live SQL store."""
    app.state.settings = test_settings
    app.state.store = store

    async with AsyncClient(base_url="http://test", transport=httpx.ASGITransport(app=app)) as ac:
        yield ac

    app.state.store = None
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def degraded_client(degraded_gateway, test_settings):
    """Async HTTP client whose gateway serves fallback data."""
    app.state.settings = test_settings
    app.dependency_overrides[get_gateway] = lambda: degraded_gateway

    async with AsyncClient(base_url="http://test", transport=httpx.ASGITransport(app=app)) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def api_v1_prefix(test_settings) -> str:
    return test_settings.API_V1_STR


@pytest.fixture
def user_headers() -> Dict[str, str]:
    return {"X-User-Id": TEST_USER_ID}


@pytest.fixture
def resource_data() -> Dict[str, Any]:
    return {
        "name": "Main Website",
        "tags": ["Production", "Website"],
        "status": "online",
        "responseTime": 245,
    }
