"""
Test degraded mode: the store is unreachable and fallback data is served.
"""
import pytest

from conftest import TEST_USER_ID
from uptime_dashboard.core.exceptions import EntityValidationError
from uptime_dashboard.core.store.sql import SqlRecordStore
from uptime_dashboard.crud.gateway import Gateway


class TestDegradedReads:
    """Test list operations in degraded mode."""

    async def test_list_resources_returns_seed(self, degraded_gateway: Gateway):
        """Resources come from the sample dataset, owned by the caller."""
        resources = await degraded_gateway.resources.list()

        assert [r.name for r in resources] == ["Main Website", "API Endpoint", "SSL Certificate"]
        assert [r.status for r in resources] == ["online", "warning", "offline"]
        assert all(r.assigned_user_id == TEST_USER_ID for r in resources)

    async def test_list_checks_filtered_by_resource(self, degraded_gateway: Gateway):
        """Fallback checks honour the resource filter."""
        checks = await degraded_gateway.checks.list(resource_id="2")

        assert [c.title for c in checks] == ["API Response Time"]
        assert len(await degraded_gateway.checks.list()) == 3

    async def test_list_events_newest_first_with_limit(self, degraded_gateway: Gateway):
        """Fallback events are newest first and respect the limit."""
        events = await degraded_gateway.events.list()
        limited = await degraded_gateway.events.list(limit=2)

        assert [e.type for e in events] == ["warning", "success", "failure"]
        assert events[0].timestamp > events[1].timestamp > events[2].timestamp
        assert [e.id for e in limited] == [e.id for e in events[:2]]

    async def test_list_notifications(self, degraded_gateway: Gateway):
        notifications = await degraded_gateway.notifications.list()

        assert len(notifications) == 1
        assert notifications[0].conditions == {"onFailure": True, "onWarning": False}
        assert notifications[0].user_id == TEST_USER_ID

    async def test_store_not_queried(self, degraded_gateway: Gateway, store: SqlRecordStore):
        """Real rows are hidden while degraded."""
        await store.create(
            "resources",
            {
                "id": "real",
                "userId": TEST_USER_ID,
                "name": "Real",
                "createdAt": "2024-01-01T00:00:00.000Z",
                "updatedAt": "2024-01-01T00:00:00.000Z",
            },
        )

        resources = await degraded_gateway.resources.list()

        assert "real" not in [r.id for r in resources]

    async def test_is_degraded(self, degraded_gateway: Gateway, gateway: Gateway):
        assert await degraded_gateway.is_degraded() is True
        assert await gateway.is_degraded() is False


class TestDegradedWrites:
    """Test simulated writes in degraded mode."""

    async def test_create_resource_is_simulated(self, degraded_gateway: Gateway, store: SqlRecordStore):
        """Creates return a plausible entity that is not persisted."""
        resource = await degraded_gateway.resources.create({"name": "X"})

        assert resource.id
        assert resource.name == "X"
        assert resource.created_at == resource.updated_at
        assert resource.slug == "x"
        assert await store.list("resources") == []

    async def test_simulated_create_not_listed(self, degraded_gateway: Gateway):
        """A following list still serves the sample dataset."""
        resource = await degraded_gateway.resources.create({"name": "X"})

        resources = await degraded_gateway.resources.list()

        assert resource.id not in [r.id for r in resources]
        assert len(resources) == 3

    async def test_create_check_is_simulated(self, degraded_gateway: Gateway):
        check = await degraded_gateway.checks.create(
            {"title": "Login Page", "resourceId": "1", "testType": "content"}
        )

        assert check.id.startswith("check_")
        assert check.name == "login-page"
        assert check.user_id == TEST_USER_ID

    async def test_update_resource_is_simulated(self, degraded_gateway: Gateway, store: SqlRecordStore):
        """Simulated updates merge the input over placeholder defaults."""
        updated = await degraded_gateway.resources.update("1", {"status": "online"})

        assert updated.id == "1"
        assert updated.status == "online"
        assert updated.name == "Updated Resource"
        assert updated.created_at == updated.updated_at
        assert await store.list("resources") == []

    async def test_update_check_is_simulated(self, degraded_gateway: Gateway):
        updated = await degraded_gateway.checks.update("check_9", {"title": "Renamed"})

        assert updated.id == "check_9"
        assert updated.title == "Renamed"
        assert updated.name == "updated-check"

    async def test_delete_is_noop(self, gateway: Gateway, degraded_gateway: Gateway):
        """Deletes report success but leave the store alone."""
        resource = await gateway.resources.create({"name": "Survivor"})

        await degraded_gateway.resources.delete(resource.id)

        assert [r.id for r in await gateway.resources.list()] == [resource.id]

    async def test_validation_still_applies(self, degraded_gateway: Gateway):
        """Bad input is rejected even when nothing would be written."""
        with pytest.raises(EntityValidationError):
            await degraded_gateway.resources.create({"name": ""})
        with pytest.raises(EntityValidationError):
            await degraded_gateway.checks.create({"title": "No resource"})


class TestFailingStore:
    """Test a store where every call fails, identity included."""

    async def test_list_never_raises(self, failing_gateway: Gateway, test_settings):
        """Reads fall back to seed data owned by the anonymous identity."""
        resources = await failing_gateway.resources.list()
        checks = await failing_gateway.checks.list()
        events = await failing_gateway.events.list()
        notifications = await failing_gateway.notifications.list()

        assert (len(resources), len(checks), len(events), len(notifications)) == (3, 3, 3, 1)
        assert all(r.assigned_user_id == test_settings.ANONYMOUS_USER_ID for r in resources)

    async def test_writes_are_simulated(self, failing_gateway: Gateway):
        resource = await failing_gateway.resources.create({"name": "X"})
        notification = await failing_gateway.notifications.create({"resourceId": resource.id})
        event = await failing_gateway.events.create(
            {"resourceId": resource.id, "checkId": "c1", "type": "failure", "message": "down"}
        )

        assert resource.id and notification.id and event.id
        assert event.message == "down"
        await failing_gateway.resources.delete(resource.id)
