"""
Test conversion between store records and entities.
"""
import json
from datetime import datetime, timezone

import pytest

from uptime_dashboard.schemas.check import Check
from uptime_dashboard.schemas.codec import (
    decode_check,
    decode_event,
    decode_notification,
    decode_resource,
    encode_check,
    encode_check_update,
    encode_event,
    encode_notification,
    encode_resource,
    load_list,
    load_map,
    to_flag,
)
from uptime_dashboard.schemas.event import Event
from uptime_dashboard.schemas.notification import Notification
from uptime_dashboard.schemas.resource import Resource

CREATED = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
UPDATED = datetime(2024, 3, 2, 8, 30, 15, 123000, tzinfo=timezone.utc)


def make_check(**overrides) -> Check:
    data = {
        "id": "check_1",
        "resource_id": "resource_1",
        "test_type": "uptime",
        "name": "website-uptime-check",
        "title": "Website Uptime Check",
        "description": "Monitor main website availability",
        "tags": ["uptime", "critical"],
        "criteria": {"timeout": 30, "expectedStatus": 200},
        "schedule": "*/5 * * * *",
        "is_active": True,
        "user_id": "user-1",
        "created_at": CREATED,
        "updated_at": UPDATED,
    }
    data.update(overrides)
    return Check(**data)


class TestPrimitiveHelpers:
    """Test the JSON and flag helpers."""

    def test_load_list_malformed_is_empty(self):
        """Malformed, missing or wrongly shaped lists decode to []."""
        assert load_list("not json") == []
        assert load_list(None) == []
        assert load_list("") == []
        assert load_list('{"a": 1}') == []

    def test_load_map_malformed_is_empty(self):
        """Malformed, missing or wrongly shaped maps decode to {}."""
        assert load_map("{broken") == {}
        assert load_map(None) == {}
        assert load_map("[1, 2]") == {}

    def test_load_values_already_decoded(self):
        """Already-decoded values are copied, not shared."""
        tags = ["a", "b"]
        loaded = load_list(tags)
        assert loaded == tags
        assert loaded is not tags
        assert load_map({"nested": {"x": 1}}) == {"nested": {"x": 1}}

    @pytest.mark.parametrize(
        "value,expected",
        [(0, False), (1, True), (2, True), ("1", True), ("0", False), (None, False), (True, True)],
    )
    def test_to_flag(self, value, expected):
        """Any stored value numerically above zero is true."""
        assert to_flag(value) is expected


class TestResourceCodec:
    """Test resource encoding and decoding."""

    def test_encode_resource_record_shape(self):
        """Resources encode to camelCase records with JSON tags."""
        resource = Resource(
            id="resource_1",
            name="Main Website",
            slug="main-website",
            tags=["Production", "Website"],
            status="online",
            response_time=245,
            assigned_user_id="user-1",
            created_at=CREATED,
            updated_at=UPDATED,
        )
        record = encode_resource(resource)

        assert record["id"] == "resource_1"
        assert json.loads(record["tags"]) == ["Production", "Website"]
        assert record["status"] == "online"
        assert record["responseTime"] == 245
        assert record["assignedUserId"] == "user-1"
        assert record["lastChecked"] == ""
        assert record["createdAt"] == "2024-03-01T12:00:00.000Z"
        assert record["updatedAt"] == "2024-03-02T08:30:15.123Z"

    def test_resource_round_trip(self):
        """decode(encode(r)) gives back the same resource."""
        resource = Resource(
            id="resource_1",
            name="API Endpoint",
            slug="api-endpoint",
            tags=["API"],
            status="warning",
            last_checked=UPDATED,
            response_time=1200,
            assigned_user_id="user-1",
            created_at=CREATED,
            updated_at=UPDATED,
        )
        assert decode_resource(encode_resource(resource)) == resource

    def test_decode_resource_empty_last_checked(self):
        """An empty lastChecked means the resource was never checked."""
        resource = decode_resource(
            {"id": "r1", "name": "Site", "status": "online", "lastChecked": ""}
        )
        assert resource.last_checked is None

    def test_decode_resource_malformed_fields(self):
        """Broken nested fields never fail the decode."""
        resource = decode_resource(
            {"id": "r1", "name": "Site", "tags": "not json", "responseTime": -5}
        )
        assert resource.tags == []
        assert resource.response_time == 0
        assert resource.status == "offline"


class TestCheckCodec:
    """Test check encoding and decoding."""

    @pytest.mark.parametrize(
        "tags,criteria",
        [
            ([], {}),
            (["uptime"], {"timeout": 30}),
            (["uptime", "critical"], {"timeout": 30, "expectedStatus": 200}),
        ],
    )
    def test_check_round_trip(self, tags, criteria):
        """Tags and criteria survive a store round trip."""
        check = make_check(tags=tags, criteria=criteria)
        assert decode_check(encode_check(check)) == check

    def test_encode_check_is_active_flag(self):
        """isActive is stored as 0/1."""
        assert encode_check(make_check(is_active=True))["isActive"] == 1
        assert encode_check(make_check(is_active=False))["isActive"] == 0

    def test_decode_check_is_active_above_zero(self):
        """Any positive stored flag decodes as active."""
        check = decode_check({"id": "c1", "name": "c", "title": "C", "isActive": 2})
        assert check.is_active is True

    def test_decode_check_legacy_type_column(self):
        """Old rows keep the test type under ``type``."""
        check = decode_check({"id": "c1", "name": "ssl-expiry", "title": "SSL", "type": "ssl"})
        assert check.test_type == "ssl"

    def test_decode_check_prefers_test_type(self):
        """testType wins over a legacy type column."""
        check = decode_check(
            {"id": "c1", "name": "c", "title": "C", "testType": "dns", "type": "ssl"}
        )
        assert check.test_type == "dns"

    def test_decode_check_title_defaults_to_name(self):
        """Rows without a title show their name."""
        check = decode_check({"id": "c1", "name": "website-uptime"})
        assert check.title == "website-uptime"

    def test_decode_check_malformed_criteria(self):
        """Malformed criteria decode to an empty map."""
        check = decode_check(
            {"id": "c1", "name": "c", "title": "C", "criteria": "[1, 2]", "tags": "{oops"}
        )
        assert check.criteria == {}
        assert check.tags == []

    def test_encode_check_update_only_supplied_fields(self):
        """Partial updates encode just the supplied fields."""
        record = encode_check_update({"title": "New title", "is_active": False})
        assert record == {"title": "New title", "isActive": 0}


class TestEventCodec:
    """Test event encoding and decoding."""

    @pytest.mark.parametrize(
        "details",
        [
            {},
            {"statusCode": 500},
            {"statusCode": 200, "responseTime": 1200, "threshold": 1000},
        ],
    )
    def test_event_round_trip(self, details):
        """Details survive a store round trip."""
        event = Event(
            id="event_1",
            resource_id="resource_1",
            check_id="check_1",
            type="warning",
            message="Response time exceeded threshold",
            details=details,
            timestamp=UPDATED,
        )
        record = encode_event(event)
        assert json.loads(record["details"]) == details
        assert decode_event(record) == event

    def test_decode_event_missing_details(self):
        """Missing details decode to an empty map."""
        event = decode_event(
            {"id": "e1", "type": "failure", "timestamp": "2024-03-01T12:00:00.000Z"}
        )
        assert event.details == {}
        assert event.timestamp == CREATED


class TestNotificationCodec:
    """Test notification encoding and decoding."""

    @pytest.mark.parametrize(
        "conditions",
        [
            {},
            {"onFailure": True},
            {"onFailure": True, "onWarning": False, "minDowntime": 5},
        ],
    )
    def test_notification_recipient_column(self, conditions):
        """The recipient is stored apart from the owner column; conditions round trip."""
        notification = Notification(
            id="notification_1",
            resource_id="resource_1",
            user_id="recipient-1",
            type="webhook",
            conditions=conditions,
            is_active=False,
            created_at=CREATED,
            updated_at=CREATED,
        )
        record = encode_notification(notification)

        assert record["notificationUserId"] == "recipient-1"
        assert "userId" not in record
        assert record["isActive"] == 0
        assert json.loads(record["conditions"]) == conditions
        assert decode_notification(record) == notification
