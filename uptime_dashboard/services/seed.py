"""
Sample dataset for demos and degraded-mode reads.

The shape is fixed (three resources, one check and one event per resource,
one notification); timestamps are relative to the moment of the call.
"""
import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Dict, List, Optional

from pydantic import BaseModel

from uptime_dashboard.schemas.check import Check, CheckCreate
from uptime_dashboard.schemas.common import (
    EventType,
    NotificationType,
    ResourceStatus,
    TestType,
)
from uptime_dashboard.schemas.event import Event, EventCreate
from uptime_dashboard.schemas.notification import Notification, NotificationCreate
from uptime_dashboard.schemas.resource import Resource, ResourceCreate
from uptime_dashboard.utils.dates import utcnow

if TYPE_CHECKING:
    from uptime_dashboard.crud.gateway import Gateway

logger = logging.getLogger(__name__)


class SeedDataset(BaseModel):
    resources: List[Resource]
    checks: List[Check]
    events: List[Event]
    notifications: List[Notification]


class SeedResult(BaseModel):
    writes: int = 0
    skipped_reason: Optional[str] = None

    @property
    def seeded(self) -> bool:
        return self.writes > 0 and self.skipped_reason is None


def build_seed_dataset(owner_id: str, now: Optional[datetime] = None) -> SeedDataset:
    now = now or utcnow()

    def minutes_ago(minutes: int) -> datetime:
        return now - timedelta(minutes=minutes)

    def hours_ago(hours: int) -> datetime:
        return now - timedelta(hours=hours)

    resources = [
        Resource(
            id="1",
            name="Main Website",
            slug="main-website",
            tags=["Production", "Website", "Critical"],
            status=ResourceStatus.ONLINE,
            last_checked=minutes_ago(5),
            response_time=245,
            assigned_user_id=owner_id,
            created_at=hours_ago(24),
            updated_at=now,
        ),
        Resource(
            id="2",
            name="API Endpoint",
            slug="api-endpoint",
            tags=["Production", "API", "Backend"],
            status=ResourceStatus.WARNING,
            last_checked=minutes_ago(2),
            response_time=1200,
            assigned_user_id=owner_id,
            created_at=hours_ago(12),
            updated_at=now,
        ),
        Resource(
            id="3",
            name="SSL Certificate",
            slug="ssl-certificate",
            tags=["Security", "SSL", "Production"],
            status=ResourceStatus.OFFLINE,
            last_checked=minutes_ago(10),
            response_time=0,
            assigned_user_id=owner_id,
            created_at=hours_ago(48),
            updated_at=now,
        ),
    ]

    checks = [
        Check(
            id="1",
            resource_id="1",
            test_type=TestType.UPTIME,
            name="website-uptime-check",
            title="Website Uptime Check",
            description="Monitor main website availability",
            tags=["uptime", "critical"],
            criteria={"timeout": 30, "expectedStatus": 200},
            schedule="*/5 * * * *",
            is_active=True,
            user_id=owner_id,
            created_at=hours_ago(24),
            updated_at=now,
        ),
        Check(
            id="2",
            resource_id="2",
            test_type=TestType.RESPONSE_TIME,
            name="api-response-time",
            title="API Response Time",
            description="Monitor API endpoint response time",
            tags=["performance", "api"],
            criteria={"maxResponseTime": 1000},
            schedule="*/2 * * * *",
            is_active=True,
            user_id=owner_id,
            created_at=hours_ago(12),
            updated_at=now,
        ),
        Check(
            id="3",
            resource_id="3",
            test_type=TestType.SSL,
            name="ssl-certificate-expiry",
            title="SSL Certificate Expiry",
            description="Check SSL certificate expiration",
            tags=["security", "ssl"],
            criteria={"daysBeforeExpiry": 30},
            schedule="0 0 * * *",
            is_active=True,
            user_id=owner_id,
            created_at=hours_ago(48),
            updated_at=now,
        ),
    ]

    # Newest first, matching how the store lists events
    events = [
        Event(
            id="2",
            resource_id="2",
            check_id="2",
            type=EventType.WARNING,
            message="Response time exceeded threshold",
            details={"statusCode": 200, "responseTime": 1200, "threshold": 1000},
            timestamp=minutes_ago(2),
        ),
        Event(
            id="1",
            resource_id="1",
            check_id="1",
            type=EventType.SUCCESS,
            message="Website is responding normally",
            details={"statusCode": 200, "responseTime": 245},
            timestamp=minutes_ago(5),
        ),
        Event(
            id="3",
            resource_id="3",
            check_id="3",
            type=EventType.FAILURE,
            message="SSL certificate check failed",
            details={"error": "Connection timeout"},
            timestamp=minutes_ago(10),
        ),
    ]

    notifications = [
        Notification(
            id="1",
            resource_id="1",
            user_id=owner_id,
            type=NotificationType.EMAIL,
            conditions={"onFailure": True, "onWarning": False},
            is_active=True,
            created_at=hours_ago(24),
            updated_at=now,
        )
    ]

    return SeedDataset(
        resources=resources, checks=checks, events=events, notifications=notifications
    )


async def seed_sample_data(gateway: "Gateway") -> SeedResult:
    """
    Write the sample dataset through the gateway for the current caller.

    Does nothing when the caller already has resources or when the store is
    unavailable (degraded reads already serve the same data), so running it
    repeatedly is safe. Only records the store actually kept are counted;
    seeding stops at the first write it does not keep.
    """
    identity = await gateway.current_identity()

    if await gateway.is_degraded():
        logger.info("Record store not available, sample data will be served from fallback data")
        return SeedResult(skipped_reason="store unavailable")

    existing = await gateway.resources.list(limit=1)
    if existing:
        logger.info("Sample data already exists")
        return SeedResult(skipped_reason="resources already exist")

    logger.info(f"Seeding sample data for user {identity.id}...")
    dataset = build_seed_dataset(identity.id)
    writes = 0

    def rejected(kind: str) -> SeedResult:
        logger.warning(f"Record store did not keep a seeded {kind}, stopping after {writes} records")
        return SeedResult(writes=writes, skipped_reason="store rejected writes")

    resource_ids: Dict[str, str] = {}
    for resource in dataset.resources:
        created, stored = await gateway.resources.create_record(
            ResourceCreate(
                name=resource.name,
                tags=resource.tags,
                status=resource.status,
                last_checked=resource.last_checked,
                response_time=resource.response_time,
                assigned_user_id=identity.id,
            )
        )
        if not stored:
            return rejected("resource")
        resource_ids[resource.id] = created.id
        writes += 1

    check_ids: Dict[str, str] = {}
    for check in dataset.checks:
        created, stored = await gateway.checks.create_record(
            CheckCreate(
                resource_id=resource_ids[check.resource_id],
                test_type=check.test_type,
                name=check.name,
                title=check.title,
                description=check.description,
                tags=check.tags,
                criteria=check.criteria,
                schedule=check.schedule,
                is_active=check.is_active,
            )
        )
        if not stored:
            return rejected("check")
        check_ids[check.id] = created.id
        writes += 1

    for event in dataset.events:
        _, stored = await gateway.events.create_record(
            EventCreate(
                resource_id=resource_ids[event.resource_id],
                check_id=check_ids[event.check_id],
                type=event.type,
                message=event.message,
                details=event.details,
                timestamp=event.timestamp,
            )
        )
        if not stored:
            return rejected("event")
        writes += 1

    for notification in dataset.notifications:
        _, stored = await gateway.notifications.create_record(
            NotificationCreate(
                resource_id=resource_ids[notification.resource_id],
                user_id=identity.id,
                type=notification.type,
                conditions=notification.conditions,
                is_active=notification.is_active,
            )
        )
        if not stored:
            return rejected("notification")
        writes += 1

    logger.info(f"Sample data seeded successfully ({writes} records)")
    return SeedResult(writes=writes)
