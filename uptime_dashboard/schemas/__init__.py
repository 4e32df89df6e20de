from uptime_dashboard.schemas.check import Check, CheckCreate, CheckUpdate
from uptime_dashboard.schemas.common import (
    EventType,
    Identity,
    NotificationType,
    ResourceStatus,
    TestType,
)
from uptime_dashboard.schemas.event import Event, EventCreate
from uptime_dashboard.schemas.notification import (
    Notification,
    NotificationCreate,
    NotificationUpdate,
)
from uptime_dashboard.schemas.resource import Resource, ResourceCreate, ResourceUpdate

__all__ = [
    "Identity",
    "ResourceStatus",
    "TestType",
    "EventType",
    "NotificationType",
    "Resource",
    "ResourceCreate",
    "ResourceUpdate",
    "Check",
    "CheckCreate",
    "CheckUpdate",
    "Event",
    "EventCreate",
    "Notification",
    "NotificationCreate",
    "NotificationUpdate",
]
