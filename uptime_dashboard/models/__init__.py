from .check import Check
from .event import Event
from .notification import Notification
from .resource import Resource

__all__ = [
    "Resource",
    "Check",
    "Event",
    "Notification",
]
