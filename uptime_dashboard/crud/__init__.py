from .availability import StoreAvailability
from .check import CRUDCheck
from .event import CRUDEvent
from .gateway import Gateway
from .notification import CRUDNotification
from .resource import CRUDResource

__all__ = [
    "Gateway",
    "StoreAvailability",
    "CRUDResource",
    "CRUDCheck",
    "CRUDEvent",
    "CRUDNotification",
]
