from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MonitorModel(BaseModel):
    """Base schema: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ResourceStatus(str, Enum):
    ONLINE = "online"
    WARNING = "warning"
    OFFLINE = "offline"


class TestType(str, Enum):
    UPTIME = "uptime"
    CERTIFICATE = "certificate"
    RESPONSE_TIME = "response_time"
    CONTENT = "content"
    SSL = "ssl"
    DNS = "dns"
    PORT = "port"


class EventType(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    FAILURE = "failure"


class NotificationType(str, Enum):
    EMAIL = "email"
    WEBHOOK = "webhook"


class Identity(MonitorModel):
    id: str
