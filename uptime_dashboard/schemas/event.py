from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from uptime_dashboard.schemas.common import EventType, MonitorModel


class EventCreate(MonitorModel):
    resource_id: str
    check_id: str
    type: EventType
    message: str = ""
    details: Dict[str, Any] = Field(default_factory=dict)
    # Defaults to the time of creation
    timestamp: Optional[datetime] = None

    @field_validator("resource_id", "check_id")
    @classmethod
    def reference_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class Event(MonitorModel):
    id: str
    resource_id: str = ""
    check_id: str = ""
    type: EventType
    message: str = ""
    details: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime
