from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field, ValidationError, field_validator

from uptime_dashboard.schemas.common import MonitorModel, NotificationType
from uptime_dashboard.schemas.criteria import NotificationConditions


def _validate_conditions(value: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if value is None:
        return value
    try:
        NotificationConditions.model_validate(value)
    except ValidationError as e:
        raise ValueError(f"invalid notification conditions: {e.error_count()} error(s)")
    return value


class NotificationCreate(MonitorModel):
    resource_id: str
    # Recipient; defaults to the caller
    user_id: Optional[str] = None
    type: NotificationType = NotificationType.EMAIL
    conditions: Dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True

    @field_validator("resource_id")
    @classmethod
    def resource_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("resourceId is required")
        return value

    @field_validator("conditions")
    @classmethod
    def conditions_shape(cls, value):
        return _validate_conditions(value)


class NotificationUpdate(MonitorModel):
    resource_id: Optional[str] = None
    user_id: Optional[str] = None
    type: Optional[NotificationType] = None
    conditions: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None

    @field_validator("conditions")
    @classmethod
    def conditions_shape(cls, value):
        return _validate_conditions(value)


class Notification(MonitorModel):
    id: str
    resource_id: str = ""
    user_id: str = ""
    type: NotificationType = NotificationType.EMAIL
    conditions: Dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
