from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, ValidationError, field_validator, model_validator

from uptime_dashboard.schemas.common import MonitorModel, TestType
from uptime_dashboard.schemas.criteria import parse_criteria

DEFAULT_SCHEDULE = "*/15 * * * *"


def validate_criteria(test_type: TestType, criteria: Dict[str, Any]) -> None:
    try:
        parse_criteria(test_type, criteria)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ValueError(f"invalid criteria for {test_type.value} check: {problems}")


class CheckBase(MonitorModel):
    title: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    # Cron expression, stored as given
    schedule: str = DEFAULT_SCHEDULE
    test_type: TestType = TestType.UPTIME
    resource_id: Optional[str] = None
    criteria: Dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True


class CheckCreate(CheckBase):
    title: str
    resource_id: str
    # Generated from the title when omitted; never recomputed afterwards
    name: Optional[str] = None

    @model_validator(mode="after")
    def validate_check(self) -> "CheckCreate":
        if not self.title.strip():
            raise ValueError("title must not be blank")
        if not self.resource_id.strip():
            raise ValueError("resourceId is required")
        validate_criteria(self.test_type, self.criteria)
        return self


class CheckUpdate(MonitorModel):
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    schedule: Optional[str] = None
    test_type: Optional[TestType] = None
    resource_id: Optional[str] = None
    criteria: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("title must not be blank")
        return value

    @field_validator("resource_id")
    @classmethod
    def resource_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("resourceId must not be blank")
        return value

    @model_validator(mode="after")
    def validate_criteria_shape(self) -> "CheckUpdate":
        # Without a test type here the stored check's type applies
        # when the update is written.
        if self.criteria is not None and self.test_type is not None:
            validate_criteria(self.test_type, self.criteria)
        return self


class Check(CheckBase):
    id: str
    name: str
    title: str
    resource_id: str = ""
    user_id: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
