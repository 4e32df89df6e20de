from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from uptime_dashboard.schemas.common import MonitorModel, ResourceStatus


class ResourceBase(MonitorModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    status: ResourceStatus = ResourceStatus.OFFLINE
    last_checked: Optional[datetime] = None
    response_time: int = Field(default=0, ge=0)
    assigned_user_id: Optional[str] = None

    @field_validator("last_checked", mode="before")
    @classmethod
    def empty_means_never(cls, value):
        return value or None


class ResourceCreate(ResourceBase):
    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


class ResourceUpdate(MonitorModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[ResourceStatus] = None
    last_checked: Optional[datetime] = None
    response_time: Optional[int] = Field(default=None, ge=0)
    assigned_user_id: Optional[str] = None

    @field_validator("last_checked", mode="before")
    @classmethod
    def empty_means_never(cls, value):
        return value or None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("name must not be blank")
        return value


class Resource(ResourceBase):
    id: str
    name: str
    assigned_user_id: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
