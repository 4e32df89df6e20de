from typing import Any

from fastapi import APIRouter, Depends, Query

from uptime_dashboard.api.deps import get_gateway
from uptime_dashboard.crud.gateway import Gateway
from uptime_dashboard.schemas.notification import (
    Notification,
    NotificationCreate,
    NotificationUpdate,
)
from uptime_dashboard.schemas.response import (
    CreateResponse,
    DeleteResponse,
    ListResponse,
    Messages,
    UpdateResponse,
)

router = APIRouter()


@router.get("/", response_model=ListResponse[Notification])
async def read_notifications(
    gateway: Gateway = Depends(get_gateway),
    resource_id: str = Query(None, description="Only rules for this resource"),
    limit: int = Query(default=None, ge=1, le=10000),
) -> Any:
    notifications = await gateway.notifications.list(resource_id=resource_id, limit=limit)
    return ListResponse(
        message=Messages.NOTIFICATIONS_RETRIEVED,
        data=notifications,
        meta={"total": len(notifications), "limit": limit},
    )


@router.post("/", response_model=CreateResponse[Notification])
async def create_notification(
    *,
    gateway: Gateway = Depends(get_gateway),
    notification_in: NotificationCreate,
) -> Any:
    notification = await gateway.notifications.create(notification_in)
    return CreateResponse(message=Messages.NOTIFICATION_CREATED, data=notification)


@router.patch("/{notification_id}", response_model=UpdateResponse[Notification])
async def update_notification(
    *,
    gateway: Gateway = Depends(get_gateway),
    notification_id: str,
    notification_in: NotificationUpdate,
) -> Any:
    notification = await gateway.notifications.update(notification_id, notification_in)
    return UpdateResponse(message=Messages.NOTIFICATION_UPDATED, data=notification)


@router.delete("/{notification_id}", response_model=DeleteResponse)
async def delete_notification(
    *,
    gateway: Gateway = Depends(get_gateway),
    notification_id: str,
) -> Any:
    await gateway.notifications.delete(notification_id)
    return DeleteResponse(message=Messages.NOTIFICATION_DELETED)
