import logging
from typing import Any

from fastapi import APIRouter, Depends, Query

from uptime_dashboard.api.deps import get_gateway
from uptime_dashboard.crud.gateway import Gateway
from uptime_dashboard.schemas.resource import Resource, ResourceCreate, ResourceUpdate
from uptime_dashboard.schemas.response import (
    CreateResponse,
    DeleteResponse,
    ListResponse,
    Messages,
    UpdateResponse,
)
from uptime_dashboard.services.event_filter import filter_resources

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=ListResponse[Resource])
async def read_resources(
    gateway: Gateway = Depends(get_gateway),
    limit: int = Query(default=None, ge=1, le=10000),
    search: str = Query(None, description="Search in name and tags"),
) -> Any:
    """
    Retrieve the caller's resources, newest first.
    """
    resources = await gateway.resources.list(limit=limit)
    filtered = filter_resources(resources, search)
    return ListResponse(
        message=Messages.RESOURCES_RETRIEVED,
        data=filtered,
        meta={"total": len(filtered), "limit": limit, "search": search},
    )


@router.post("/", response_model=CreateResponse[Resource])
async def create_resource(
    *,
    gateway: Gateway = Depends(get_gateway),
    resource_in: ResourceCreate,
) -> Any:
    resource = await gateway.resources.create(resource_in)
    return CreateResponse(message=Messages.RESOURCE_CREATED, data=resource)


@router.patch("/{resource_id}", response_model=UpdateResponse[Resource])
async def update_resource(
    *,
    gateway: Gateway = Depends(get_gateway),
    resource_id: str,
    resource_in: ResourceUpdate,
) -> Any:
    resource = await gateway.resources.update(resource_id, resource_in)
    return UpdateResponse(message=Messages.RESOURCE_UPDATED, data=resource)


@router.delete("/{resource_id}", response_model=DeleteResponse)
async def delete_resource(
    *,
    gateway: Gateway = Depends(get_gateway),
    resource_id: str,
) -> Any:
    """
    Delete a resource. Its checks, events and notifications are left alone.
    """
    await gateway.resources.delete(resource_id)
    return DeleteResponse(message=Messages.RESOURCE_DELETED)
