import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Query

from uptime_dashboard.api.deps import get_gateway
from uptime_dashboard.crud.gateway import Gateway
from uptime_dashboard.schemas.check import Check, CheckCreate, CheckUpdate
from uptime_dashboard.schemas.common import TestType
from uptime_dashboard.schemas.response import (
    CreateResponse,
    DeleteResponse,
    ListResponse,
    Messages,
    UpdateResponse,
)
from uptime_dashboard.services.event_filter import filter_checks

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=ListResponse[Check])
async def read_checks(
    gateway: Gateway = Depends(get_gateway),
    resource_id: str = Query(None, description="Only checks bound to this resource"),
    limit: int = Query(default=None, ge=1, le=10000),
    # Search parameters
    search: str = Query(None, description="Search in title, description and slug"),
    # Filter parameters
    tags: List[str] = Query(None, description="Match checks carrying any of these tags"),
    test_type: TestType = Query(None, description="Filter by test type"),
) -> Any:
    checks = await gateway.checks.list(resource_id=resource_id, limit=limit)
    filtered = filter_checks(checks, search=search, tags=tags, test_type=test_type)
    return ListResponse(
        message=Messages.CHECKS_RETRIEVED,
        data=filtered,
        meta={
            "total": len(filtered),
            "limit": limit,
            "filters": {
                "resource_id": resource_id,
                "search": search,
                "tags": tags,
                "test_type": test_type,
            },
        },
    )


@router.post("/", response_model=CreateResponse[Check])
async def create_check(
    *,
    gateway: Gateway = Depends(get_gateway),
    check_in: CheckCreate,
) -> Any:
    check = await gateway.checks.create(check_in)
    return CreateResponse(message=Messages.CHECK_CREATED, data=check)


@router.patch("/{check_id}", response_model=UpdateResponse[Check])
async def update_check(
    *,
    gateway: Gateway = Depends(get_gateway),
    check_id: str,
    check_in: CheckUpdate,
) -> Any:
    """
    Update a check. The slug ``name`` is fixed at creation and is not editable.
    """
    check = await gateway.checks.update(check_id, check_in)
    return UpdateResponse(message=Messages.CHECK_UPDATED, data=check)


@router.delete("/{check_id}", response_model=DeleteResponse)
async def delete_check(
    *,
    gateway: Gateway = Depends(get_gateway),
    check_id: str,
) -> Any:
    await gateway.checks.delete(check_id)
    return DeleteResponse(message=Messages.CHECK_DELETED)
