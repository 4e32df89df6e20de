import asyncio
import logging
from datetime import date
from typing import Any, List

from fastapi import APIRouter, Depends, Query

from uptime_dashboard.api.deps import get_gateway
from uptime_dashboard.crud.gateway import Gateway
from uptime_dashboard.schemas.common import EventType
from uptime_dashboard.schemas.event import Event, EventCreate
from uptime_dashboard.schemas.response import CreateResponse, ListResponse, Messages
from uptime_dashboard.services.event_filter import (
    EnrichedEvent,
    EventFilters,
    collect_tags,
    enrich_events,
    filter_events,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=ListResponse[EnrichedEvent])
async def read_events(
    gateway: Gateway = Depends(get_gateway),
    limit: int = Query(default=None, ge=1, le=1000),
    # Search parameters
    search: str = Query(None, description="Search in message, resource name, check title"),
    # Filter parameters
    resource_id: str = Query(None, description="Filter by resource"),
    check_id: str = Query(None, description="Filter by check"),
    status: EventType = Query(None, description="Filter by event type"),
    tags: List[str] = Query(None, description="Resource or check carries any of these tags"),
    # Date range filters
    date_from: date = Query(None, description="Events on or after this date (YYYY-MM-DD)"),
    date_to: date = Query(None, description="Events before this date (YYYY-MM-DD)"),
) -> Any:
    """
    Recent events, newest first, joined with resource names and check titles.
    """
    events, resources, checks = await asyncio.gather(
        gateway.events.list(limit=limit),
        gateway.resources.list(),
        gateway.checks.list(),
    )

    filters = EventFilters(
        search=search,
        resource_id=resource_id,
        check_id=check_id,
        status=status,
        tags=tags or [],
        date_from=date_from,
        date_to=date_to,
    )
    filtered = filter_events(events, resources, checks, filters)

    return ListResponse(
        message=Messages.EVENTS_RETRIEVED,
        data=enrich_events(filtered, resources, checks),
        meta={
            "total": len(filtered),
            "unfiltered_total": len(events),
            "available_tags": collect_tags(resources, checks),
            "filters": filters.model_dump(mode="json", exclude_none=True),
        },
    )


@router.post("/", response_model=CreateResponse[Event])
async def create_event(
    *,
    gateway: Gateway = Depends(get_gateway),
    event_in: EventCreate,
) -> Any:
    """
    Record a check outcome. Events are append-only.
    """
    event = await gateway.events.create(event_in)
    return CreateResponse(message=Messages.EVENT_CREATED, data=event)
