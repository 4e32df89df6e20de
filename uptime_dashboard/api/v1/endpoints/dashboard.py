import asyncio
from typing import Any

from fastapi import APIRouter, Depends

from uptime_dashboard.api.deps import get_gateway
from uptime_dashboard.crud.gateway import Gateway
from uptime_dashboard.schemas.response import Messages, SuccessResponse
from uptime_dashboard.services.metrics import DashboardMetrics, compute_dashboard_metrics
from uptime_dashboard.services.seed import SeedResult, seed_sample_data

router = APIRouter()


@router.get("/metrics", response_model=SuccessResponse[DashboardMetrics])
async def read_metrics(gateway: Gateway = Depends(get_gateway)) -> Any:
    resources, events = await asyncio.gather(
        gateway.resources.list(),
        gateway.events.list(limit=gateway.settings.DEFAULT_EVENT_LIMIT),
    )
    return SuccessResponse(
        message=Messages.METRICS_RETRIEVED,
        data=compute_dashboard_metrics(resources, events),
    )


@router.get("/status", response_model=SuccessResponse[dict])
async def read_status(gateway: Gateway = Depends(get_gateway)) -> Any:
    """
    Whether the dashboard is serving fallback data (drives the demo banner).
    """
    degraded, identity = await asyncio.gather(
        gateway.is_degraded(), gateway.current_identity()
    )
    return SuccessResponse(
        message=Messages.STATUS_RETRIEVED,
        data={"degraded": degraded, "userId": identity.id},
    )


@router.post("/seed", response_model=SuccessResponse[SeedResult])
async def load_sample_data(gateway: Gateway = Depends(get_gateway)) -> Any:
    """
    Load the sample dataset once. No-op when resources already exist.
    """
    result = await seed_sample_data(gateway)
    message = Messages.SAMPLE_DATA_SEEDED if result.seeded else Messages.SAMPLE_DATA_SKIPPED
    return SuccessResponse(message=message, data=result)
