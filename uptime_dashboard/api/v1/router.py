from fastapi import APIRouter

from uptime_dashboard.api.v1.endpoints import (
    checks,
    dashboard,
    events,
    notifications,
    resources,
)

api_router = APIRouter()

api_router.include_router(resources.router, prefix="/resources", tags=["resources"])
api_router.include_router(checks.router, prefix="/checks", tags=["checks"])
api_router.include_router(events.router, prefix="/events", tags=["events"])
api_router.include_router(
    notifications.router, prefix="/notifications", tags=["notifications"]
)
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
