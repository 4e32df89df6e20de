"""
Dashboard statistics derived from a snapshot of resources and events.
"""
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Iterable

from uptime_dashboard.schemas.common import EventType, MonitorModel, ResourceStatus
from uptime_dashboard.schemas.event import Event
from uptime_dashboard.schemas.resource import Resource

# Fixed banding thresholds
UPTIME_SUCCESS_ABOVE = Decimal("95")
UPTIME_WARNING_ABOVE = Decimal("80")
RESPONSE_TIME_SUCCESS_BELOW_MS = 500
RESPONSE_TIME_WARNING_BELOW_MS = 1000


class Band(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class DashboardMetrics(MonitorModel):
    total_resources: int
    online_resources: int
    warning_resources: int
    offline_resources: int
    uptime_percent: str
    avg_response_time_ms: int
    active_alerts: int
    recent_failures: int
    uptime_band: Band
    response_time_band: Band
    alerts_band: Band
    response_time_summary: str
    alerts_summary: str


def _half_up(value: Decimal, exponent: str) -> Decimal:
    return value.quantize(Decimal(exponent), rounding=ROUND_HALF_UP)


def uptime_band(uptime: Decimal) -> Band:
    if uptime > UPTIME_SUCCESS_ABOVE:
        return Band.SUCCESS
    if uptime > UPTIME_WARNING_ABOVE:
        return Band.WARNING
    return Band.ERROR


def response_time_band(avg_ms: int) -> Band:
    if avg_ms < RESPONSE_TIME_SUCCESS_BELOW_MS:
        return Band.SUCCESS
    if avg_ms < RESPONSE_TIME_WARNING_BELOW_MS:
        return Band.WARNING
    return Band.ERROR


def compute_dashboard_metrics(
    resources: Iterable[Resource], events: Iterable[Event]
) -> DashboardMetrics:
    resources = list(resources)
    total = len(resources)
    online = sum(1 for r in resources if r.status == ResourceStatus.ONLINE)
    warning = sum(1 for r in resources if r.status == ResourceStatus.WARNING)
    offline = sum(1 for r in resources if r.status == ResourceStatus.OFFLINE)

    if total:
        uptime = _half_up(Decimal(online) * 100 / Decimal(total), "0.1")
        avg_response = int(
            _half_up(Decimal(sum(r.response_time for r in resources)) / Decimal(total), "1")
        )
    else:
        uptime = Decimal("0.0")
        avg_response = 0

    recent_failures = sum(1 for e in events if e.type == EventType.FAILURE)
    active_alerts = warning + offline

    if active_alerts == 0:
        alerts = Band.SUCCESS
    elif warning > offline:
        alerts = Band.WARNING
    else:
        alerts = Band.ERROR

    response_band = response_time_band(avg_response)
    response_summary = {
        Band.SUCCESS: "Excellent performance",
        Band.WARNING: "Good performance",
        Band.ERROR: "Needs attention",
    }[response_band]

    return DashboardMetrics(
        total_resources=total,
        online_resources=online,
        warning_resources=warning,
        offline_resources=offline,
        uptime_percent=f"{uptime:.1f}",
        avg_response_time_ms=avg_response,
        active_alerts=active_alerts,
        recent_failures=recent_failures,
        uptime_band=uptime_band(uptime),
        response_time_band=response_band,
        alerts_band=alerts,
        response_time_summary=response_summary,
        alerts_summary=(
            f"{recent_failures} recent failures"
            if recent_failures > 0
            else "All systems normal"
        ),
    )
