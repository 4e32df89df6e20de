"""
Filtering for the events view, plus the smaller resource and check filters
the list pages use.

Events are joined against resources and checks by id. A join miss never
raises: display fields fall back to ``"Unknown"`` and the missing side simply
contributes no name, title or tags to matching.
"""
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Sequence, TypeVar

from pydantic import Field, field_validator

from uptime_dashboard.schemas.check import Check
from uptime_dashboard.schemas.common import EventType, MonitorModel, TestType
from uptime_dashboard.schemas.event import Event
from uptime_dashboard.schemas.resource import Resource
from uptime_dashboard.utils.dates import to_utc_date

UNKNOWN = "Unknown"

T = TypeVar("T", Resource, Check)


class EventFilters(MonitorModel):
    """Every dimension is optional; set dimensions combine with AND."""

    search: Optional[str] = None
    resource_id: Optional[str] = None
    check_id: Optional[str] = None
    status: Optional[EventType] = None
    tags: List[str] = Field(default_factory=list)
    # Inclusive lower bound, compared on the event's UTC date
    date_from: Optional[date] = None
    # Exclusive upper bound, compared on the event's UTC date
    date_to: Optional[date] = None

    @field_validator("search", "resource_id", "check_id", "status", mode="before")
    @classmethod
    def blank_means_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def datetime_to_date(cls, value):
        if isinstance(value, datetime):
            return to_utc_date(value)
        if isinstance(value, str) and not value.strip():
            return None
        return value


class EnrichedEvent(Event):
    resource_name: str = UNKNOWN
    check_title: str = UNKNOWN


def _index(items: Iterable[T]) -> Dict[str, T]:
    # First occurrence wins on duplicate ids
    index: Dict[str, T] = {}
    for item in items:
        index.setdefault(item.id, item)
    return index


def _event_matches(
    event: Event,
    resource: Optional[Resource],
    check: Optional[Check],
    filters: EventFilters,
) -> bool:
    if filters.search:
        needle = filters.search.lower()
        haystacks = [
            event.message,
            resource.name if resource else "",
            check.title if check else "",
        ]
        if not any(needle in haystack.lower() for haystack in haystacks):
            return False

    if filters.resource_id and event.resource_id != filters.resource_id:
        return False

    if filters.check_id and event.check_id != filters.check_id:
        return False

    if filters.status and event.type != filters.status:
        return False

    if filters.tags:
        event_tags = set(resource.tags if resource else [])
        event_tags.update(check.tags if check else [])
        if not any(tag in event_tags for tag in filters.tags):
            return False

    event_date = to_utc_date(event.timestamp)
    if filters.date_from and event_date < filters.date_from:
        return False
    if filters.date_to and event_date >= filters.date_to:
        return False

    return True


def filter_events(
    events: Sequence[Event],
    resources: Iterable[Resource],
    checks: Iterable[Check],
    filters: Optional[EventFilters] = None,
) -> List[Event]:
    """
    Events matching every supplied filter dimension, in input order.

    Input is expected newest-first, as the gateway lists it.
    """
    filters = filters or EventFilters()
    resources_by_id = _index(resources)
    checks_by_id = _index(checks)
    return [
        event
        for event in events
        if _event_matches(
            event,
            resources_by_id.get(event.resource_id),
            checks_by_id.get(event.check_id),
            filters,
        )
    ]


def enrich_events(
    events: Sequence[Event],
    resources: Iterable[Resource],
    checks: Iterable[Check],
) -> List[EnrichedEvent]:
    resources_by_id = _index(resources)
    checks_by_id = _index(checks)
    enriched = []
    for event in events:
        resource = resources_by_id.get(event.resource_id)
        check = checks_by_id.get(event.check_id)
        enriched.append(
            EnrichedEvent(
                **event.model_dump(),
                resource_name=resource.name if resource else UNKNOWN,
                check_title=check.title if check else UNKNOWN,
            )
        )
    return enriched


def collect_tags(resources: Iterable[Resource], checks: Iterable[Check]) -> List[str]:
    """Distinct tags across resources then checks, first-seen order."""
    seen: Dict[str, None] = {}
    for item in list(resources) + list(checks):
        for tag in item.tags:
            seen.setdefault(tag, None)
    return list(seen)


def filter_resources(resources: Iterable[Resource], search: Optional[str] = None) -> List[Resource]:
    """Resources whose name or any tag contains ``search`` (case-insensitive)."""
    if not search:
        return list(resources)
    needle = search.lower()
    return [
        resource
        for resource in resources
        if needle in resource.name.lower()
        or any(needle in tag.lower() for tag in resource.tags)
    ]


def filter_checks(
    checks: Iterable[Check],
    search: Optional[str] = None,
    tags: Optional[Sequence[str]] = None,
    test_type: Optional[TestType] = None,
) -> List[Check]:
    needle = (search or "").lower()
    matched = []
    for check in checks:
        if needle and not (
            needle in check.title.lower()
            or needle in (check.description or "").lower()
            or needle in check.name.lower()
        ):
            continue
        if tags and not any(tag in check.tags for tag in tags):
            continue
        if test_type and check.test_type != test_type:
            continue
        matched.append(check)
    return matched
