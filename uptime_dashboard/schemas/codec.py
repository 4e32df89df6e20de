"""
Conversion between store records and typed entities.

Store records are flat camelCase dicts: ``tags``, ``criteria``, ``conditions``
and ``details`` travel as JSON text, ``isActive`` as ``0``/``1`` and
timestamps as ISO-8601 strings. Decoding never fails on a missing or broken
nested field; it falls back to an empty list or map instead.
"""
import copy
import json
import logging
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic.alias_generators import to_camel

from uptime_dashboard.schemas.check import Check
from uptime_dashboard.schemas.common import ResourceStatus
from uptime_dashboard.schemas.event import Event
from uptime_dashboard.schemas.notification import Notification
from uptime_dashboard.schemas.resource import Resource
from uptime_dashboard.utils.dates import format_timestamp

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

JSON_FIELDS = {"tags", "criteria", "conditions", "details"}
FLAG_FIELDS = {"is_active"}

# Field names whose storage column is not the plain camelCase form
NOTIFICATION_COLUMNS = {"user_id": "notificationUserId"}


# ===============================
# PRIMITIVE HELPERS
# ===============================
def _load_json(value: Any, expected: type) -> Any:
    if isinstance(value, expected):
        return copy.deepcopy(value)
    if not isinstance(value, str) or not value.strip():
        return expected()
    try:
        parsed = json.loads(value)
    except ValueError:
        logger.debug(f"Malformed JSON field, using empty {expected.__name__}: {value!r}")
        return expected()
    if not isinstance(parsed, expected):
        logger.debug(f"JSON field is not a {expected.__name__}: {value!r}")
        return expected()
    return parsed


def load_list(value: Any) -> List[Any]:
    return _load_json(value, list)


def load_map(value: Any) -> Dict[str, Any]:
    return _load_json(value, dict)


def to_flag(value: Any) -> bool:
    """Stored flags are 0/1 integers; anything numerically above zero is true."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value > 0
    if isinstance(value, str):
        try:
            return float(value) > 0
        except ValueError:
            return value.strip().lower() == "true"
    return False


def _to_response_time(value: Any) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0


def _encode_value(field: str, value: Any) -> Any:
    if field in JSON_FIELDS:
        return json.dumps(value if value is not None else {}, default=str)
    if field in FLAG_FIELDS:
        return 1 if value else 0
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, Enum):
        return value.value
    if field == "last_checked" and value is None:
        return ""
    return value


def encode_fields(
    fields: Mapping[str, Any], columns: Optional[Mapping[str, str]] = None
) -> Record:
    """
    Encode snake_case entity fields into a store record.

    Used both for whole entities and for partial updates, where only the
    supplied fields are written.
    """
    columns = columns or {}
    return {
        columns.get(field, to_camel(field)): _encode_value(field, value)
        for field, value in fields.items()
    }


# ===============================
# RESOURCES
# ===============================
def encode_resource(resource: Resource) -> Record:
    return encode_fields(resource.model_dump())


def encode_resource_update(fields: Mapping[str, Any]) -> Record:
    return encode_fields(fields)


def decode_resource(record: Mapping[str, Any]) -> Resource:
    return Resource.model_validate(
        {
            "id": record.get("id"),
            "name": record.get("name") or "",
            "slug": record.get("slug") or None,
            "tags": [str(tag) for tag in load_list(record.get("tags"))],
            "status": record.get("status") or ResourceStatus.OFFLINE,
            "lastChecked": record.get("lastChecked") or None,
            "responseTime": _to_response_time(record.get("responseTime")),
            "assignedUserId": record.get("assignedUserId") or "",
            "createdAt": record.get("createdAt") or None,
            "updatedAt": record.get("updatedAt") or None,
        }
    )


# ===============================
# CHECKS
# ===============================
def normalize_check_record(record: Mapping[str, Any]) -> Record:
    """
    Schema-compatibility shim for legacy check rows.

    Old rows carry the test type under ``type`` and may lack ``title``.
    """
    normalized = dict(record)
    if not normalized.get("testType") and normalized.get("type"):
        normalized["testType"] = normalized["type"]
    normalized.pop("type", None)
    if not normalized.get("title"):
        normalized["title"] = normalized.get("name") or ""
    return normalized


def encode_check(check: Check) -> Record:
    return encode_fields(check.model_dump())


def encode_check_update(fields: Mapping[str, Any]) -> Record:
    return encode_fields(fields)


def decode_check(record: Mapping[str, Any]) -> Check:
    record = normalize_check_record(record)
    data = {
        "id": record.get("id"),
        "resourceId": record.get("resourceId") or "",
        "name": record.get("name") or "",
        "title": record.get("title") or "",
        "description": record.get("description"),
        "tags": [str(tag) for tag in load_list(record.get("tags"))],
        "criteria": load_map(record.get("criteria")),
        "schedule": record.get("schedule") or "",
        "isActive": to_flag(record.get("isActive")),
        "userId": record.get("userId") or "",
        "createdAt": record.get("createdAt") or None,
        "updatedAt": record.get("updatedAt") or None,
    }
    if record.get("testType"):
        data["testType"] = record["testType"]
    return Check.model_validate(data)


# ===============================
# EVENTS
# ===============================
def encode_event(event: Event) -> Record:
    return encode_fields(event.model_dump())


def decode_event(record: Mapping[str, Any]) -> Event:
    return Event.model_validate(
        {
            "id": record.get("id"),
            "resourceId": record.get("resourceId") or "",
            "checkId": record.get("checkId") or "",
            "type": record.get("type"),
            "message": record.get("message") or "",
            "details": load_map(record.get("details")),
            "timestamp": record.get("timestamp"),
        }
    )


# ===============================
# NOTIFICATIONS
# ===============================
def encode_notification(notification: Notification) -> Record:
    return encode_fields(notification.model_dump(), NOTIFICATION_COLUMNS)


def encode_notification_update(fields: Mapping[str, Any]) -> Record:
    return encode_fields(fields, NOTIFICATION_COLUMNS)


def decode_notification(record: Mapping[str, Any]) -> Notification:
    return Notification.model_validate(
        {
            "id": record.get("id"),
            "resourceId": record.get("resourceId") or "",
            "userId": record.get("notificationUserId") or "",
            "type": record.get("type") or "email",
            "conditions": load_map(record.get("conditions")),
            "isActive": to_flag(record.get("isActive")),
            "createdAt": record.get("createdAt") or None,
            "updatedAt": record.get("updatedAt") or None,
        }
    )
