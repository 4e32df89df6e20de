from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

# Generic type for data payload
T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response schema with message support"""

    success: bool = True
    message: str
    data: Optional[T] = None
    errors: Optional[List[str]] = None
    meta: Optional[Dict[str, Any]] = None


class SuccessResponse(APIResponse[T]):
    """Success response with data"""

    success: bool = True
    message: str = "Operation completed successfully"


class ErrorResponse(APIResponse[None]):
    """Error response with error details"""

    success: bool = False
    message: str = "An error occurred"
    data: None = None


class CreateResponse(APIResponse[T]):
    success: bool = True
    message: str = "Created successfully"


class UpdateResponse(APIResponse[T]):
    success: bool = True
    message: str = "Updated successfully"


class DeleteResponse(APIResponse[None]):
    success: bool = True
    message: str = "Deleted successfully"
    data: None = None


class ListResponse(APIResponse[List[T]]):
    success: bool = True
    message: str = "Data retrieved successfully"


class Messages:
    # Resource messages
    RESOURCE_CREATED = "Resource created successfully"
    RESOURCE_UPDATED = "Resource updated successfully"
    RESOURCE_DELETED = "Resource deleted successfully"
    RESOURCES_RETRIEVED = "Resources retrieved successfully"

    # Check messages
    CHECK_CREATED = "Check created successfully"
    CHECK_UPDATED = "Check updated successfully"
    CHECK_DELETED = "Check deleted successfully"
    CHECKS_RETRIEVED = "Checks retrieved successfully"

    # Event messages
    EVENT_CREATED = "Event recorded successfully"
    EVENTS_RETRIEVED = "Events retrieved successfully"

    # Notification messages
    NOTIFICATION_CREATED = "Notification created successfully"
    NOTIFICATION_UPDATED = "Notification updated successfully"
    NOTIFICATION_DELETED = "Notification deleted successfully"
    NOTIFICATIONS_RETRIEVED = "Notifications retrieved successfully"

    # Dashboard messages
    METRICS_RETRIEVED = "Dashboard metrics retrieved successfully"
    STATUS_RETRIEVED = "Store status retrieved successfully"
    SAMPLE_DATA_SEEDED = "Sample data seeded successfully"
    SAMPLE_DATA_SKIPPED = "Sample data not loaded"

    # General messages
    INVALID_REQUEST = "Invalid request data"
