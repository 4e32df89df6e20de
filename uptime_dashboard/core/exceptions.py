from typing import List, Optional


class MonitorError(Exception):
    """Base class for errors raised inside the monitoring core."""


class StoreUnavailable(MonitorError):
    """The remote record store could not be reached or answered with an error."""


class IdentityUnavailable(MonitorError):
    """The caller's identity could not be resolved."""


class EntityValidationError(MonitorError, ValueError):
    """Input rejected before any I/O was attempted."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or [message]
