import logging
from typing import Optional

from uptime_dashboard.core.settings import BaseSettings, get_settings
from uptime_dashboard.core.store.base import RecordStore
from uptime_dashboard.crud.availability import StoreAvailability
from uptime_dashboard.crud.check import CRUDCheck
from uptime_dashboard.crud.event import CRUDEvent
from uptime_dashboard.crud.notification import CRUDNotification
from uptime_dashboard.crud.resource import CRUDResource
from uptime_dashboard.schemas.common import Identity

logger = logging.getLogger(__name__)


class Gateway:
    """
    Entry point the UI layer calls into.

    Bundles one CRUD object per entity kind around a single record store.
    The availability capability and the anonymous identity are injectable so
    degraded mode and identity fallback can be driven directly from tests.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        settings: Optional[BaseSettings] = None,
        availability: Optional[StoreAvailability] = None,
        anonymous_identity: Optional[Identity] = None,
    ):
        settings = settings or get_settings()
        self.store = store
        self.settings = settings
        self.availability = availability or StoreAvailability(
            store,
            table=settings.STORE_PROBE_TABLE,
            limit=settings.STORE_PROBE_LIMIT,
            timeout=settings.STORE_PROBE_TIMEOUT_SECONDS,
        )
        self.anonymous_identity = anonymous_identity or Identity(
            id=settings.ANONYMOUS_USER_ID
        )

        shared = dict(
            store=store,
            availability=self.availability,
            anonymous_identity=self.anonymous_identity,
            call_timeout=settings.STORE_CALL_TIMEOUT_SECONDS,
        )
        self.resources = CRUDResource(**shared)
        self.checks = CRUDCheck(**shared)
        self.events = CRUDEvent(default_limit=settings.DEFAULT_EVENT_LIMIT, **shared)
        self.notifications = CRUDNotification(**shared)

    async def is_degraded(self) -> bool:
        """True while the store is unreachable and fallback data is served."""
        return not await self.availability.is_available()

    async def current_identity(self) -> Identity:
        return await self.resources.resolve_identity()
