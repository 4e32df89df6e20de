from datetime import datetime
from typing import Any, List, Mapping, Optional

from uptime_dashboard.core.exceptions import EntityValidationError
from uptime_dashboard.core.store.base import Record
from uptime_dashboard.crud.base import CRUDBase
from uptime_dashboard.schemas.codec import decode_event, encode_event
from uptime_dashboard.schemas.common import Identity
from uptime_dashboard.schemas.event import Event, EventCreate
from uptime_dashboard.services.seed import build_seed_dataset
from uptime_dashboard.utils.ids import generate_id


class CRUDEvent(CRUDBase[Event, EventCreate, EventCreate]):
    """Events are append-only: list and create, nothing else."""

    kind = "event"
    table = "events"
    order_by = "timestamp"

    def __init__(self, *, default_limit: int = 50, **kwargs):
        super().__init__(Event, EventCreate, None, **kwargs)
        self.default_limit = default_limit

    def decode(self, record: Mapping[str, Any]) -> Event:
        return decode_event(record)

    def encode(self, entity: Event) -> Record:
        return encode_event(entity)

    def seed(self, identity: Identity) -> List[Event]:
        return build_seed_dataset(identity.id).events

    def build(self, obj_in: EventCreate, identity: Identity, now: datetime) -> Event:
        data = obj_in.model_dump()
        return Event.model_validate(
            {
                **data,
                "id": generate_id(self.kind),
                "timestamp": obj_in.timestamp or now,
            }
        )

    async def list(
        self, *, resource_id: Optional[str] = None, limit: Optional[int] = None
    ) -> List[Event]:
        """Newest first, capped at ``default_limit`` unless told otherwise."""
        if limit is None:
            limit = self.default_limit
        return await super().list(resource_id=resource_id, limit=limit)

    async def update(self, id: str, obj_in: Any) -> Event:
        raise EntityValidationError("Events are append-only and cannot be updated")

    async def delete(self, id: str) -> None:
        raise EntityValidationError("Events cannot be deleted individually")
