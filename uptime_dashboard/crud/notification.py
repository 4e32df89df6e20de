from datetime import datetime
from typing import Any, Dict, List, Mapping

from uptime_dashboard.core.store.base import Record
from uptime_dashboard.crud.base import CRUDBase
from uptime_dashboard.schemas.codec import (
    decode_notification,
    encode_notification,
    encode_notification_update,
)
from uptime_dashboard.schemas.common import Identity, NotificationType
from uptime_dashboard.schemas.notification import (
    Notification,
    NotificationCreate,
    NotificationUpdate,
)
from uptime_dashboard.services.seed import build_seed_dataset
from uptime_dashboard.utils.ids import generate_id


class CRUDNotification(
    CRUDBase[Notification, NotificationCreate, NotificationUpdate]
):
    kind = "notification"
    table = "notifications"

    def __init__(self, **kwargs):
        super().__init__(Notification, NotificationCreate, NotificationUpdate, **kwargs)

    def decode(self, record: Mapping[str, Any]) -> Notification:
        return decode_notification(record)

    def encode(self, entity: Notification) -> Record:
        return encode_notification(entity)

    def encode_update(self, fields: Mapping[str, Any]) -> Record:
        return encode_notification_update(fields)

    def seed(self, identity: Identity) -> List[Notification]:
        return build_seed_dataset(identity.id).notifications

    def placeholder(self, identity: Identity) -> Dict[str, Any]:
        return {
            "resource_id": "",
            "user_id": identity.id,
            "type": NotificationType.EMAIL,
            "conditions": {},
            "is_active": True,
        }

    def build(
        self, obj_in: NotificationCreate, identity: Identity, now: datetime
    ) -> Notification:
        data = obj_in.model_dump()
        return Notification.model_validate(
            {
                **self.placeholder(identity),
                **data,
                "id": generate_id(self.kind),
                "user_id": obj_in.user_id or identity.id,
                "created_at": now,
                "updated_at": now,
            }
        )
