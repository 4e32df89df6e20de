from datetime import datetime
from typing import Any, Dict, List, Mapping

from uptime_dashboard.core.store.base import Record
from uptime_dashboard.crud.base import CRUDBase
from uptime_dashboard.schemas.codec import (
    decode_resource,
    encode_resource,
    encode_resource_update,
)
from uptime_dashboard.schemas.common import Identity, ResourceStatus
from uptime_dashboard.schemas.resource import Resource, ResourceCreate, ResourceUpdate
from uptime_dashboard.services.seed import build_seed_dataset
from uptime_dashboard.utils.ids import generate_id
from uptime_dashboard.utils.slug import slugify_name


class CRUDResource(CRUDBase[Resource, ResourceCreate, ResourceUpdate]):
    kind = "resource"
    table = "resources"
    # A resource is its own resource scope
    resource_field = "id"
    resource_attr = "id"
    nullable_fields = frozenset({"last_checked", "slug"})

    def __init__(self, **kwargs):
        super().__init__(Resource, ResourceCreate, ResourceUpdate, **kwargs)

    def decode(self, record: Mapping[str, Any]) -> Resource:
        return decode_resource(record)

    def encode(self, entity: Resource) -> Record:
        return encode_resource(entity)

    def encode_update(self, fields: Mapping[str, Any]) -> Record:
        return encode_resource_update(fields)

    def seed(self, identity: Identity) -> List[Resource]:
        return build_seed_dataset(identity.id).resources

    def placeholder(self, identity: Identity) -> Dict[str, Any]:
        return {
            "name": "Updated Resource",
            "slug": "updated-resource",
            "tags": [],
            "status": ResourceStatus.OFFLINE,
            "last_checked": None,
            "response_time": 0,
            "assigned_user_id": identity.id,
        }

    def build(
        self, obj_in: ResourceCreate, identity: Identity, now: datetime
    ) -> Resource:
        data = obj_in.model_dump()
        return Resource.model_validate(
            {
                **self.placeholder(identity),
                **data,
                "id": generate_id(self.kind),
                "slug": data.get("slug") or slugify_name(obj_in.name),
                "assigned_user_id": data.get("assigned_user_id") or identity.id,
                "created_at": now,
                "updated_at": now,
            }
        )
