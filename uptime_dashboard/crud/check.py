from datetime import datetime
from typing import Any, Dict, List, Mapping

from uptime_dashboard.core.exceptions import EntityValidationError
from uptime_dashboard.core.store.base import Record
from uptime_dashboard.crud.base import CRUDBase
from uptime_dashboard.schemas.check import (
    DEFAULT_SCHEDULE,
    Check,
    CheckCreate,
    CheckUpdate,
    validate_criteria,
)
from uptime_dashboard.schemas.codec import decode_check, encode_check, encode_check_update
from uptime_dashboard.schemas.common import Identity, TestType
from uptime_dashboard.services.seed import build_seed_dataset
from uptime_dashboard.utils.ids import generate_id
from uptime_dashboard.utils.slug import generate_slug


class CRUDCheck(CRUDBase[Check, CheckCreate, CheckUpdate]):
    kind = "check"
    table = "checks"
    nullable_fields = frozenset({"description"})

    def __init__(self, **kwargs):
        super().__init__(Check, CheckCreate, CheckUpdate, **kwargs)

    def decode(self, record: Mapping[str, Any]) -> Check:
        return decode_check(record)

    def encode(self, entity: Check) -> Record:
        return encode_check(entity)

    def encode_update(self, fields: Mapping[str, Any]) -> Record:
        # CheckUpdate has no ``name``: the slug is fixed at creation
        return encode_check_update(fields)

    async def check_update(
        self, id: str, fields: Mapping[str, Any], identity: Identity
    ) -> None:
        """Criteria and test type must still agree after merging with the stored check."""
        if "criteria" not in fields and "test_type" not in fields:
            return
        stored = await self.fetch_owned(id, identity)
        if stored is None:
            return
        current = self.decode(stored)
        test_type = fields.get("test_type") or current.test_type
        criteria = fields["criteria"] if "criteria" in fields else current.criteria
        try:
            validate_criteria(test_type, criteria)
        except ValueError as e:
            raise EntityValidationError(f"Invalid {self.kind} data", errors=[str(e)])

    def seed(self, identity: Identity) -> List[Check]:
        return build_seed_dataset(identity.id).checks

    def placeholder(self, identity: Identity) -> Dict[str, Any]:
        return {
            "resource_id": "resource_1",
            "test_type": TestType.UPTIME,
            "name": "updated-check",
            "title": "Updated Check",
            "description": "",
            "tags": [],
            "criteria": {},
            "schedule": DEFAULT_SCHEDULE,
            "is_active": True,
            "user_id": identity.id,
        }

    def build(self, obj_in: CheckCreate, identity: Identity, now: datetime) -> Check:
        data = obj_in.model_dump()
        return Check.model_validate(
            {
                **self.placeholder(identity),
                **data,
                "id": generate_id(self.kind),
                "name": obj_in.name or generate_slug(obj_in.title) or "check",
                "user_id": identity.id,
                "created_at": now,
                "updated_at": now,
            }
        )
