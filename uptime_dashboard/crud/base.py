import asyncio
import logging
from datetime import datetime
from typing import (
    Any,
    Awaitable,
    Dict,
    FrozenSet,
    Generic,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from pydantic import BaseModel, ValidationError

from uptime_dashboard.core.exceptions import EntityValidationError
from uptime_dashboard.core.store.base import Record, RecordStore
from uptime_dashboard.crud.availability import StoreAvailability
from uptime_dashboard.schemas.common import Identity, MonitorModel
from uptime_dashboard.utils.dates import format_timestamp, utcnow

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=MonitorModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

T = TypeVar("T")


def validation_messages(error: ValidationError) -> List[str]:
    return [
        f"{'.'.join(str(part) for part in item['loc']) or 'body'}: {item['msg']}"
        for item in error.errors()
    ]


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    CRUD for one entity kind with degraded-mode fallback.

    Reads never raise: an unreachable store, a failing query or a hung call
    all end in the seed dataset. Writes raise only ``EntityValidationError``
    for bad input; when the store cannot take the write a plausible entity is
    synthesized and returned without being persisted.
    """

    kind: str = ""
    table: str = ""
    order_by: str = "createdAt"
    owner_field: str = "userId"
    resource_field: str = "resourceId"
    resource_attr: str = "resource_id"
    # Fields an update may explicitly clear
    nullable_fields: FrozenSet[str] = frozenset()

    def __init__(
        self,
        model: Type[ModelType],
        create_schema: Type[CreateSchemaType],
        update_schema: Optional[Type[UpdateSchemaType]],
        *,
        store: RecordStore,
        availability: StoreAvailability,
        anonymous_identity: Identity,
        call_timeout: Optional[float] = None,
    ):
        self.model = model
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.store = store
        self.availability = availability
        self.anonymous_identity = anonymous_identity
        self.call_timeout = call_timeout

    # ===============================
    # PER-KIND HOOKS
    # ===============================
    def decode(self, record: Mapping[str, Any]) -> ModelType:
        raise NotImplementedError

    def encode(self, entity: ModelType) -> Record:
        raise NotImplementedError

    def encode_update(self, fields: Mapping[str, Any]) -> Record:
        raise NotImplementedError

    def seed(self, identity: Identity) -> List[ModelType]:
        raise NotImplementedError

    def placeholder(self, identity: Identity) -> Dict[str, Any]:
        """Defaults a simulated entity starts from before caller fields apply."""
        return {}

    def build(
        self, obj_in: CreateSchemaType, identity: Identity, now: datetime
    ) -> ModelType:
        raise NotImplementedError

    # ===============================
    # HELPERS
    # ===============================
    async def _call(self, awaitable: Awaitable[T]) -> T:
        if self.call_timeout is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, timeout=self.call_timeout)

    def _validate(self, schema: Type[BaseModel], obj_in: Union[BaseModel, Mapping[str, Any]]):
        if isinstance(obj_in, schema):
            return obj_in
        if isinstance(obj_in, BaseModel):
            obj_in = obj_in.model_dump(exclude_unset=True)
        if not isinstance(obj_in, Mapping):
            raise EntityValidationError(
                f"Invalid {self.kind} payload: expected a mapping, got {type(obj_in).__name__}"
            )
        try:
            return schema.model_validate(dict(obj_in))
        except ValidationError as e:
            errors = validation_messages(e)
            raise EntityValidationError(f"Invalid {self.kind} data", errors=errors)

    def _require_id(self, id: str) -> None:
        if not isinstance(id, str) or not id.strip():
            raise EntityValidationError(f"A {self.kind} id is required")

    def _decode_many(self, records: List[Record]) -> List[ModelType]:
        entities = []
        for record in records:
            try:
                entities.append(self.decode(record))
            except ValidationError as e:
                logger.warning(
                    f"Skipping undecodable {self.kind} record {record.get('id')}: "
                    f"{e.error_count()} error(s)"
                )
        return entities

    async def resolve_identity(self) -> Identity:
        try:
            return await self._call(self.store.current_user())
        except Exception as e:
            logger.warning(
                f"Identity resolution failed, using anonymous identity "
                f"{self.anonymous_identity.id}: {e}"
            )
            return self.anonymous_identity

    # ===============================
    # READ
    # ===============================
    def list_fallback(
        self,
        identity: Identity,
        resource_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[ModelType]:
        entities = self.seed(identity)
        if resource_id:
            entities = [
                entity
                for entity in entities
                if getattr(entity, self.resource_attr) == resource_id
            ]
        if limit is not None:
            entities = entities[: max(limit, 0)]
        return entities

    async def list(
        self, *, resource_id: Optional[str] = None, limit: Optional[int] = None
    ) -> List[ModelType]:
        identity = await self.resolve_identity()

        if not await self.availability.is_available():
            logger.info(f"Using fallback {self.table} data for demo purposes")
            return self.list_fallback(identity, resource_id, limit)

        where = {self.owner_field: identity.id}
        if resource_id:
            where[self.resource_field] = resource_id
        try:
            records = await self._call(
                self.store.list(
                    self.table,
                    where=where,
                    order_by=self.order_by,
                    descending=True,
                    limit=limit,
                )
            )
        except Exception as e:
            logger.warning(f"Listing {self.table} failed, using fallback data: {e}")
            return self.list_fallback(identity, resource_id, limit)

        return self._decode_many(records)

    # ===============================
    # WRITE
    # ===============================
    async def create(
        self, obj_in: Union[CreateSchemaType, Mapping[str, Any]]
    ) -> ModelType:
        entity, _ = await self.create_record(obj_in)
        return entity

    async def create_record(
        self, obj_in: Union[CreateSchemaType, Mapping[str, Any]]
    ) -> Tuple[ModelType, bool]:
        """Like ``create``, also telling whether the store kept the record."""
        obj_in = self._validate(self.create_schema, obj_in)
        identity = await self.resolve_identity()
        entity = self.build(obj_in, identity, utcnow())

        if not await self.availability.is_available():
            logger.info(f"Simulated creation of {self.kind} {entity.id}")
            return entity, False

        record = {**self.encode(entity), self.owner_field: identity.id}
        try:
            created = await self._call(self.store.create(self.table, record))
            return self.decode(created or record), True
        except Exception as e:
            logger.warning(f"Creating {self.kind} failed, simulating creation: {e}")
            return entity, False

    def simulate_update(
        self, id: str, fields: Mapping[str, Any], identity: Identity, now: datetime
    ) -> ModelType:
        data = {
            **self.placeholder(identity),
            **fields,
            "id": id,
            "created_at": now,
            "updated_at": now,
        }
        return self.model.model_validate(data)

    async def update(
        self, id: str, obj_in: Union[UpdateSchemaType, Mapping[str, Any]]
    ) -> ModelType:
        self._require_id(id)
        if self.update_schema is None:
            raise EntityValidationError(f"{self.kind} records cannot be updated")
        obj_in = self._validate(self.update_schema, obj_in)
        fields = {
            key: value
            for key, value in obj_in.model_dump(exclude_unset=True).items()
            if value is not None or key in self.nullable_fields
        }
        identity = await self.resolve_identity()
        now = utcnow()

        if not await self.availability.is_available():
            logger.info(f"Simulated update of {self.kind} {id}")
            return self.simulate_update(id, fields, identity, now)

        record = {**self.encode_update(fields), "updatedAt": format_timestamp(now)}
        try:
            await self.check_update(id, fields, identity)
            updated = await self._call(
                self.store.update(
                    self.table, id, record, where={self.owner_field: identity.id}
                )
            )
            return self.decode(updated)
        except EntityValidationError:
            raise
        except Exception as e:
            logger.warning(f"Updating {self.kind} {id} failed, simulating update: {e}")
            return self.simulate_update(id, fields, identity, now)

    async def check_update(
        self, id: str, fields: Mapping[str, Any], identity: Identity
    ) -> None:
        """Validate an update against the stored record before it is written."""

    async def fetch_owned(self, id: str, identity: Identity) -> Optional[Record]:
        records = await self._call(
            self.store.list(
                self.table, where={"id": id, self.owner_field: identity.id}, limit=1
            )
        )
        return records[0] if records else None

    async def delete(self, id: str) -> None:
        self._require_id(id)
        identity = await self.resolve_identity()

        if not await self.availability.is_available():
            logger.info(f"Simulated deletion of {self.kind} {id}")
            return

        try:
            await self._call(
                self.store.delete(self.table, id, where={self.owner_field: identity.id})
            )
        except Exception as e:
            logger.warning(f"Simulated deletion of {self.kind} {id} (store error: {e})")
