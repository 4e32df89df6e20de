import logging
from typing import Any, List, Mapping, Optional

from supabase import AsyncClient, acreate_client

from uptime_dashboard.core.exceptions import IdentityUnavailable, StoreUnavailable
from uptime_dashboard.core.settings import BaseSettings
from uptime_dashboard.core.store.base import Record, RecordStore
from uptime_dashboard.schemas.common import Identity

logger = logging.getLogger(__name__)


class SupabaseRecordStore(RecordStore):
    """Record store on top of a Supabase project (PostgREST tables + auth)."""

    def __init__(self, client: AsyncClient):
        self.client = client

    async def list(
        self,
        table: str,
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = True,
        limit: Optional[int] = None,
    ) -> List[Record]:
        query = self.client.table(table).select("*")
        for key, value in (where or {}).items():
            query = query.eq(key, value)
        if order_by:
            query = query.order(order_by, desc=descending)
        if limit is not None:
            query = query.limit(limit)
        response = await query.execute()
        return list(response.data or [])

    async def create(self, table: str, record: Mapping[str, Any]) -> Record:
        response = await self.client.table(table).insert(dict(record)).execute()
        if not response.data:
            raise StoreUnavailable(f"Supabase returned no row for insert into {table}")
        return response.data[0]

    async def update(
        self,
        table: str,
        id: str,
        record: Mapping[str, Any],
        *,
        where: Optional[Mapping[str, Any]] = None,
    ) -> Record:
        query = self.client.table(table).update(dict(record)).eq("id", id)
        for key, value in (where or {}).items():
            query = query.eq(key, value)
        response = await query.execute()
        if not response.data:
            raise StoreUnavailable(f"No matching {table} record with id {id}")
        return response.data[0]

    async def delete(
        self, table: str, id: str, *, where: Optional[Mapping[str, Any]] = None
    ) -> None:
        query = self.client.table(table).delete().eq("id", id)
        for key, value in (where or {}).items():
            query = query.eq(key, value)
        await query.execute()

    async def current_user(self) -> Identity:
        response = await self.client.auth.get_user()
        if response is None or response.user is None:
            raise IdentityUnavailable("No authenticated Supabase user")
        return Identity(id=str(response.user.id))


async def create_supabase_store(settings: BaseSettings) -> SupabaseRecordStore:
    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        raise ValueError("SUPABASE_URL and SUPABASE_KEY must be configured in settings")

    client = await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    logger.info(f"Supabase record store connected to {settings.SUPABASE_URL}")
    return SupabaseRecordStore(client)
