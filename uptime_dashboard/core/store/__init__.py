import logging

from uptime_dashboard.core.database import create_store_engine
from uptime_dashboard.core.settings import BaseSettings
from uptime_dashboard.core.store.base import Record, RecordStore
from uptime_dashboard.core.store.sql import SqlRecordStore

logger = logging.getLogger(__name__)


async def build_record_store(settings: BaseSettings) -> RecordStore:
    """Create the record store selected by ``STORE_BACKEND``."""
    backend = settings.STORE_BACKEND.lower()

    if backend == "supabase":
        from uptime_dashboard.core.store.supabase import create_supabase_store

        return await create_supabase_store(settings)

    if backend == "sql":
        engine = create_store_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        store = SqlRecordStore(engine)
        store.create_tables()
        logger.info("SQL record store ready")
        return store

    raise ValueError(f"Unsupported STORE_BACKEND: {settings.STORE_BACKEND}")


__all__ = ["Record", "RecordStore", "SqlRecordStore", "build_record_store"]
