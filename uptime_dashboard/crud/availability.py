import asyncio
import logging

from uptime_dashboard.core.store.base import RecordStore

logger = logging.getLogger(__name__)


class StoreAvailability:
    """
    Answers "can the remote store be used right now?".

    Every call runs a fresh capped read, so there is no breaker state to
    reset: once the store answers again the gateway is back on the real path.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        table: str = "resources",
        limit: int = 1,
        timeout: float = 3.0,
    ):
        self.store = store
        self.table = table
        self.limit = limit
        self.timeout = timeout

    async def is_available(self) -> bool:
        try:
            await asyncio.wait_for(
                self.store.list(self.table, limit=self.limit), timeout=self.timeout
            )
            return True
        except Exception as e:
            logger.info(
                f"Record store not available, using fallback data ({type(e).__name__}: {e})"
            )
            return False
