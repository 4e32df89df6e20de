#!/usr/bin/env python3
"""
Load the sample dataset for one user.

Runs the same idempotent seeding as the dashboard's "Load Sample Data"
action: nothing is written when the user already has resources.

Usage:
    python scripts/seed_sample_data.py <user-id>
"""

import asyncio
import logging
import sys

from uptime_dashboard.core.log_config import setup_logging
from uptime_dashboard.core.settings import settings
from uptime_dashboard.core.store import SqlRecordStore, build_record_store
from uptime_dashboard.crud.gateway import Gateway
from uptime_dashboard.services.seed import seed_sample_data

logger = logging.getLogger("seed_sample_data")


async def main(user_id: str) -> int:
    store = await build_record_store(settings)
    if isinstance(store, SqlRecordStore):
        store = store.for_user(user_id)

    result = await seed_sample_data(Gateway(store, settings=settings))
    if result.seeded:
        logger.info(f"Created {result.writes} records for {user_id}")
    else:
        logger.info(f"Nothing written: {result.skipped_reason}")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    setup_logging(settings)
    sys.exit(asyncio.run(main(sys.argv[1])))
