#!/usr/bin/env python3
"""
Create the SQL record store tables.

Usage:
    python scripts/create_tables.py
"""

import logging
import sys

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from uptime_dashboard.core.database import Base, create_store_engine
from uptime_dashboard.core.log_config import setup_logging
from uptime_dashboard.core.settings import settings

# Import all models to register them with Base.metadata
import uptime_dashboard.models  # noqa: F401

logger = logging.getLogger("create_tables")


def create_all_tables() -> bool:
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Database: {settings.DATABASE_URL[:50]}...")

    try:
        engine = create_store_engine(settings.DATABASE_URL, echo=False)

        # Test connection first
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection successful")

        Base.metadata.create_all(bind=engine)

        tables = inspect(engine).get_table_names()
        logger.info(f"Tables present: {', '.join(sorted(tables))}")
        return True

    except SQLAlchemyError as e:
        logger.error(f"Database error: {e}")
        return False


if __name__ == "__main__":
    setup_logging(settings)
    sys.exit(0 if create_all_tables() else 1)
