from typing import Optional

from .base import BaseSettings


class TestingSettings(BaseSettings):
    ENVIRONMENT: str = "testing"
    DEBUG: bool = False

    PROJECT_NAME: str = "Uptime Dashboard API - Testing"
    VERSION: str = "1.0.0-test"

    STORE_BACKEND: str = "sql"
    DATABASE_URL: str = "sqlite:///:memory:"
    DATABASE_ECHO: bool = False

    # Short timeouts keep hung-store tests fast
    STORE_PROBE_TIMEOUT_SECONDS: float = 0.2
    STORE_CALL_TIMEOUT_SECONDS: float = 0.5

    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None

    model_config = {
        "case_sensitive": True,
        "env_file": ".env.test",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
