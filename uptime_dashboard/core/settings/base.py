from typing import List, Optional

from pydantic_settings import BaseSettings as PydanticBaseSettings


class BaseSettings(PydanticBaseSettings):
    # ===============================
    # APPLICATION SETTINGS
    # ===============================
    PROJECT_NAME: str = "Uptime Dashboard API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = (
        "Resource uptime monitoring dashboard: resources, checks, events and notifications"
    )
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # ===============================
    # API SETTINGS
    # ===============================
    API_V1_STR: str = "/api/v1"
    BACKEND_CORS_ORIGINS: List[str] = []

    # ===============================
    # STORE SETTINGS
    # ===============================
    # "sql" (SQLAlchemy) or "supabase"
    STORE_BACKEND: str = "sql"
    DATABASE_URL: str = "sqlite:///./uptime_dashboard.db"
    DATABASE_ECHO: bool = False
    SUPABASE_URL: Optional[str] = None
    SUPABASE_KEY: Optional[str] = None

    # ===============================
    # GATEWAY SETTINGS
    # ===============================
    ANONYMOUS_USER_ID: str = "demo-user"
    STORE_PROBE_TABLE: str = "resources"
    STORE_PROBE_LIMIT: int = 1
    STORE_PROBE_TIMEOUT_SECONDS: float = 3.0
    STORE_CALL_TIMEOUT_SECONDS: float = 10.0
    DEFAULT_EVENT_LIMIT: int = 50

    # ===============================
    # LOGGING SETTINGS
    # ===============================
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # ===============================
    # COMPUTED PROPERTIES
    # ===============================
    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "testing"

    model_config = {
        "case_sensitive": True,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
