from typing import List, Optional

from pydantic import Field

from .base import BaseSettings


class ProductionSettings(BaseSettings):
    # ===============================
    # ENVIRONMENT SETTINGS
    # ===============================
    ENVIRONMENT: str = "production"
    DEBUG: bool = False

    # ===============================
    # APPLICATION SETTINGS
    # ===============================
    PROJECT_NAME: str = "Uptime Dashboard API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Production Uptime Dashboard API"

    # ===============================
    # STORE SETTINGS
    # ===============================
    STORE_BACKEND: str = Field(default="supabase", description="sql or supabase")
    DATABASE_URL: str = Field(
        default="", description="SQLAlchemy URL, required when STORE_BACKEND=sql"
    )
    DATABASE_ECHO: bool = False  # Never echo SQL in production
    SUPABASE_URL: Optional[str] = Field(default=None, description="Supabase project URL")
    SUPABASE_KEY: Optional[str] = Field(
        default=None, description="Supabase anon/service role key"
    )

    # ===============================
    # CORS SETTINGS
    # ===============================
    BACKEND_CORS_ORIGINS: List[str] = Field(
        default_factory=list, description="CORS origins for production frontends"
    )

    # ===============================
    # GATEWAY SETTINGS
    # ===============================
    STORE_PROBE_TIMEOUT_SECONDS: float = Field(
        default=2.0, description="Upper bound for the availability probe"
    )
    STORE_CALL_TIMEOUT_SECONDS: float = Field(
        default=8.0, description="Upper bound for each store operation"
    )

    # ===============================
    # LOGGING SETTINGS
    # ===============================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FILE: Optional[str] = Field(default=None, description="Log file path")

    model_config = {
        "case_sensitive": True,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
