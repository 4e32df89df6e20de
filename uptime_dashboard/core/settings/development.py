from typing import List, Optional

from .base import BaseSettings


class DevelopmentSettings(BaseSettings):
    # ===============================
    # ENVIRONMENT SETTINGS
    # ===============================
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # ===============================
    # APPLICATION SETTINGS
    # ===============================
    PROJECT_NAME: str = "Uptime Dashboard API - Development"
    VERSION: str = "1.0.0-dev"
    DESCRIPTION: str = "Development environment for Uptime Dashboard API"

    # ===============================
    # STORE SETTINGS
    # ===============================
    STORE_BACKEND: str = "sql"
    DATABASE_URL: str = "sqlite:///./uptime_dashboard_dev.db"
    DATABASE_ECHO: bool = True  # Show SQL queries in development

    # ===============================
    # CORS SETTINGS
    # ===============================
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",  # Vite dev server
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # ===============================
    # GATEWAY SETTINGS
    # ===============================
    STORE_PROBE_TIMEOUT_SECONDS: float = 5.0
    STORE_CALL_TIMEOUT_SECONDS: float = 15.0

    # ===============================
    # LOGGING SETTINGS
    # ===============================
    LOG_LEVEL: str = "DEBUG"
    LOG_FILE: Optional[str] = "logs/app.log"

    model_config = {
        "case_sensitive": True,
        "env_file": ".env.dev",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
