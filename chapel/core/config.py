# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "chapel-rotation")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8005"))

    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./chapel.db")
    POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))
    INIT_SCHEMA: bool = os.getenv("INIT_SCHEMA", "true").lower() == "true"

    NOTIFICATION_SERVICE_URL: str = os.getenv("NOTIFICATION_SERVICE_URL", "")
    NOTIFICATION_TIMEOUT: float = float(os.getenv("NOTIFICATION_TIMEOUT", "3.0"))

    DEFAULT_CALENDAR_DAYS: int = int(os.getenv("DEFAULT_CALENDAR_DAYS", "30"))
    MAX_CALENDAR_DAYS: int = int(os.getenv("MAX_CALENDAR_DAYS", "366"))
    DEFAULT_HISTORY_LIMIT: int = int(os.getenv("DEFAULT_HISTORY_LIMIT", "50"))
    MAX_HISTORY_LIMIT: int = int(os.getenv("MAX_HISTORY_LIMIT", "500"))
    CALENDAR_LOCALE: str = os.getenv("CALENDAR_LOCALE", "pt-BR")
    CALENDAR_TIMEZONE: str = os.getenv("CALENDAR_TIMEZONE", "UTC")

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
