# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "schedule-store")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8005"))

    # strftime / strptime patterns used when a store is built without its own
    DEFAULT_DATE_FORMAT: str = os.getenv("DEFAULT_DATE_FORMAT", "%Y-%m-%d")
    DEFAULT_TIME_FORMAT: str = os.getenv("DEFAULT_TIME_FORMAT", "%Y-%m-%dT%H:%M:%S%z")
    # zone applied to input that carries no UTC offset
    DEFAULT_TIMEZONE: str = os.getenv("DEFAULT_TIMEZONE", "UTC")

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
