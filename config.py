# config.py
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    # --- Metadata ---
    APP_NAME: str = "Speech Performance Analysis API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "API for spoken-delivery analysis and coaching recommendations"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    JSON_LOGS: bool = False

    # --- CORS ---
    ALLOWED_ORIGINS: List[str] = ["*"]

    # --- Analysis ---
    # Raise instead of warning when word timings are not chronological
    SPEECHCOACH_STRICT_TIMINGS: bool = False
    SPEECHCOACH_MAX_RECOMMENDATIONS: int = 8

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = AppSettings()
