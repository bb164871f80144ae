from __future__ import annotations
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ----------------
    # Logging
    # ----------------
    app_name: str = Field("change-notifier", alias="APP_NAME")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")     # 1/0, true/false
    log_file: str = Field("", alias="LOG_FILE")         # empty = no file handler
    log_file_json: bool = Field(False, alias="LOG_FILE_JSON")
    log_max_bytes: int = Field(1024 * 1024, alias="LOG_MAX_BYTES")
    log_backups: int = Field(3, alias="LOG_BACKUPS")

    # ----------------
    # Demo subject
    # ----------------
    dog_name: str = Field("Snoopy", alias="DOG_NAME")
    dog_age: int = Field(5, alias="DOG_AGE")

    # ----------------
    # Metrics
    # ----------------
    metrics_dump: bool = Field(False, alias="METRICS_DUMP")

    # ----------------
    # Pydantic settings
    # ----------------
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

settings = Settings()
