"""12-factor configuration adapter using environment variables."""

from datetime import date
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Vehicle lookup API
    vehicle_api_url: str = Field(
        default="https://api.irail.be/vehicle/",
        description="Base URL of the iRail vehicle lookup endpoint",
    )
    vehicle_api_timeout: float = Field(
        default=10.0, description="Timeout for a single vehicle request in seconds"
    )
    vehicle_api_min_delay_seconds: float = Field(
        default=0.35,
        description="Minimum delay between two vehicle requests to stay within the API rate limit",
    )
    max_concurrent_fetches: int = Field(
        default=1,
        description="Maximum simultaneous vehicle requests within one journey option",
    )

    # Log archives
    log_archive_url: str = Field(
        default="https://gtfs.irail.be/logs/",
        description="Base URL where the daily irailapi-YYYYMMDD.log.tar.gz archives live",
    )
    fetch_archives: bool = Field(
        default=True, description="Download and unpack log archives before processing"
    )
    archive_start_date: date = Field(
        default=date(2019, 11, 1), description="First day of log archives to download"
    )
    archive_end_date: date = Field(
        default=date(2019, 11, 30), description="Last day (inclusive) of log archives to download"
    )

    # Local directories
    archive_dir: Path = Field(
        default=Path("./archive"), description="Directory holding the unpacked log files"
    )
    output_dir: Path = Field(
        default=Path("./journeys"), description="Directory receiving one JSON file per journey"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("max_concurrent_fetches")
    @classmethod
    def validate_max_concurrent_fetches(cls, v: int) -> int:
        """Validate at least one fetch may run at a time."""
        if v < 1:
            raise ValueError("max_concurrent_fetches must be at least 1")
        return v

    @field_validator("vehicle_api_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the request timeout is positive."""
        if v <= 0:
            raise ValueError("vehicle_api_timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @model_validator(mode="after")
    def validate_archive_range(self) -> "AppConfig":
        """Validate the archive date range is not reversed."""
        if self.archive_end_date < self.archive_start_date:
            raise ValueError("archive_end_date must not be before archive_start_date")
        return self
