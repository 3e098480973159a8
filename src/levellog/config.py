"""
Logging Configuration.

Values are read from ``LEVELLOG_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .formatters import DEFAULT_TIMESTAMP_FORMAT
from .levels import Severity

DEFAULT_LOG_FILE_NAME = "out.log"


class LoggingSettings(BaseSettings):
    """Thresholds and file placement for the process-wide logger."""

    model_config = SettingsConfigDict(
        env_prefix="LEVELLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    console_level: Severity = Field(default=Severity.INFO, description="Minimum level written to stdout")
    file_level: Severity = Field(default=Severity.DEBUG, description="Minimum level written to the log file")
    file_name: str = Field(default=DEFAULT_LOG_FILE_NAME, description="Log file name inside the log directory")
    log_dir: Optional[Path] = Field(
        default=None,
        description="Directory for the log file (defaults to the working or executable directory)",
    )
    timestamp_format: str = Field(
        default=DEFAULT_TIMESTAMP_FORMAT,
        description="strftime format of the line prefix",
    )

    @field_validator("console_level", "file_level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> Severity:
        return Severity.parse(value)  # type: ignore[arg-type]
