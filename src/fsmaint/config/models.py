"""Configuration models using Pydantic for validation."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..paths import MAX_PATH


class PathSettings(BaseModel):
    """Limits applied when building paths."""

    max_path: int = Field(
        default=MAX_PATH,
        ge=2,
        description="Maximum path length in bytes, including the terminator",
    )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path | None = Field(
        default=None, description="Directory for log files (defaults to ~/.local/state/fsmaint)"
    )
    max_bytes: int = Field(
        default=1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=3, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class FsMaintConfig(BaseModel):
    """Main configuration for fsmaint."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    paths: PathSettings = Field(default_factory=PathSettings, description="Path limits")

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )
