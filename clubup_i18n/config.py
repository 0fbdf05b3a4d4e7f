"""
Configuration module for ClubUp localization.

Uses Pydantic Settings for environment variable support and validation.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import Optional, Literal
from pathlib import Path


class Settings(BaseSettings):
    """
    Application configuration with environment variable support.

    Every setting can be overridden with a ``CLUBUP_``-prefixed environment
    variable or a .env file.
    """

    # Persistence
    storage_path: str = Field(
        default="data/preferences.json",
        description="JSON file holding the saved country and locale"
    )

    # Catalogs
    localization_dir: Optional[str] = Field(
        default=None,
        description="Directory with custom country and translation YAML files"
    )

    # Detection
    timezone: Optional[str] = Field(
        default=None,
        description="IANA timezone used for first-run country detection instead of the system zone"
    )

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file path"
    )
    json_logs: bool = Field(
        default=False,
        description="Output logs as JSON (for production)"
    )

    model_config = {
        "env_prefix": "CLUBUP_",
        "env_file": [
            ".env",
            Path(__file__).parent / ".env",
        ],
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

    @field_validator("storage_path", mode="before")
    @classmethod
    def ensure_parent_exists(cls, v: str) -> str:
        """Create the directory the preferences file lives in."""
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)

    @field_validator("localization_dir", "timezone", "log_file", mode="before")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty environment values as unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
