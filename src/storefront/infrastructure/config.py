"""Runtime settings, read from ``STOREFRONT_*`` environment variables."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class StorefrontSettings(BaseSettings):
    """Settings for the storefront CLI and its JSON storage."""

    data_dir: Path = Field(default=_DEFAULT_DATA_DIR, description="JSON storage directory")
    language: str = Field(default="en", description="Language of the resource strings")
    log_level: str = "WARNING"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        case_sensitive=False,
        extra="ignore",
    )
