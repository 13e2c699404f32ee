# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[4]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "doc-tracker"

    # -- Checklist --
    CHECKLIST_TIMEZONE: str = Field(
        default="America/Toronto",
        description="Timezone used to pick the evaluation date when none is supplied.",
    )

    # -- Tracking --
    TRACKING_NOTE_PREFIX: str = Field(
        default="Document received",
        description="First line of the audit note written on each matched receipt.",
    )


settings = Settings()
