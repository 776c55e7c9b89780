# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Group related settings together; each group becomes a section future PRs extend.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "mortgage-calculator"
    DEBUG: bool = False

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000"]

    # -- Scenario persistence --
    SCENARIO_BACKEND: Literal["file", "s3"] = Field(
        default="file",
        description="Key-value backend for saved scenarios: local JSON files or S3.",
    )
    SCENARIO_DATA_DIR: str = Field(
        default="data/scenarios",
        description="Directory used by the file backend.",
    )

    # -- Storage (S3 / MinIO) --
    S3_ENDPOINT: str = "http://localhost:9090"
    S3_ACCESS_KEY: str = "minio"
    S3_SECRET_KEY: str = "miniosecret"
    S3_BUCKET: str = "mortgage-calculator"
    S3_REGION: str = "us-east-1"

    # -- Spreadsheet export --
    EXPORT_MAX_AMORTIZATION_ROWS: int = Field(
        default=100,
        ge=1,
        description="Payments written to the Amortization sheet before truncating.",
    )
    EXPORT_URL_TTL_SECONDS: int = Field(
        default=3600,
        description="Lifetime of the presigned download URL returned by an export.",
    )


settings = Settings()
