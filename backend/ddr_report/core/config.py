"""Application configuration and settings management."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DDR_REPORT_", extra="ignore")

    app_name: str = Field(default="DDR Report Renderer", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    log_level: str = Field(default="INFO", description="Root logging level for the service.")
    max_markdown_chars: int = Field(
        default=500_000,
        gt=0,
        description="Largest Markdown report accepted by the render endpoints.",
    )
    report_filename_prefix: str = Field(
        default="DDR_Report",
        description="Stem prefix used for exported report files.",
    )
    export_dir: Path | None = Field(
        default=None,
        description="Directory exported reports are written to. Defaults to the package 'exports' folder.",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser.",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()
