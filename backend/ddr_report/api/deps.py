"""Common dependency functions for API routes."""

from ddr_report.core.config import Settings, get_settings


def get_app_settings() -> Settings:
    return get_settings()
