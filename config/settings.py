"""Pydantic Settings — typed configuration with .env auto-loading."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment / .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── Service ──────────────────────────────────────────────
    service_port: int = 10000
    cors_origins: list[str] = ["*"]
    debug: bool = False
    log_level: str = "INFO"

    # ── Scan storage ─────────────────────────────────────────
    content_backend: str = "local"  # "local" or "s3"
    upload_path: str = "uploads"
    s3_bucket: str = ""
    s3_region: str = "us-east-1"
    s3_endpoint_url: str = ""  # MinIO / LocalStack

    # ── Listings ─────────────────────────────────────────────
    attempts_page_limit: int = 100
    stats_window_days: int = 7


@lru_cache
def get_settings() -> Settings:
    """Singleton accessor for application settings."""
    return Settings()
