"""
Configuration and settings for the ENFOCO backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")

    # Admin session
    admin_password: Optional[str] = Field(default=None)
    # Generated per process when unset, which invalidates cookies on restart.
    session_secret: Optional[str] = Field(default=None)
    admin_cookie_name: str = Field(default="admin_session")
    cookie_secure: bool = Field(default=False)

    # Feed
    posts_file: str = Field(default="data/posts.json")
    require_admin_for_posts: bool = Field(default=True)

    # HTTP
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    # Only honoured together with an explicit origin list.
    cors_allow_credentials: bool = Field(default=False)
    static_dir: Optional[str] = Field(default=None)

    # Airtable
    airtable_token: Optional[str] = Field(default=None)
    airtable_base_id: Optional[str] = Field(default=None)
    airtable_api_url: str = Field(default="https://api.airtable.com/v0")
    airtable_waitlist_table: str = Field(default="ENFOCO Waitlist")
    airtable_suggestions_table: str = Field(default="User Suggestions & Ideas")
    airtable_partnerships_table: str = Field(default="Partnership & Collaboration")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
