"""
Centralized configuration for the waitlist backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., RESEND_*, SEED_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "SNOOOM Waitlist API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 4000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_allow_headers: list[str] = ["Content-Type", "X-Admin-Token"]

    # Storage
    data_file: str = "data/store.json"

    # Admin shared secret (X-Admin-Token header or ?token=)
    admin_token: str = "change-me"

    # Public URL used in confirmation and referral links
    app_base_url: str = "http://localhost:4000"

    # Resend (confirmation emails)
    email_from: str = ""
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com"
    resend_timeout_seconds: float = 10.0

    # Codes
    access_code_prefix: str = "SNOOOM"
    early_access_days: int = 30
    early_access_max_uses: int = 1

    # Seeded drop window for a fresh store
    seed_drop_offset_days: int = 7
    seed_drop_length_days: int = 1

    # Signup form
    allowed_sizes: list[str] = ["S", "M", "L", "XL", "XXL"]

    # Insights
    referral_leaderboard_limit: int = 10


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
