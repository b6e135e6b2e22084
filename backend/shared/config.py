"""
Centralized configuration for the Storefront backend.

All settings are loaded from environment variables with sensible defaults.
Settings are read once per process and treated as immutable afterwards.
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
    app_name: str = "Storefront API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, used by run_migrations.py

    # Tokens
    jwt_secret: str = ""
    jwt_issuer: str = "storefront"
    jwt_expiration_hours: int = 48

    # Email verification
    otp_validity_seconds: int = 86400
    email_backend: str = "sendgrid"  # "sendgrid" or "console"
    sendgrid_api_key: str = ""
    email_sender: str = "no-reply@storefront.local"

    # Credentials
    password_hash_rounds: int = 4  # bcrypt minimum cost

    # Seeded administrator (skipped when either value is empty)
    admin_email: str = ""
    admin_password: str = ""


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
