"""
Showcase Backend - Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, database.py and the store dependency.
When:  Loaded once at module import time; validated before the app serves.

Connection string:
    The deployed service talks to a MongoDB Atlas cluster. Only the
    credentials come from the environment (DB_USERNAME / DB_PASSWORD); the
    cluster host and app name are fixed. MONGODB_URI replaces the whole
    string for local development.
"""

from typing import List
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults except the Atlas credentials,
    which are checked by validate_required_for_production() at startup.
    """

    # ── Document Store ────────────────────────────────────────────────────
    db_username: str = Field(default="", description="MongoDB Atlas user")
    db_password: str = Field(default="", description="MongoDB Atlas password")

    # Full connection string override, e.g. mongodb://localhost:27017
    mongodb_uri: str = Field(default="")

    mongodb_cluster_host: str = Field(default="cluster0.f8ar27k.mongodb.net")
    mongodb_app_name: str = Field(default="Cluster0")

    database_name: str = Field(default="showcaseDB")
    artworks_collection: str = Field(default="adds")
    favorites_collection: str = Field(default="favorites")

    # How long the driver waits for a usable server before giving up.
    # Surfaces as StoreUnavailableError (503) rather than a hung request.
    mongodb_server_selection_timeout_ms: int = Field(default=5000, ge=100, le=60000)
    mongodb_max_pool_size: int = Field(default=100, ge=1, le=500)

    @property
    def mongodb_url(self) -> str:
        """Connection string assembled from credentials and the fixed cluster address."""
        if self.mongodb_uri:
            return self.mongodb_uri
        return (
            f"mongodb+srv://{quote_plus(self.db_username)}:{quote_plus(self.db_password)}"
            f"@{self.mongodb_cluster_host}/?appName={self.mongodb_app_name}"
        )

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated origins; "*" allows any (the showcase frontend is
    # served from several preview domains).
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that the store credentials are configured.
        When:  Called during app startup (lifespan).
        How:   Collects every problem and raises one ValueError listing them.
        """
        if self.mongodb_uri:
            return
        errors = []
        if not self.db_username:
            errors.append("DB_USERNAME is not set (or set MONGODB_URI instead).")
        if not self.db_password:
            errors.append("DB_PASSWORD is not set (or set MONGODB_URI instead).")
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


settings = Settings()
