"""
Application Configuration
=========================

Centralized configuration using Pydantic Settings for type-safe environment variables.
All config is loaded from environment variables or .env file.

Environment Setup:
------------------
For local development, create a .env file in /backend with:
    OPENAI_API_KEY=sk-...
    OPENAI_MODEL=gpt-4o
    DATABASE_URL=sqlite+aiosqlite:///./sop_engineer.db

The API key is optional at startup. Assets and stored procedures can be
browsed without it; only generation requires a credential and fails with a
ConfigurationError when it is missing.

History Storage Key:
--------------------
The whole procedure history lives under a single storage key. The "_v2"
suffix is a schema cutoff: bumping it makes the app start from an empty
history and leaves data written under the old key untouched (no migration).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic Settings provides:
    - Automatic type coercion (str -> float, etc.)
    - .env file support
    - Case-insensitive matching
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = "SOP Engineer"
    debug: bool = False  # Set DEBUG=true for verbose logging
    environment: Literal["development", "staging", "production"] = "development"

    # -------------------------------------------------------------------------
    # Durable Storage
    # -------------------------------------------------------------------------
    # Key/value table holding the serialized history blob.
    # Defaults to a local SQLite file; a PostgreSQL URL also works.
    database_url_override: str | None = Field(None, alias="DATABASE_URL")
    sqlite_path: str = "./sop_engineer.db"

    history_storage_key: str = "sop_history_v2"
    # Raise CorruptStateError on unparseable history instead of starting empty
    strict_history_load: bool = False

    @property
    def database_url(self) -> str:
        """
        Get async database connection URL.

        Priority:
        1. DATABASE_URL env var (converted to an async driver)
        2. Local SQLite file at sqlite_path
        """
        if self.database_url_override:
            url = self.database_url_override
            if url.startswith("postgres://"):
                url = url.replace("postgres://", "postgresql+asyncpg://", 1)
            elif url.startswith("postgresql://"):
                url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
            elif url.startswith("sqlite://") and "+aiosqlite" not in url:
                url = url.replace("sqlite://", "sqlite+aiosqlite://", 1)
            return url
        return f"sqlite+aiosqlite:///{self.sqlite_path}"

    # -------------------------------------------------------------------------
    # OpenAI API Configuration
    # -------------------------------------------------------------------------
    # Required only for generation. Missing key -> ConfigurationError.
    openai_api_key: str | None = Field(None, description="OpenAI API key")
    openai_model: str = "gpt-4o"
    # Low temperature: procedures should be repeatable, not creative
    generation_temperature: float = Field(0.4, ge=0.0, le=2.0)

    # -------------------------------------------------------------------------
    # API Configuration
    # -------------------------------------------------------------------------
    api_prefix: str = "/api"

    # CORS origins - frontend URLs allowed to make requests (comma-separated)
    cors_origins_str: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173",
        alias="CORS_ORIGINS"
    )

    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


# Global settings instance - import this throughout the app
# Usage: from app.config import settings
settings = get_settings()
