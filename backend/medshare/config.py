"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults for development.

    Environment Variables:
        APP_NAME: Name reported by the root endpoint and OpenAPI docs
        ENVIRONMENT: development | production (docs are hidden in production)
        DEBUG: Enable debug mode (default False)
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
        CORS_ORIGINS: Comma separated list of allowed origins
        SEED_DEMO_DATA: Load the demo clinics and stock at startup
        EXPIRING_SOON_DAYS: Items expiring within this many days are "Expiring Soon"
        LOW_STOCK_THRESHOLD: Items with fewer units than this are "Low Stock"
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "MedShare API"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # HTTP
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Demo data
    SEED_DEMO_DATA: bool = True

    # Inventory status thresholds
    EXPIRING_SOON_DAYS: int = 90
    LOW_STOCK_THRESHOLD: int = 500

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()


# Module-level settings instance
settings = get_settings()
