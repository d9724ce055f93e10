"""
Core configuration for DefectDash.

Loads settings from environment variables with Pydantic validation.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ─────────────────────────────────────────────────────────────
    # Application
    # ─────────────────────────────────────────────────────────────
    ENV: str = "development"
    DEBUG: bool = True
    APP_URL: str = "http://localhost:8000"
    LOG_LEVEL: str = "INFO"

    # ─────────────────────────────────────────────────────────────
    # Remote dashboard API
    # ─────────────────────────────────────────────────────────────
    DASHBOARD_API_BASE_URL: str = "http://localhost:8080/api"
    DASHBOARD_API_TOKEN: str | None = None
    DASHBOARD_API_TIMEOUT: float = 30.0

    # ─────────────────────────────────────────────────────────────
    # Dashboard widgets
    # ─────────────────────────────────────────────────────────────
    SAMPLE_FALLBACK_ENABLED: bool = False  # Use sample values when a widget fetch fails
    DEFAULT_KLOC: float = 1.0

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENV.lower() == "production"


# Global settings instance
settings = Settings()
