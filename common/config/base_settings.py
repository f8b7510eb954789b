"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        # App-specific settings
        FUNCTION_REGION: str = "us-central1"

    settings = Settings()
    print(settings.FIREBASE_PROJECT_ID)
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # Firebase Settings
    # ==========================================================================
    # Service account JSON; falls back to env fields, then ADC
    FIREBASE_CREDENTIALS_PATH: Optional[str] = None
    FIREBASE_PROJECT_ID: Optional[str] = None

    # Named Firestore database, None for "(default)"
    FIRESTORE_DATABASE_ID: Optional[str] = None

    # ==========================================================================
    # Server Settings
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"

    # CORS Settings
    CORS_ORIGINS: str = "*"  # Comma-separated origins or "*"
    CORS_ALLOW_CREDENTIALS: bool = True

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def get_cors_origins(self) -> list:
        """Parse CORS_ORIGINS into a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"

    def validate_required(self) -> None:
        """
        Validate that required settings are configured.

        Raises:
            ValueError: If required settings are missing
        """
        errors = []

        if self.is_production() and not (
            self.FIREBASE_CREDENTIALS_PATH or self.FIREBASE_PROJECT_ID
        ):
            errors.append(
                "FIREBASE_CREDENTIALS_PATH or FIREBASE_PROJECT_ID is required in production"
            )

        if self.is_production() and self.CORS_ORIGINS == "*" and self.CORS_ALLOW_CREDENTIALS:
            errors.append(
                "CORS_ORIGINS must list explicit origins when credentials are allowed in production"
            )

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
