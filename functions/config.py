"""
duckduckGoose functions settings.

Extends the base settings with callable-specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """duckduckGoose-specific settings."""

    # ==========================================================================
    # Callable Deployment
    # ==========================================================================
    FUNCTION_REGION: str = "us-central1"

    # ==========================================================================
    # Firestore Collections
    # ==========================================================================
    # Profile documents, matched on their "email" field
    USERS_COLLECTION: str = "users"

    # ==========================================================================
    # Access Control
    # ==========================================================================
    # When enabled, deleteUserByEmail requires an ID token with ADMIN_CLAIM set
    REQUIRE_ADMIN: bool = False
    ADMIN_CLAIM: str = "isAdmin"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
