"""
FastAPI dependencies for User system.

Provides dependency injection for user-related services.
"""

from common.auth.base import IdentityProvider
from common.database import Firestore
from functions.user.services.user_deletion_service import UserDeletionService


_user_deletion_service: UserDeletionService | None = None


def init_user_services(
    db: Firestore,
    identity_provider: IdentityProvider,
    users_collection: str = "users"
) -> None:
    """
    Initialize user services with database and identity provider.

    Called once at application startup.

    Args:
        db: Connected Firestore manager
        identity_provider: For account lookup and deletion
        users_collection: Name of the profile collection
    """
    global _user_deletion_service

    _user_deletion_service = UserDeletionService(
        db=db,
        identity_provider=identity_provider,
        users_collection=users_collection
    )


def get_user_deletion_service() -> UserDeletionService:
    """Get user deletion service instance."""
    if _user_deletion_service is None:
        raise RuntimeError("User services not initialized. Call init_user_services first.")
    return _user_deletion_service
