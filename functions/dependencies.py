"""
FastAPI dependencies for duckduckGoose functions.

Provides dependency injection for shared services.
"""

import logging

import firebase_admin

from common.auth import FirebaseAuth, IdentityProvider, create_callable_auth_dependency
from common.database import get_main_database
from functions.user.dependencies import init_user_services

logger = logging.getLogger(__name__)


_identity_provider: IdentityProvider | None = None


def init_all_services(
    firebase_app: firebase_admin.App,
    users_collection: str = "users"
) -> None:
    """
    Initialize all services.

    Called once at application startup, after Firebase is initialized
    and the main Firestore database is set.

    Args:
        firebase_app: Initialized Firebase app
        users_collection: Name of the profile collection
    """
    global _identity_provider

    _identity_provider = FirebaseAuth(app=firebase_app)

    init_user_services(
        db=get_main_database(),
        identity_provider=_identity_provider,
        users_collection=users_collection
    )
    logger.info("All services initialized")


def get_identity_provider() -> IdentityProvider:
    """Get identity provider instance."""
    if _identity_provider is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _identity_provider


get_callable_auth = create_callable_auth_dependency(get_identity_provider)
