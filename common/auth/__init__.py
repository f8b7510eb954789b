"""
Authentication module - Pluggable identity providers (Firebase).
"""

from common.auth.base import IdentityProvider
from common.auth.firebase_auth import FirebaseAuth, initialize_firebase_app
from common.auth.dependencies import (
    CallableAuth,
    create_callable_auth_dependency,
    require_admin_claim,
)

__all__ = [
    "IdentityProvider",
    "FirebaseAuth",
    "initialize_firebase_app",
    "CallableAuth",
    "create_callable_auth_dependency",
    "require_admin_claim",
]
