"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across multiple
Firebase-backed projects:

- database: Async Firestore connection bound to a Firebase app
- auth: Pluggable identity providers (Firebase) and callable auth
- callables: Firebase callable protocol over FastAPI
- utils: Callable responses and exceptions
- config: Base settings class
"""

from common.database import Firestore
from common.auth import (
    IdentityProvider,
    FirebaseAuth,
    CallableAuth,
    create_callable_auth_dependency,
)
from common.callables import read_callable_data, register_callable_exception_handlers
from common.utils import (
    success_response,
    error_response,
    APIException,
    InvalidArgumentException,
    UnauthenticatedException,
    PermissionDeniedException,
    NotFoundException,
    InternalServerException,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "Firestore",
    # Auth
    "IdentityProvider",
    "FirebaseAuth",
    "CallableAuth",
    "create_callable_auth_dependency",
    # Callables
    "read_callable_data",
    "register_callable_exception_handlers",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "InvalidArgumentException",
    "UnauthenticatedException",
    "PermissionDeniedException",
    "NotFoundException",
    "InternalServerException",
    # Config
    "BaseAppSettings",
]
