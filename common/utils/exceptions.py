"""
Callable-function exceptions with error codes.

Extends FastAPI's HTTPException with the error codes of the Firebase
callable protocol, so handlers can raise them and the exception handlers
in common.callables render the standard error envelope.

Example:
    from common.utils import NotFoundException, InvalidArgumentException

    async def handle(data: dict):
        email = data.get("email")
        if not isinstance(email, str) or not email:
            raise InvalidArgumentException("A valid email must be provided.")
        user = await auth.get_user_by_email(email)
        if not user:
            raise NotFoundException(f"User with email {email} not found.")
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException


# Callable error code -> (canonical status, HTTP status code)
FUNCTIONS_ERROR_CODES: Dict[str, tuple] = {
    "ok": ("OK", 200),
    "cancelled": ("CANCELLED", 499),
    "unknown": ("UNKNOWN", 500),
    "invalid-argument": ("INVALID_ARGUMENT", 400),
    "deadline-exceeded": ("DEADLINE_EXCEEDED", 504),
    "not-found": ("NOT_FOUND", 404),
    "already-exists": ("ALREADY_EXISTS", 409),
    "permission-denied": ("PERMISSION_DENIED", 403),
    "unauthenticated": ("UNAUTHENTICATED", 401),
    "resource-exhausted": ("RESOURCE_EXHAUSTED", 429),
    "failed-precondition": ("FAILED_PRECONDITION", 400),
    "aborted": ("ABORTED", 409),
    "out-of-range": ("OUT_OF_RANGE", 400),
    "unimplemented": ("UNIMPLEMENTED", 501),
    "internal": ("INTERNAL", 500),
    "unavailable": ("UNAVAILABLE", 503),
    "data-loss": ("DATA_LOSS", 500),
}


class APIException(HTTPException):
    """
    Base API exception carrying a callable error code.

    Provides a consistent error envelope across every callable.
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Create an API exception.

        Args:
            code: Callable error code (e.g. "not-found")
            message: Human-readable error message
            details: Additional error details, passed to the client as-is
            headers: Optional response headers
        """
        if code not in FUNCTIONS_ERROR_CODES:
            raise ValueError(f"Unknown callable error code: {code}")

        status, status_code = FUNCTIONS_ERROR_CODES[code]

        self.code = code
        self.status = status
        self.message = message
        self.details = details

        detail: Dict[str, Any] = {"status": status, "message": message}

        if details is not None:
            detail["details"] = details

        super().__init__(
            status_code=status_code,
            detail=detail,
            headers=headers,
        )


class InvalidArgumentException(APIException):
    """400 Invalid Argument - Malformed or missing input."""

    def __init__(
        self,
        message: str = "Invalid argument",
        details: Optional[Any] = None,
    ):
        super().__init__("invalid-argument", message, details)


class UnauthenticatedException(APIException):
    """401 Unauthenticated - Missing or invalid ID token."""

    def __init__(
        self,
        message: str = "Unauthenticated",
        details: Optional[Any] = None,
    ):
        super().__init__("unauthenticated", message, details)


class PermissionDeniedException(APIException):
    """403 Permission Denied - Valid auth but insufficient permissions."""

    def __init__(
        self,
        message: str = "Permission denied",
        details: Optional[Any] = None,
    ):
        super().__init__("permission-denied", message, details)


class NotFoundException(APIException):
    """404 Not Found - Resource doesn't exist."""

    def __init__(
        self,
        message: str = "Not found",
        details: Optional[Any] = None,
    ):
        super().__init__("not-found", message, details)


class InternalServerException(APIException):
    """500 Internal - Unexpected server or provider error."""

    def __init__(
        self,
        message: str = "INTERNAL",
        details: Optional[Any] = None,
    ):
        super().__init__("internal", message, details)

