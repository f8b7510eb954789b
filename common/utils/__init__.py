"""
Utilities module - Common helpers for callable responses and exceptions.
"""

from common.utils.responses import success_response, error_response
from common.utils.exceptions import (
    FUNCTIONS_ERROR_CODES,
    APIException,
    InvalidArgumentException,
    UnauthenticatedException,
    PermissionDeniedException,
    NotFoundException,
    InternalServerException,
)

__all__ = [
    "success_response",
    "error_response",
    "FUNCTIONS_ERROR_CODES",
    "APIException",
    "InvalidArgumentException",
    "UnauthenticatedException",
    "PermissionDeniedException",
    "NotFoundException",
    "InternalServerException",
]
