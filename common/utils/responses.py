"""
Standard callable response helpers.

Provides consistent envelopes for the Firebase callable protocol:
the success payload returned under "result", and the failure body
{"error": {"status": ..., "message": ...}}.

Example:
    from common.utils import success_response, error_response

    result = success_response(message=f"User {email} deleted successfully.")
    body = error_response("NOT_FOUND", f"User with email {email} not found.")
"""

from typing import Any, Optional, Dict


def success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a standard success payload.

    Args:
        data: The response data (can be dict, list, or any serializable type)
        message: Optional success message

    Returns:
        Dictionary with success=True and optional data/message
    """
    response: Dict[str, Any] = {"success": True}

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    return response


def error_response(
    status: str,
    message: str,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Create the callable error envelope.

    Args:
        status: Canonical status (e.g. "NOT_FOUND")
        message: Human-readable error message
        details: Additional error details

    Returns:
        Dictionary with a single "error" object
    """
    error: Dict[str, Any] = {"status": status, "message": message}

    if details is not None:
        error["details"] = details

    return {"error": error}
