"""
Request side of the Firebase callable protocol.

A callable request is an HTTP POST with a JSON body of the form
{"data": <payload>}. Anything else is answered with INVALID_ARGUMENT
before the handler runs.
"""

import json
import logging
from typing import Any

from fastapi import Request

from common.utils.exceptions import InvalidArgumentException

logger = logging.getLogger(__name__)


async def read_callable_data(request: Request) -> Any:
    """
    Extract the "data" payload from a callable request body.

    Args:
        request: Incoming FastAPI request

    Returns:
        The decoded payload (any JSON value, including None)

    Raises:
        InvalidArgumentException: If the body is not JSON or lacks "data"
    """
    content_type = request.headers.get("content-type", "")
    if not content_type.lower().startswith("application/json"):
        logger.warning(f"Callable request with content-type {content_type!r}")
        raise InvalidArgumentException("Bad Request")

    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Callable request body is not valid JSON")
        raise InvalidArgumentException("Bad Request")

    if not isinstance(body, dict) or "data" not in body:
        logger.warning("Callable request body is missing data")
        raise InvalidArgumentException("Bad Request")

    return body["data"]
