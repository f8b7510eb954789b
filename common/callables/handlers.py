"""
Response side of the Firebase callable protocol.

Registers FastAPI exception handlers that render every APIException as
{"error": {"status": ..., "message": ...}} with the matching HTTP status.
Unstructured exceptions become a bare INTERNAL error so provider details
never leak to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from common.utils.exceptions import APIException, FUNCTIONS_ERROR_CODES
from common.utils.responses import error_response

logger = logging.getLogger(__name__)


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Render a structured callable error."""
    logger.info(f"{request.url.path} failed with {exc.status}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.status, exc.message, exc.details),
        headers=exc.headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any unexpected exception as INTERNAL."""
    logger.exception(f"Unhandled error in {request.url.path}", exc_info=exc)
    status, status_code = FUNCTIONS_ERROR_CODES["internal"]
    return JSONResponse(
        status_code=status_code,
        content=error_response(status, "INTERNAL"),
    )


def register_callable_exception_handlers(app: FastAPI) -> None:
    """Attach the callable error handlers to an application."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
