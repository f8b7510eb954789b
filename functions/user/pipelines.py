"""
User system pipeline functions.

Stateless orchestration logic for user callables.
"""

import logging
from typing import Any

from common.utils.exceptions import InvalidArgumentException
from functions.user.models import DeletionRequest
from functions.user.services.user_deletion_service import UserDeletionService

logger = logging.getLogger(__name__)


def validate_deletion_request(data: Any) -> DeletionRequest:
    """
    Validate the deleteUserByEmail payload.

    Args:
        data: Decoded callable payload

    Returns:
        DeletionRequest with a non-empty email

    Raises:
        InvalidArgumentException: email is missing, empty, or not a string
    """
    email = data.get("email") if isinstance(data, dict) else None

    if not isinstance(email, str) or not email:
        logger.info("Rejected deletion request without a valid email")
        raise InvalidArgumentException("A valid email must be provided.")

    return DeletionRequest(email=email)


async def delete_user_by_email_pipeline(
    deletion_service: UserDeletionService,
    data: Any
) -> dict:
    """
    Delete a user account and its profile documents by email.

    Args:
        deletion_service: For account and profile deletion
        data: Decoded callable payload, expected {"email": str}

    Returns:
        dict with success and message
    """
    request = validate_deletion_request(data)
    return await deletion_service.delete_user_by_email(request.email)
