"""
FastAPI router for User callables.

Exposes deleteUserByEmail over the Firebase callable protocol.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Request

from common.auth import CallableAuth, require_admin_claim
from common.callables import read_callable_data
from functions.config import Settings, get_settings
from functions.dependencies import get_callable_auth
from functions.user.dependencies import get_user_deletion_service
from functions.user.models import DeleteUserByEmailResponse, DeletionResult
from functions.user.services.user_deletion_service import UserDeletionService
from functions.user import pipelines

logger = logging.getLogger(__name__)

router = APIRouter(tags=["User"])


@router.post("/deleteUserByEmail", response_model=DeleteUserByEmailResponse)
async def delete_user_by_email(
    request: Request,
    auth: Annotated[Optional[CallableAuth], Depends(get_callable_auth)],
    deletion_service: Annotated[UserDeletionService, Depends(get_user_deletion_service)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """
    Delete a user account and its profile documents by email.

    Body: {"data": {"email": "..."}}. Fails with INVALID_ARGUMENT,
    NOT_FOUND or INTERNAL; with REQUIRE_ADMIN enabled, non-admin
    callers get PERMISSION_DENIED.
    """
    data = await read_callable_data(request)

    if settings.REQUIRE_ADMIN:
        admin = require_admin_claim(auth, settings.ADMIN_CLAIM)
        logger.info(f"deleteUserByEmail called by admin {admin.uid}")

    result = await pipelines.delete_user_by_email_pipeline(
        deletion_service=deletion_service,
        data=data
    )

    return DeleteUserByEmailResponse(result=DeletionResult(**result))
