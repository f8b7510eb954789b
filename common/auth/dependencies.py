"""
FastAPI authentication dependencies for callables.

Provides factory functions that create auth dependencies for the callable
protocol. Works with any IdentityProvider implementation.

The callable protocol treats authentication as optional: a request without
an Authorization header runs with no auth context, while a request carrying
a token that fails verification is rejected as unauthenticated.

Example:
    from common.auth import FirebaseAuth, create_callable_auth_dependency

    get_callable_auth = create_callable_auth_dependency(lambda: firebase_auth)

    @router.post("/someCallable")
    async def some_callable(auth: CallableAuth | None = Depends(get_callable_auth)):
        ...
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from fastapi import Header

from common.auth.base import IdentityProvider
from common.utils.exceptions import PermissionDeniedException, UnauthenticatedException

logger = logging.getLogger(__name__)


@dataclass
class CallableAuth:
    """Verified caller identity attached to a callable request."""

    uid: str
    token: Dict[str, Any] = field(default_factory=dict)


def create_callable_auth_dependency(
    get_identity_provider: Callable[[], IdentityProvider],
    header_name: str = "Authorization",
    scheme: str = "Bearer",
):
    """
    Factory to create the callable auth dependency.

    Args:
        get_identity_provider: Callable that returns the IdentityProvider instance
        header_name: Header to extract token from (default: Authorization)
        scheme: Auth scheme prefix (default: Bearer)

    Returns:
        A FastAPI dependency returning CallableAuth, or None when no
        Authorization header was sent
    """

    async def get_callable_auth(
        authorization: Optional[str] = Header(None, alias=header_name),
    ) -> Optional[CallableAuth]:
        """
        Verify the caller's ID token if one was sent.

        Raises:
            UnauthenticatedException: If a token is present but invalid
        """
        if not authorization:
            return None

        prefix = f"{scheme} "
        if not authorization.startswith(prefix):
            raise UnauthenticatedException()

        token = authorization[len(prefix) :].strip()
        if not token:
            raise UnauthenticatedException()

        provider = get_identity_provider()
        try:
            claims = await provider.verify_token(token)
        except ValueError as e:
            logger.warning(f"Rejected callable ID token: {e}")
            raise UnauthenticatedException()

        uid = claims.get("uid") or claims.get("sub")
        if not uid:
            raise UnauthenticatedException()

        return CallableAuth(uid=uid, token=claims)

    return get_callable_auth


def require_admin_claim(
    auth: Optional[CallableAuth],
    claim: str = "isAdmin",
) -> CallableAuth:
    """
    Check that the caller carries a truthy admin custom claim.

    Args:
        auth: Verified caller, or None for anonymous calls
        claim: Name of the custom claim granting admin rights

    Returns:
        The caller's CallableAuth

    Raises:
        PermissionDeniedException: If the caller is anonymous or not an admin
    """
    if auth is None or not auth.token.get(claim):
        raise PermissionDeniedException("Admins only.")
    return auth
