"""
Abstract identity provider interface.

Defines the contract that identity providers must implement so callables
can look up, delete, and authenticate accounts without depending on a
concrete SDK. Tests substitute fakes through this interface.

Example:
    from common.auth import IdentityProvider, FirebaseAuth

    def get_identity_provider(settings) -> IdentityProvider:
        return FirebaseAuth(credentials_path=settings.FIREBASE_CREDENTIALS_PATH)
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any


class IdentityProvider(ABC):
    """
    Abstract identity provider.

    All methods are async to support both sync and async SDKs.
    """

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Look up an account by email address.

        Args:
            email: The account's email address

        Returns:
            Account info dict (at minimum: uid, email) or None if not found

        Raises:
            ValueError: If the lookup itself fails
        """
        pass

    @abstractmethod
    async def delete_user(self, user_id: str) -> bool:
        """
        Delete an account.

        Args:
            user_id: The account's unique id

        Returns:
            True if the account was deleted, False if it no longer exists

        Raises:
            ValueError: If deletion fails
        """
        pass

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify an ID token presented by a client.

        Args:
            token: The token to verify

        Returns:
            Dictionary containing decoded token claims (at minimum: uid)

        Raises:
            ValueError: If token is invalid, expired, or revoked
        """
        pass
