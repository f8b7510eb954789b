"""
User deletion service.

Removes an account from Firebase Authentication and its profile documents
from Firestore. The two stores cannot share a transaction: the auth account
is deleted first, and a failure while cleaning up Firestore leaves the
account deleted with its profile documents still in place.
"""

import logging

from google.cloud.firestore_v1.base_query import FieldFilter

from common.auth.base import IdentityProvider
from common.database import Firestore
from common.utils.exceptions import APIException, InternalServerException, NotFoundException
from common.utils.responses import success_response

logger = logging.getLogger(__name__)


class UserDeletionService:
    """
    Deletes users by email across the identity provider and Firestore.

    Email addresses are never written to the logs; entries carry the
    account uid once it is known.
    """

    GENERIC_FAILURE_MESSAGE = "Failed to delete user."

    def __init__(
        self,
        db: Firestore,
        identity_provider: IdentityProvider,
        users_collection: str = "users",
    ):
        """
        Initialize UserDeletionService.

        Args:
            db: Connected Firestore manager
            identity_provider: For account lookup and deletion
            users_collection: Name of the profile collection
        """
        self._db = db
        self._identity_provider = identity_provider
        self._users_collection = db.collection(users_collection)

    async def delete_user_by_email(self, email: str) -> dict:
        """
        Delete the account registered with an email and its profile documents.

        Args:
            email: Email address of the account to delete

        Returns:
            dict with success=True and a confirmation message

        Raises:
            NotFoundException: No account is registered with the email, or
                it was deleted by a concurrent call before this one got to it
            InternalServerException: Any provider failure during lookup,
                deletion, query or batch commit
        """
        logger.info("Deleting user by email")
        uid = None

        try:
            account = await self._identity_provider.get_user_by_email(email)
            if account is None:
                logger.info("No account registered for the requested email")
                raise NotFoundException(f"User with email {email} not found.")

            uid = account["uid"]
            if not await self._identity_provider.delete_user(uid):
                logger.info(f"Auth account {uid} vanished before deletion")
                raise NotFoundException(f"User with email {email} not found.")
            logger.info(f"Deleted auth account {uid}")

            deleted_count = await self._delete_profile_documents(email)

        except APIException:
            raise
        except Exception as e:
            logger.exception(f"Failed to delete user (uid={uid})")
            raise InternalServerException(str(e) or self.GENERIC_FAILURE_MESSAGE)

        logger.info(f"Deleted {deleted_count} profile document(s) for {uid}")
        return success_response(message=f"User {email} deleted successfully.")

    async def _delete_profile_documents(self, email: str) -> int:
        """
        Delete every profile document whose email field matches, in one batch.

        Args:
            email: Email address to match

        Returns:
            Number of documents deleted
        """
        snapshots = await self._users_collection.where(
            filter=FieldFilter("email", "==", email)
        ).get()

        batch = self._db.client.batch()
        for snapshot in snapshots:
            batch.delete(snapshot.reference)
        await batch.commit()

        return len(snapshots)
