"""
User System

Deletes user accounts by email across Firebase Authentication and the
Firestore profile collection.
"""

from functions.user.services.user_deletion_service import UserDeletionService

__all__ = [
    "UserDeletionService",
]
