"""
User services.
"""

from functions.user.services.user_deletion_service import UserDeletionService

__all__ = ["UserDeletionService"]
