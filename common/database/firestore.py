"""
Firestore connection manager using the Firebase Admin async client.

This module provides async Firestore connectivity bound to an initialized
Firebase app. Collections are looked up by name at call time, keeping the
database infrastructure separate from application-specific schemas.

Example:
    from common.database import Firestore

    db = Firestore()
    db.connect(app=firebase_app)
    users = db.collection("users")

Singleton access:
    from common.database import set_main_database, get_main_database

    set_main_database(db)
    main_db = get_main_database()
"""

import logging
from typing import Optional

import firebase_admin
from firebase_admin import firestore_async
from google.cloud.firestore import AsyncClient, AsyncCollectionReference

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────
# Singleton database instance
# ─────────────────────────────────────────────────────────────────

_main_database: Optional["Firestore"] = None


class Firestore:
    """Firestore connection manager."""

    def __init__(self):
        self._client: Optional[AsyncClient] = None
        self._database_id: Optional[str] = None

    def connect(
        self,
        app: Optional[firebase_admin.App] = None,
        database_id: Optional[str] = None,
    ) -> None:
        """
        Create the async Firestore client for a Firebase app.

        Args:
            app: Initialized Firebase app (default app when None)
            database_id: Named database, None for "(default)"
        """
        name = database_id or "(default)"
        logger.info(f"Connecting to Firestore database: {name}")

        try:
            self._client = firestore_async.client(app=app, database_id=database_id)
            self._database_id = name
            logger.info(f"Successfully connected to Firestore database: {name}")
        except Exception as e:
            logger.error(f"Failed to connect to Firestore: {e}")
            raise

    def disconnect(self) -> None:
        """Release the Firestore client."""
        if self._client:
            logger.info(f"Disconnecting from Firestore database: {self._database_id}")
            self._client = None
            self._database_id = None

    @property
    def is_connected(self) -> bool:
        """Check if a client has been created."""
        return self._client is not None

    @property
    def database_id(self) -> Optional[str]:
        """Get the current database id."""
        return self._database_id

    @property
    def client(self) -> AsyncClient:
        """Get the underlying async Firestore client."""
        if self._client is None:
            raise RuntimeError("Database not connected")
        return self._client

    def collection(self, name: str) -> AsyncCollectionReference:
        """
        Get a collection reference by name.

        Args:
            name: Collection name

        Returns:
            AsyncCollectionReference instance
        """
        if self._client is None:
            logger.error("Attempted to get collection without database connection")
            raise RuntimeError("Database not connected")
        logger.debug(f"Getting collection: {name}")
        return self._client.collection(name)


# ─────────────────────────────────────────────────────────────────
# Singleton initialization and getters
# ─────────────────────────────────────────────────────────────────

def set_main_database(db: "Firestore") -> None:
    """
    Set the main database singleton from an existing Firestore instance.

    Args:
        db: Firestore instance to use as main database
    """
    global _main_database
    _main_database = db
    logger.info("Main database singleton set")


def get_main_database() -> "Firestore":
    """
    Get the main application database singleton.

    Returns:
        Firestore instance

    Raises:
        RuntimeError: If database not initialized
    """
    if _main_database is None:
        raise RuntimeError("Main database not initialized. Call set_main_database() first.")
    return _main_database
