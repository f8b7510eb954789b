"""
Database module - Async Firestore connection bound to a Firebase app.

Usage:
    from common.database import Firestore, set_main_database, get_main_database

    # Set up singleton
    db = Firestore()
    db.connect(app=firebase_app)
    set_main_database(db)

    # Access anywhere
    users = get_main_database().collection("users")
"""

from common.database.firestore import (
    Firestore,
    # Singleton management
    set_main_database,
    get_main_database,
)

__all__ = [
    "Firestore",
    # Singleton management
    "set_main_database",
    "get_main_database",
]
