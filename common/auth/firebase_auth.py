"""
Firebase Admin SDK identity provider.

Uses Firebase Authentication for account lookup, deletion and ID token
verification. Requires the firebase-admin package and service account
credentials (file, dict, environment variables, or Application Default
Credentials when running on GCP).

Example:
    app = initialize_firebase_app(credentials_path="path/to/serviceAccount.json")
    auth = FirebaseAuth(app=app)

    user = await auth.get_user_by_email("user@example.com")
    if user:
        await auth.delete_user(user["uid"])
"""

import asyncio
import logging
import os
from typing import Dict, Any, Optional

import firebase_admin
from dotenv import load_dotenv
from firebase_admin import auth, credentials

from common.auth.base import IdentityProvider

load_dotenv()

logger = logging.getLogger(__name__)


def _get_firebase_credentials_from_env() -> Optional[Dict[str, Any]]:
    """
    Check if Firebase credentials are present in environment variables.
    Returns credentials dict if all required fields are present, None otherwise.
    """
    required_fields = [
        "PROJECT_ID",
        "PRIVATE_KEY",
        "CLIENT_EMAIL",
    ]

    for field in required_fields:
        if not os.environ.get(field):
            return None

    private_key = os.environ.get("PRIVATE_KEY", "").strip('"').strip(",")
    # Keys pasted into .env files usually carry literal "\n" sequences
    if "\\n" in private_key:
        private_key = private_key.replace("\\n", "\n")

    return {
        "type": os.environ.get("TYPE", "service_account").strip('"').strip(","),
        "project_id": os.environ.get("PROJECT_ID", "").strip('"').strip(","),
        "private_key_id": os.environ.get("PRIVATE_KEY_ID", "").strip('"').strip(","),
        "private_key": private_key,
        "client_email": os.environ.get("CLIENT_EMAIL", "").strip('"').strip(","),
        "client_id": os.environ.get("CLIENT_ID", "").strip('"').strip(","),
        "auth_uri": os.environ.get("AUTH_URI", "https://accounts.google.com/o/oauth2/auth").strip('"').strip(","),
        "token_uri": os.environ.get("TOKEN_URI", "https://oauth2.googleapis.com/token").strip('"').strip(","),
        "auth_provider_x509_cert_url": os.environ.get("AUTH_PROVIDER_X509_CERT_URL", "https://www.googleapis.com/oauth2/v1/certs").strip('"').strip(","),
        "client_x509_cert_url": os.environ.get("CLIENT_X509_CERT_URL", "").strip('"').strip(","),
        "universe_domain": os.environ.get("UNIVERSE_DOMAIN", "googleapis.com").strip('"').strip(","),
    }


def initialize_firebase_app(
    credentials_path: Optional[str] = None,
    credentials_dict: Optional[Dict[str, Any]] = None,
    project_id: Optional[str] = None,
) -> firebase_admin.App:
    """
    Initialize the default Firebase app, or return it if already initialized.

    Credentials are resolved in order: file path, dict, service account
    fields in environment variables, Application Default Credentials.

    Args:
        credentials_path: Path to service account JSON file
        credentials_dict: Service account credentials as dict
        project_id: Firebase project ID (optional, inferred from credentials)

    Returns:
        The default firebase_admin.App
    """
    if firebase_admin._apps:
        return firebase_admin.get_app()

    if credentials_path:
        cred = credentials.Certificate(credentials_path)
        source = "file"
    elif credentials_dict:
        cred = credentials.Certificate(credentials_dict)
        source = "dict"
    else:
        env_credentials = _get_firebase_credentials_from_env()
        if env_credentials:
            cred = credentials.Certificate(env_credentials)
            source = "environment"
        else:
            # Use default credentials (for GCP environments)
            cred = credentials.ApplicationDefault()
            source = "application default"

    options = {}
    if project_id:
        options["projectId"] = project_id

    logger.info(f"Initializing Firebase app with {source} credentials")
    return firebase_admin.initialize_app(cred, options)


class FirebaseAuth(IdentityProvider):
    """
    Firebase Admin SDK identity provider.

    Wraps firebase_admin.auth. The SDK is blocking, so each call runs in a
    worker thread. A missing account is reported as None from lookup and
    False from deletion; other SDK errors are re-raised as ValueError
    carrying the SDK message.
    """

    def __init__(self, app: Optional[firebase_admin.App] = None):
        """
        Initialize Firebase identity provider.

        Args:
            app: Firebase app to bind to (default app when None)
        """
        self._app = app
        self._auth = auth

    async def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Get Firebase account by email, or None if no account exists."""
        try:
            user = await asyncio.to_thread(
                self._auth.get_user_by_email, email, app=self._app
            )
        except self._auth.UserNotFoundError:
            return None
        except Exception as e:
            raise ValueError(f"Failed to get user: {e}")

        return {
            "uid": user.uid,
            "email": user.email,
            "email_verified": user.email_verified,
            "display_name": user.display_name,
            "disabled": user.disabled,
        }

    async def delete_user(self, user_id: str) -> bool:
        """Delete a Firebase account, False if it was already gone."""
        try:
            await asyncio.to_thread(self._auth.delete_user, user_id, app=self._app)
        except self._auth.UserNotFoundError:
            logger.info(f"Account {user_id} already deleted")
            return False
        except Exception as e:
            raise ValueError(f"Failed to delete user: {e}")
        return True

    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify a Firebase ID token."""
        try:
            return await asyncio.to_thread(
                self._auth.verify_id_token, token, app=self._app
            )
        except self._auth.RevokedIdTokenError:
            raise ValueError("Token has been revoked")
        except self._auth.ExpiredIdTokenError:
            raise ValueError("Token has expired")
        except self._auth.InvalidIdTokenError as e:
            raise ValueError(f"Invalid token: {e}")
        except Exception as e:
            raise ValueError(f"Token verification failed: {e}")
