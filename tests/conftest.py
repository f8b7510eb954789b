"""Shared test fixtures for duckduckGoose functions tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from common.auth.base import IdentityProvider


SAMPLE_EMAIL = "a@x.com"
SAMPLE_UID = "uid_a1b2c3"


@pytest.fixture
def sample_email():
    return SAMPLE_EMAIL


@pytest.fixture
def sample_account():
    return {
        "uid": SAMPLE_UID,
        "email": SAMPLE_EMAIL,
        "email_verified": True,
        "display_name": "Alex Goose",
        "disabled": False,
    }


@pytest.fixture
def mock_identity_provider(sample_account):
    provider = AsyncMock(spec=IdentityProvider)
    provider.get_user_by_email = AsyncMock(return_value=sample_account)
    provider.delete_user = AsyncMock(return_value=True)
    provider.verify_token = AsyncMock(return_value={"uid": "admin_uid"})
    return provider


def make_snapshot(doc_id: str):
    """A Firestore DocumentSnapshot stand-in exposing .id and .reference."""
    snapshot = MagicMock()
    snapshot.id = doc_id
    snapshot.reference = MagicMock(name=f"ref:{doc_id}")
    return snapshot


@pytest.fixture
def profile_snapshots():
    return [make_snapshot("profile_1"), make_snapshot("profile_2")]


@pytest.fixture
def mock_query(profile_snapshots):
    query = MagicMock()
    # AsyncQuery.get() is a coroutine returning a list of snapshots
    query.get = AsyncMock(return_value=profile_snapshots)
    return query


@pytest.fixture
def mock_collection(mock_query):
    collection = MagicMock()
    collection.where = MagicMock(return_value=mock_query)
    return collection


@pytest.fixture
def mock_batch():
    batch = MagicMock()
    batch.commit = AsyncMock(return_value=[])
    return batch


@pytest.fixture
def mock_db(mock_collection, mock_batch):
    """A connected Firestore manager stand-in."""
    db = MagicMock()
    db.collection = MagicMock(return_value=mock_collection)
    db.client.batch = MagicMock(return_value=mock_batch)
    return db
