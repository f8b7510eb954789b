"""Tests for startup service wiring."""

import pytest
from unittest.mock import MagicMock

from common.auth import FirebaseAuth
from common.database import firestore
from functions import dependencies
from functions.user import dependencies as user_dependencies
from functions.user.services.user_deletion_service import UserDeletionService


@pytest.fixture(autouse=True)
def fresh_singletons(monkeypatch):
    monkeypatch.setattr(dependencies, "_identity_provider", None)
    monkeypatch.setattr(user_dependencies, "_user_deletion_service", None)
    monkeypatch.setattr(firestore, "_main_database", None)


class TestInitAllServices:
    def test_wires_services_to_main_database(self, mock_db):
        firestore.set_main_database(mock_db)

        dependencies.init_all_services(firebase_app=MagicMock(), users_collection="profiles")

        assert isinstance(dependencies.get_identity_provider(), FirebaseAuth)
        assert isinstance(user_dependencies.get_user_deletion_service(), UserDeletionService)
        mock_db.collection.assert_called_once_with("profiles")

    def test_requires_main_database(self):
        with pytest.raises(RuntimeError):
            dependencies.init_all_services(firebase_app=MagicMock())

    def test_getters_before_init_raise(self):
        with pytest.raises(RuntimeError):
            dependencies.get_identity_provider()
        with pytest.raises(RuntimeError):
            user_dependencies.get_user_deletion_service()
