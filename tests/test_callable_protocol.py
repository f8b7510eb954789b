"""Tests for callable auth, error codes and the error envelope."""

import json
import pytest
from unittest.mock import AsyncMock, MagicMock

from common.auth.dependencies import (
    CallableAuth,
    create_callable_auth_dependency,
    require_admin_claim,
)
from common.callables.handlers import api_exception_handler, unhandled_exception_handler
from common.utils.exceptions import (
    APIException,
    NotFoundException,
    PermissionDeniedException,
    UnauthenticatedException,
)


@pytest.fixture
def identity_provider():
    provider = MagicMock()
    provider.verify_token = AsyncMock(return_value={"uid": "uid_1", "isAdmin": True})
    return provider


@pytest.fixture
def get_callable_auth(identity_provider):
    return create_callable_auth_dependency(lambda: identity_provider)


@pytest.fixture
def request_stub():
    request = MagicMock()
    request.url.path = "/deleteUserByEmail"
    return request


class TestCallableAuthDependency:
    @pytest.mark.asyncio
    async def test_no_header_is_anonymous(self, get_callable_auth, identity_provider):
        assert await get_callable_auth(authorization=None) is None
        identity_provider.verify_token.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_valid_token(self, get_callable_auth):
        auth = await get_callable_auth(authorization="Bearer abc")

        assert auth == CallableAuth(uid="uid_1", token={"uid": "uid_1", "isAdmin": True})

    @pytest.mark.parametrize("header", ["Basic abc", "Bearer ", "abc"])
    @pytest.mark.asyncio
    async def test_malformed_header_is_unauthenticated(self, get_callable_auth, header):
        with pytest.raises(UnauthenticatedException):
            await get_callable_auth(authorization=header)

    @pytest.mark.asyncio
    async def test_rejected_token_is_unauthenticated(self, get_callable_auth, identity_provider):
        identity_provider.verify_token.side_effect = ValueError("Token has been revoked")

        with pytest.raises(UnauthenticatedException) as exc_info:
            await get_callable_auth(authorization="Bearer abc")

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_claims_without_uid_are_unauthenticated(self, get_callable_auth, identity_provider):
        identity_provider.verify_token.return_value = {"email": "a@x.com"}

        with pytest.raises(UnauthenticatedException):
            await get_callable_auth(authorization="Bearer abc")


class TestRequireAdminClaim:
    def test_admin_passes(self):
        auth = CallableAuth(uid="uid_1", token={"isAdmin": True})
        assert require_admin_claim(auth) is auth

    def test_custom_claim_name(self):
        auth = CallableAuth(uid="uid_1", token={"role_admin": True})
        assert require_admin_claim(auth, claim="role_admin") is auth

    @pytest.mark.parametrize(
        "auth",
        [None, CallableAuth(uid="uid_1"), CallableAuth(uid="uid_1", token={"isAdmin": False})],
    )
    def test_non_admin_is_denied(self, auth):
        with pytest.raises(PermissionDeniedException) as exc_info:
            require_admin_claim(auth)

        assert exc_info.value.message == "Admins only."
        assert exc_info.value.status_code == 403


class TestAPIException:
    def test_code_maps_to_status(self):
        exc = NotFoundException("missing")

        assert exc.code == "not-found"
        assert exc.status == "NOT_FOUND"
        assert exc.status_code == 404
        assert exc.detail == {"status": "NOT_FOUND", "message": "missing"}

    def test_unknown_code_rejected(self):
        with pytest.raises(ValueError):
            APIException("teapot", "short and stout")


class TestErrorEnvelope:
    @pytest.mark.asyncio
    async def test_api_exception_envelope(self, request_stub):
        response = await api_exception_handler(
            request_stub, NotFoundException("User with email a@x.com not found.")
        )

        assert response.status_code == 404
        assert json.loads(response.body) == {
            "error": {"status": "NOT_FOUND", "message": "User with email a@x.com not found."}
        }

    @pytest.mark.asyncio
    async def test_details_are_forwarded(self, request_stub):
        response = await api_exception_handler(
            request_stub, NotFoundException("missing", details={"email": "a@x.com"})
        )

        assert json.loads(response.body)["error"]["details"] == {"email": "a@x.com"}

    @pytest.mark.asyncio
    async def test_unhandled_exception_hides_message(self, request_stub):
        response = await unhandled_exception_handler(request_stub, RuntimeError("secret detail"))

        assert response.status_code == 500
        assert json.loads(response.body) == {
            "error": {"status": "INTERNAL", "message": "INTERNAL"}
        }
