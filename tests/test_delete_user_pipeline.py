"""Tests for deleteUserByEmail payload validation and pipeline orchestration."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from common.utils.exceptions import InvalidArgumentException
from functions.user import pipelines


@pytest.fixture
def deletion_service():
    service = MagicMock()
    service.delete_user_by_email = AsyncMock(
        return_value={"success": True, "message": "User a@x.com deleted successfully."}
    )
    return service


class TestValidateDeletionRequest:
    def test_accepts_non_empty_string(self):
        request = pipelines.validate_deletion_request({"email": "a@x.com"})
        assert request.email == "a@x.com"

    def test_ignores_extra_fields(self):
        request = pipelines.validate_deletion_request({"email": "a@x.com", "reason": "spam"})
        assert request.email == "a@x.com"

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"email": ""},
            {"email": None},
            {"email": 42},
            {"email": True},
            {"email": ["a@x.com"]},
            {"email": {"value": "a@x.com"}},
            None,
            "a@x.com",
            ["a@x.com"],
        ],
    )
    def test_rejects_missing_or_non_string_email(self, data):
        with pytest.raises(InvalidArgumentException) as exc_info:
            pipelines.validate_deletion_request(data)

        assert exc_info.value.message == "A valid email must be provided."
        assert exc_info.value.status == "INVALID_ARGUMENT"
        assert exc_info.value.status_code == 400


class TestDeleteUserByEmailPipeline:
    @pytest.mark.asyncio
    async def test_delegates_to_service(self, deletion_service):
        result = await pipelines.delete_user_by_email_pipeline(
            deletion_service=deletion_service,
            data={"email": "a@x.com"},
        )

        assert result == {"success": True, "message": "User a@x.com deleted successfully."}
        deletion_service.delete_user_by_email.assert_awaited_once_with("a@x.com")

    @pytest.mark.asyncio
    async def test_invalid_payload_never_reaches_service(self, deletion_service):
        with pytest.raises(InvalidArgumentException):
            await pipelines.delete_user_by_email_pipeline(
                deletion_service=deletion_service,
                data={"email": 7},
            )

        deletion_service.delete_user_by_email.assert_not_awaited()
