"""
Pydantic models for the user callables.
"""

from pydantic import BaseModel, Field, StrictStr


class DeletionRequest(BaseModel):
    """Payload of deleteUserByEmail."""

    email: StrictStr = Field(min_length=1)


class DeletionResult(BaseModel):
    """Outcome of a successful deletion."""

    success: bool
    message: str


class DeleteUserByEmailResponse(BaseModel):
    """Callable envelope returned by deleteUserByEmail."""

    result: DeletionResult
