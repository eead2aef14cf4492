"""Authentication DTOs."""

from pydantic import BaseModel, Field


class TokenVerifyRequest(BaseModel):
    """Token verification request."""

    token: str = Field(min_length=1, max_length=512)


class TokenVerifyResponse(BaseModel):
    """Token verification result."""

    success: bool
    message: str
