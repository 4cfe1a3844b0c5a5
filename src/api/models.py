"""
API response models.

Pydantic models documenting the response contract in the OpenAPI schema.
Request bodies are deliberately untyped: the handlers validate them, so
a missing field answers 400 MissingParam rather than a framework 422.
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthResponse(BaseModel):
    """Response model for successful sign-up or login."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    access_token: str = Field(..., alias="accessToken")


class ErrorResponse(BaseModel):
    """Single-field error payload naming the error kind and offending field."""

    kind: str = Field(..., description="MissingParam, InvalidParam, EmailInUse or ServerError")
    field: str | None = Field(default=None, description="Offending request field, if any")
