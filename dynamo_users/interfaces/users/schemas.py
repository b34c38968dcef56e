"""
Pydantic schemas for users API request/response validation.

These schemas define the API contract. Missing name/email fields decode
as empty strings so blank-field rules are enforced in one place, by the
use cases. No business logic belongs here.
"""

from pydantic import BaseModel, Field


class UserWriteRequest(BaseModel):
    """Request body shared by the create and update endpoints.

    Attributes:
        name: Display name. Blank values are rejected with 400.
        email: Contact email. Blank values are rejected with 400.
    """

    name: str = Field(default="", description="User display name")
    email: str = Field(default="", description="User email")


class UserResponse(BaseModel):
    """A user as returned by the API."""

    id: str
    name: str
    email: str
    created_at: str = Field(..., description="RFC 3339 creation timestamp")


class MessageResponse(BaseModel):
    """Confirmation returned by the update endpoint."""

    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
