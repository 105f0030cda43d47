"""
Authentication schemas.

Request and response models for login and token operations.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginRequest(BaseModel):
    """
    Login request.

    Both fields are optional at the schema level so that a missing value is
    reported by the service as a bad request instead of a validation error.
    """

    username: str | None = None
    password: str | None = None

    @field_validator("username", "password", mode="before")
    @classmethod
    def _non_string_is_missing(cls, value: Any) -> str | None:
        # Numbers, objects and the like count as absent credentials
        return value if isinstance(value, str) else None


class TokenPair(BaseModel):
    """Access and refresh tokens issued by a successful login."""

    access_token: str
    refresh_token: str


class AccessTokenResponse(BaseModel):
    """Login response body. The refresh token travels in a cookie."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")


class CurrentAdminResponse(BaseModel):
    """Identity carried by a valid access token."""

    username: str
