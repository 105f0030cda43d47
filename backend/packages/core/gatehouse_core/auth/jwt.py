"""
JWT token management.

Signs and verifies access and refresh tokens with python-jose.
"""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Literal

from jose import JWTError, jwt
from pydantic import BaseModel, ConfigDict, Field, model_validator

TokenType = Literal["access", "refresh"]


class JWTConfig(BaseModel):
    """JWT signing configuration. Loaded once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    secret_key: str = Field(..., min_length=16)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(15, gt=0)
    refresh_token_expire_minutes: int = Field(24 * 60, gt=0)

    @model_validator(mode="after")
    def _refresh_outlives_access(self) -> "JWTConfig":
        if self.refresh_token_expire_minutes <= self.access_token_expire_minutes:
            raise ValueError("refresh token TTL must exceed access token TTL")
        return self

    @property
    def access_ttl(self) -> timedelta:
        return timedelta(minutes=self.access_token_expire_minutes)

    @property
    def refresh_ttl(self) -> timedelta:
        return timedelta(minutes=self.refresh_token_expire_minutes)


class TokenData(BaseModel):
    """Decoded token claims."""

    sub: str
    type: TokenType
    exp: int
    iat: int
    jti: str


def _create_token(
    subject: str, token_type: TokenType, ttl: timedelta, config: JWTConfig
) -> str:
    now = datetime.now(UTC)
    claims = {
        "sub": str(subject),
        "type": token_type,
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
        # Distinguishes tokens issued for the same subject within one second
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(claims, config.secret_key, algorithm=config.algorithm)


def create_access_token(subject: str, config: JWTConfig) -> str:
    """
    Create a short-lived access token.

    Args:
        subject: Token subject (username).
        config: JWT configuration.

    Returns:
        Encoded JWT.
    """
    return _create_token(subject, "access", config.access_ttl, config)


def create_refresh_token(subject: str, config: JWTConfig) -> str:
    """
    Create a long-lived refresh token.

    Args:
        subject: Token subject (username).
        config: JWT configuration.

    Returns:
        Encoded JWT.
    """
    return _create_token(subject, "refresh", config.refresh_ttl, config)


def verify_token(token: str, config: JWTConfig) -> TokenData | None:
    """
    Verify a token's signature and expiry.

    Args:
        token: Encoded JWT.
        config: JWT configuration.

    Returns:
        Decoded claims, or None if the token is invalid or expired.
    """
    try:
        payload = jwt.decode(token, config.secret_key, algorithms=[config.algorithm])
        return TokenData.model_validate(payload)
    except (JWTError, ValueError):
        return None


class TokenIssuer:
    """Issues access and refresh tokens for a subject."""

    def __init__(self, config: JWTConfig) -> None:
        self.config = config

    @property
    def refresh_ttl(self) -> timedelta:
        return self.config.refresh_ttl

    def issue_access_token(self, subject: str) -> str:
        return create_access_token(subject, self.config)

    def issue_refresh_token(self, subject: str) -> str:
        return create_refresh_token(subject, self.config)

    def verify(self, token: str, expected_type: TokenType | None = None) -> TokenData | None:
        """Verify a token, optionally requiring a specific token type."""
        token_data = verify_token(token, self.config)
        if token_data is None:
            return None
        if expected_type is not None and token_data.type != expected_type:
            return None
        return token_data
