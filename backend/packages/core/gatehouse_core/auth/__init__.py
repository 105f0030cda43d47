"""
Authentication utilities.

Provides password hashing and JWT token management.
"""

from .jwt import (
    JWTConfig,
    TokenData,
    TokenIssuer,
    create_access_token,
    create_refresh_token,
    verify_token,
)
from .password import hash_password, verify_password

__all__ = [
    "JWTConfig",
    "TokenData",
    "TokenIssuer",
    "create_access_token",
    "create_refresh_token",
    "verify_token",
    "hash_password",
    "verify_password",
]
