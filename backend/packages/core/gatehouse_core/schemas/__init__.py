"""
Pydantic schemas for stored records and API requests and responses.
"""

from .auth import AccessTokenResponse, CurrentAdminResponse, LoginRequest, TokenPair
from .user import UserRecord

__all__ = [
    "AccessTokenResponse",
    "CurrentAdminResponse",
    "LoginRequest",
    "TokenPair",
    "UserRecord",
]
