"""
Service layer.

Business logic services for the application.
"""

from .auth_service import AuthSessionService

__all__ = ["AuthSessionService"]
