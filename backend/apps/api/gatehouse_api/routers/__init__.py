"""
API router modules.
"""

from . import auth

__all__ = ["auth"]
