"""
Gatehouse Core Package.

This package contains the credential store, token issuance and the
authentication session service for the Gatehouse admin API.
"""

__version__ = "0.1.0"

from .logging_config import get_logger, init_logging

__all__ = ["init_logging", "get_logger"]
